"""Tests for :mod:`clockhands.clock.angles`."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from clockhands.clock.angles import (HandAngles, Point, TimeOfDay,
                                     angles_since_midnight, compute_angles,
                                     dial_marks, polar_to_cartesian)
from clockhands.utilities.env import HourDial

TOLERANCE = 1e-5

hours = st.integers(min_value=0, max_value=23)
minutes = st.integers(min_value=0, max_value=59)
seconds = st.integers(min_value=0, max_value=59)
milliseconds = st.integers(min_value=0, max_value=999)


class TestComputeAngles:
    """Hand positions derived from a sampled time of day."""

    def test_midnight_is_all_zero(self) -> None:
        angles = compute_angles(TimeOfDay(0, 0, 0, 0))
        assert angles == HandAngles(0.0, 0.0, 0.0)

    def test_noon_keeps_hour_on_24_hour_scale(self) -> None:
        angles = compute_angles(TimeOfDay(12, 0, 0, 0))
        assert angles.seconds == 0.0
        assert angles.minutes == 0.0
        assert angles.hours == 12.0

    def test_last_second_of_the_day(self) -> None:
        angles = compute_angles(TimeOfDay(23, 59, 59, 0))
        assert angles.seconds == 59.0
        assert angles.minutes == pytest.approx(59.98333, abs=TOLERANCE)
        assert angles.hours == pytest.approx(23.99972, abs=TOLERANCE)
        assert angles.wrapped(HourDial.TWELVE).hours == pytest.approx(
            11.99972, abs=TOLERANCE
        )
        assert angles.wrapped(HourDial.TWENTY_FOUR).hours == pytest.approx(
            23.99972, abs=TOLERANCE
        )

    def test_half_past_three(self) -> None:
        angles = compute_angles(TimeOfDay(3, 30, 0))
        assert angles.minutes == 30.0
        assert angles.hours == 3.5

    def test_accepts_datetime(self) -> None:
        angles = compute_angles(datetime(2023, 1, 1, 12, 59, 59, 500_000))
        assert angles.seconds == pytest.approx(59.5)
        assert angles.minutes == pytest.approx(59 + 59.5 / 60)
        assert angles.hours == pytest.approx(12 + angles.minutes / 60)

    @given(hour=hours, minute=minutes, second=seconds, millisecond=milliseconds)
    def test_each_hand_carries_the_fraction_of_the_next(
        self, hour: int, minute: int, second: int, millisecond: int
    ) -> None:
        angles = compute_angles(TimeOfDay(hour, minute, second, millisecond))

        assert angles.seconds == pytest.approx(second + millisecond / 1000, abs=TOLERANCE)
        assert angles.minutes == pytest.approx(minute + angles.seconds / 60, abs=TOLERANCE)
        assert angles.hours == pytest.approx(hour + angles.minutes / 60, abs=TOLERANCE)

    @given(second=seconds, first=milliseconds, second_ms=milliseconds)
    def test_seconds_hand_is_monotonic_in_milliseconds(
        self, second: int, first: int, second_ms: int
    ) -> None:
        low, high = sorted((first, second_ms))
        assert (
            compute_angles(TimeOfDay(0, 0, second, low)).seconds
            <= compute_angles(TimeOfDay(0, 0, second, high)).seconds
        )


class TestTimeOfDay:
    def test_from_datetime_keeps_fractional_milliseconds(self) -> None:
        time = TimeOfDay.from_datetime(datetime(2024, 5, 1, 9, 15, 30, 123_456))
        assert time == TimeOfDay(9, 15, 30, 123.456)

    def test_from_seconds_splits_fields(self) -> None:
        time = TimeOfDay.from_seconds(86_399.5)
        assert (time.hour, time.minute, time.second) == (23, 59, 59)
        assert time.millisecond == pytest.approx(500.0)
        assert time.seconds_since_midnight == pytest.approx(86_399.5)


class TestAnglesSinceMidnight:
    def test_zero_elapsed_counts_from_midnight(self) -> None:
        angles = angles_since_midnight(datetime(2023, 1, 1, 3, 30))
        assert angles.seconds == 12_600.0
        assert angles.minutes == 210.0
        assert angles.hours == 3.5

    def test_wrapped_matches_time_of_day_angles(self) -> None:
        start = datetime(2023, 1, 1, 3, 30, 15)
        continuous = angles_since_midnight(start).wrapped(HourDial.TWELVE)
        sampled = compute_angles(start)
        assert continuous.seconds == pytest.approx(sampled.seconds)
        assert continuous.minutes == pytest.approx(sampled.minutes)
        assert continuous.hours == pytest.approx(sampled.hours)

    def test_keeps_counting_past_midnight(self) -> None:
        angles = angles_since_midnight(
            datetime(2023, 1, 1, 23, 59, 59), timedelta(seconds=2)
        )
        assert angles.hours == pytest.approx(86_401 / 3600)

    @given(
        deltas=st.lists(
            st.integers(min_value=0, max_value=10_000_000), min_size=2, max_size=20
        )
    )
    def test_monotonic_in_elapsed_time(self, deltas: list[int]) -> None:
        start = datetime(2023, 6, 1, 18, 45, 12)
        samples = [
            angles_since_midnight(start, timedelta(milliseconds=delta))
            for delta in sorted(deltas)
        ]
        for before, after in zip(samples, samples[1:]):
            assert before.seconds <= after.seconds
            assert before.minutes <= after.minutes
            assert before.hours <= after.hours


class TestRadians:
    def test_quarter_and_half_turns(self) -> None:
        sec, minute, hour = HandAngles(15.0, 30.0, 6.0).to_radians()
        assert sec == pytest.approx(math.pi / 2)
        assert minute == pytest.approx(math.pi)
        assert hour == pytest.approx(math.pi)

    def test_full_turn(self) -> None:
        assert HandAngles(60.0, 60.0, 12.0).to_radians() == pytest.approx(
            (math.tau, math.tau, math.tau)
        )

    def test_24_hour_dial_halves_the_hour_rate(self) -> None:
        _, _, hour = HandAngles(0.0, 0.0, 12.0).to_radians(HourDial.TWENTY_FOUR)
        assert hour == pytest.approx(math.pi)

    def test_addition_is_component_wise(self) -> None:
        total = HandAngles(1.0, 2.0, 3.0) + HandAngles(0.5, 0.25, 0.125)
        assert total == HandAngles(1.5, 2.25, 3.125)


class TestPolarToCartesian:
    def test_zero_angle_points_up(self) -> None:
        center = Point(100.0, 100.0)
        assert polar_to_cartesian(center, 50.0, 0.0) == Point(100.0, 50.0)

    def test_quarter_turn_points_right(self) -> None:
        result = polar_to_cartesian(Point(0.0, 0.0), 10.0, math.pi / 2)
        assert result.x == pytest.approx(10.0, abs=TOLERANCE)
        assert result.y == pytest.approx(0.0, abs=TOLERANCE)

    def test_half_turn_points_down(self) -> None:
        result = polar_to_cartesian(Point(0.0, 0.0), 10.0, math.pi)
        assert result.x == pytest.approx(0.0, abs=TOLERANCE)
        assert result.y == pytest.approx(10.0, abs=TOLERANCE)

    @given(
        cx=st.floats(-1e4, 1e4),
        cy=st.floats(-1e4, 1e4),
        radius=st.floats(0, 1e4),
        angle=st.floats(-100, 100),
    )
    def test_point_lies_on_the_circle(
        self, cx: float, cy: float, radius: float, angle: float
    ) -> None:
        result = polar_to_cartesian(Point(cx, cy), radius, angle)
        assert math.hypot(result.x - cx, result.y - cy) == pytest.approx(
            radius, abs=1e-6
        )

    def test_dial_marks_agree_with_scalar_transform(self) -> None:
        center = Point(50.0, 60.0)
        marks = dial_marks(center, 20.0, 4)
        expected = np.array([[50.0, 40.0], [70.0, 60.0], [50.0, 80.0], [30.0, 60.0]])
        assert marks.shape == (4, 2)
        assert np.allclose(marks, expected)
