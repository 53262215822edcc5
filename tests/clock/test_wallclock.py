from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from clockhands.clock import wallclock
from clockhands.clock.angles import TimeOfDay
from clockhands.clock.wallclock import (WallClock, decompose_duration,
                                        format_readout)


class TestFormatReadout:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (datetime(2024, 1, 1, 9, 5, 7, 45_000), "09:05:07.045"),
            (datetime(2024, 1, 1, 0, 0, 0), "00:00:00.000"),
            (datetime(2024, 1, 1, 23, 59, 59, 999_999), "23:59:59.999"),
        ],
    )
    def test_zero_padded_fields(self, value: datetime, expected: str) -> None:
        assert format_readout(value) == expected


class TestDecomposeDuration:
    now = datetime(2024, 1, 1, 23, 59, 0)

    def test_seconds_only_reports_the_duration_itself(self) -> None:
        result = decompose_duration(
            timedelta(seconds=75, milliseconds=250), self.now, seconds_only=True
        )
        assert result == TimeOfDay(0, 0, 75, 250)

    def test_full_decomposition_rolls_over_midnight(self) -> None:
        result = decompose_duration(timedelta(seconds=90, milliseconds=500), self.now)
        assert result == TimeOfDay(0, 0, 30, 500.0)

    def test_sub_millisecond_remainder_is_dropped(self) -> None:
        result = decompose_duration(timedelta(microseconds=1_999), self.now)
        assert result.millisecond == 1.0


class TestWallClock:
    def test_now_never_runs_backwards(self) -> None:
        first = WallClock.now()
        second = WallClock.now()
        assert second >= first

    def test_tick_sleeps_for_the_duration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        slept: list[float] = []
        monkeypatch.setattr(wallclock.time, "sleep", slept.append)

        WallClock.tick(timedelta(seconds=1, milliseconds=250))

        assert slept == [1.25]


class TestClockPackageExports:
    def test_time_helpers_are_importable_from_the_package(self) -> None:
        from clockhands import clock

        assert clock.decompose_duration is decompose_duration
        assert clock.WallClock is WallClock
        assert clock.format_readout(datetime(2024, 1, 1, 7, 8, 9)) == "07:08:09.000"
        assert clock.compute_angles(clock.TimeOfDay.from_seconds(3600.0)).hours == 1.0
