"""Hand-angle arithmetic for the analog clock face.

Angles are expressed in dial units: seconds and minutes run over 60, hours over
12 or 24 depending on the dial. :meth:`HandAngles.to_radians` converts them for
drawing, where 0 points straight up and positive angles run clockwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

import numpy as np

from clockhands.utilities.env import HourDial

SECONDS_PER_MINUTE = 60.0
MINUTES_PER_HOUR = 60.0
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR


@dataclass(frozen=True, slots=True)
class TimeOfDay:
    hour: int
    minute: int
    second: int
    millisecond: float = 0.0

    @classmethod
    def from_datetime(cls, value: datetime) -> TimeOfDay:
        return cls(
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond / 1000.0,
        )

    @classmethod
    def from_seconds(cls, seconds_since_midnight: float) -> TimeOfDay:
        whole, fraction = divmod(seconds_since_midnight, 1.0)
        minutes, second = divmod(int(whole), 60)
        hour, minute = divmod(minutes, 60)
        return cls(hour=hour, minute=minute, second=second, millisecond=fraction * 1000.0)

    @property
    def seconds_since_midnight(self) -> float:
        return (
            self.hour * SECONDS_PER_HOUR
            + self.minute * SECONDS_PER_MINUTE
            + self.second
            + self.millisecond / 1000.0
        )


@dataclass(frozen=True, slots=True)
class HandAngles:
    seconds: float
    minutes: float
    hours: float

    @classmethod
    def zero(cls) -> HandAngles:
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: HandAngles) -> HandAngles:
        return HandAngles(
            seconds=self.seconds + other.seconds,
            minutes=self.minutes + other.minutes,
            hours=self.hours + other.hours,
        )

    def __sub__(self, other: HandAngles) -> HandAngles:
        return HandAngles(
            seconds=self.seconds - other.seconds,
            minutes=self.minutes - other.minutes,
            hours=self.hours - other.hours,
        )

    def wrapped(self, hour_dial: HourDial = HourDial.TWELVE) -> HandAngles:
        """Reduce each hand onto its dial (60, 60 and 12 or 24)."""

        return HandAngles(
            seconds=self.seconds % SECONDS_PER_MINUTE,
            minutes=self.minutes % MINUTES_PER_HOUR,
            hours=self.hours % hour_dial.hours,
        )

    def to_radians(
        self, hour_dial: HourDial = HourDial.TWELVE
    ) -> tuple[float, float, float]:
        """Return ``(seconds, minutes, hours)`` as radians for drawing."""

        return (
            self.seconds / SECONDS_PER_MINUTE * math.tau,
            self.minutes / MINUTES_PER_HOUR * math.tau,
            self.hours / hour_dial.hours * math.tau,
        )


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


def compute_angles(time: TimeOfDay | datetime) -> HandAngles:
    """Return the hand positions for ``time``; hours are left on a 24-hour scale."""

    if isinstance(time, datetime):
        time = TimeOfDay.from_datetime(time)
    seconds = time.second + time.millisecond / 1000.0
    minutes = time.minute + seconds / SECONDS_PER_MINUTE
    hours = time.hour + minutes / MINUTES_PER_HOUR
    return HandAngles(seconds=seconds, minutes=minutes, hours=hours)


def angles_since_midnight(start: datetime, elapsed: timedelta = timedelta(0)) -> HandAngles:
    """Continuous hand positions for ``start + elapsed``, counted from ``start``'s midnight.

    Unlike :func:`compute_angles` nothing is reduced to a dial: the seconds
    hand keeps counting past 60 and the hour hand past 24, so values grow
    monotonically with ``elapsed``.
    """

    midnight = start.replace(hour=0, minute=0, second=0, microsecond=0)
    total_seconds = (start - midnight + elapsed).total_seconds()
    return HandAngles(
        seconds=total_seconds,
        minutes=total_seconds / SECONDS_PER_MINUTE,
        hours=total_seconds / SECONDS_PER_HOUR,
    )


def polar_to_cartesian(center: Point, radius: float, angle: float) -> Point:
    return Point(
        x=center.x + radius * math.sin(angle),
        y=center.y - radius * math.cos(angle),
    )


def dial_marks(center: Point, radius: float, count: int) -> np.ndarray:
    """Return a ``(count, 2)`` array of evenly spaced points around the dial."""

    angles = np.arange(count, dtype=float) / count * math.tau
    return np.column_stack(
        (center.x + radius * np.sin(angles), center.y - radius * np.cos(angles))
    )
