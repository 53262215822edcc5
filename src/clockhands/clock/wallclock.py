from __future__ import annotations

import time
from datetime import datetime, timedelta

from clockhands.clock.angles import TimeOfDay


def format_readout(value: datetime) -> str:
    """Format ``value`` as ``HH:MM:SS.mmm`` for the digital readout."""

    return f"{value:%H:%M:%S}.{value.microsecond // 1000:03d}"


def decompose_duration(
    diff: timedelta, now: datetime, seconds_only: bool = False
) -> TimeOfDay:
    """Split ``now + diff`` into clock fields.

    With ``seconds_only`` the hour and minute fields are zero and ``second``
    carries the whole seconds of ``diff`` itself.
    """

    diff_ms = int(diff / timedelta(milliseconds=1))
    milliseconds = diff_ms % 1000
    if seconds_only:
        return TimeOfDay(hour=0, minute=0, second=diff_ms // 1000, millisecond=milliseconds)
    return TimeOfDay.from_datetime(now + timedelta(milliseconds=diff_ms))


class WallClock:
    @staticmethod
    def now() -> int:
        """Return the current UNIX timestamp in whole seconds."""

        return int(time.time())

    @staticmethod
    def tick(duration: timedelta) -> None:
        time.sleep(duration.total_seconds())
