from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum, auto
from typing import Callable

from clockhands.clock.angles import (HandAngles, TimeOfDay,
                                     angles_since_midnight)
from clockhands.clock.smoothing import HandSmoother
from clockhands.clock.wallclock import format_readout
from clockhands.utilities.env import Configuration, HourDial
from clockhands.utilities.logging import get_logger

logger = get_logger(__name__)


class ClockPhase(Enum):
    RUNNING = auto()
    RESET_PENDING = auto()


@dataclass(frozen=True)
class ClockFrame:
    time: TimeOfDay
    target: HandAngles
    display: HandAngles
    hand_radians: tuple[float, float, float]
    readout: str
    hour_dial: HourDial = HourDial.TWELVE


@dataclass
class ClockState:
    start_time: datetime
    current_time: datetime
    smoother: HandSmoother = field(default_factory=HandSmoother)
    hour_dial: HourDial = HourDial.TWELVE
    phase: ClockPhase = ClockPhase.RUNNING

    @property
    def elapsed(self) -> timedelta:
        return self.current_time - self.start_time


def apply_reset(state: ClockState, now: datetime) -> None:
    state.start_time = now
    state.current_time = now
    state.smoother.reset()
    state.phase = ClockPhase.RUNNING


def update(state: ClockState, now: datetime) -> ClockFrame:
    """Advance ``state`` to ``now`` and return the frame to draw.

    A pending reset is applied first, so the frame produced by the same call
    already starts from zeroed filters.
    """

    if state.phase == ClockPhase.RESET_PENDING:
        logger.info("Reset requested, restarting clock at %s", format_readout(now))
        apply_reset(state, now)

    state.current_time = now
    target = angles_since_midnight(state.start_time, state.elapsed)
    display = state.smoother.step(target)
    logger.debug("Frame target=%s display=%s", target, display)
    return ClockFrame(
        time=TimeOfDay.from_datetime(now),
        target=target,
        display=display,
        hand_radians=display.to_radians(state.hour_dial),
        readout=format_readout(now),
        hour_dial=state.hour_dial,
    )


class ClockEngine:
    """Own a :class:`ClockState` and advance it once per frame."""

    def __init__(
        self,
        smoother: HandSmoother | None = None,
        now: Callable[[], datetime] = datetime.now,
        hour_dial: HourDial | None = None,
    ) -> None:
        self._now = now
        if smoother is None:
            smoother = HandSmoother(
                policy=Configuration.smoothing_policy(),
                factor=Configuration.smoothing_factor(),
            )
        started = now()
        self.state = ClockState(
            start_time=started,
            current_time=started,
            smoother=smoother,
            hour_dial=hour_dial or Configuration.hour_dial(),
        )
        logger.info(
            "Clock engine started with %s smoothing on a %s-hour dial",
            smoother.policy.value,
            self.state.hour_dial.value,
        )

    @property
    def phase(self) -> ClockPhase:
        return self.state.phase

    def request_reset(self) -> None:
        self.state.phase = ClockPhase.RESET_PENDING

    def advance(self, now: datetime) -> ClockFrame:
        return update(self.state, now)

    def tick(self) -> ClockFrame:
        return self.advance(self._now())
