from __future__ import annotations

from dataclasses import dataclass, field

from clockhands.clock.angles import HandAngles
from clockhands.utilities.env import SmoothingPolicy
from clockhands.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass
class PID:
    kp: float
    ki: float
    kd: float
    prev_error: float = 0.0
    integral: float = 0.0

    def update(self, error: float) -> float:
        self.integral += error
        derivative = error - self.prev_error
        self.prev_error = error
        return self.kp * error + self.ki * self.integral + self.kd * derivative

    def reset(self) -> None:
        self.prev_error = 0.0
        self.integral = 0.0


@dataclass
class ExponentialSmoother:
    factor: float

    def __post_init__(self) -> None:
        if not 0.0 < self.factor <= 1.0:
            raise ValueError(f"Smoothing factor must be in (0, 1], got {self.factor}")

    def step(self, display: float, target: float) -> float:
        return display + (target - display) * self.factor


@dataclass
class HandGains:
    seconds: tuple[float, float, float] = (0.15, 0.005, 0.005)
    minutes: tuple[float, float, float] = (0.08, 0.004, 0.004)
    hours: tuple[float, float, float] = (0.08, 0.002, 0.002)


@dataclass
class HandSmoother:
    """Lag the displayed hands toward their targets once per frame."""

    policy: SmoothingPolicy = SmoothingPolicy.PID
    factor: float = 0.2
    gains: HandGains = field(default_factory=HandGains)
    display: HandAngles = field(default_factory=HandAngles.zero)

    def __post_init__(self) -> None:
        self._exponential = (
            ExponentialSmoother(self.factor)
            if self.policy == SmoothingPolicy.EXPONENTIAL
            else None
        )
        self.second_pid = PID(*self.gains.seconds)
        self.minute_pid = PID(*self.gains.minutes)
        self.hour_pid = PID(*self.gains.hours)

    def step(self, target: HandAngles) -> HandAngles:
        if self.policy == SmoothingPolicy.NONE:
            self.display = target
        elif self._exponential is not None:
            smoother = self._exponential
            self.display = HandAngles(
                seconds=smoother.step(self.display.seconds, target.seconds),
                minutes=smoother.step(self.display.minutes, target.minutes),
                hours=smoother.step(self.display.hours, target.hours),
            )
        else:
            error = target - self.display
            self.display = self.display + HandAngles(
                seconds=self.second_pid.update(error.seconds),
                minutes=self.minute_pid.update(error.minutes),
                hours=self.hour_pid.update(error.hours),
            )
        return self.display

    def reset(self) -> None:
        logger.debug("Resetting %s smoother", self.policy.value)
        self.display = HandAngles.zero()
        for pid in (self.second_pid, self.minute_pid, self.hour_pid):
            pid.reset()
