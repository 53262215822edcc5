from enum import StrEnum


class SmoothingPolicy(StrEnum):
    NONE = "none"
    EXPONENTIAL = "exponential"
    PID = "pid"


class HourDial(StrEnum):
    TWELVE = "12"
    TWENTY_FOUR = "24"

    @property
    def hours(self) -> int:
        return int(self.value)
