from clockhands.utilities.env.enums import HourDial, SmoothingPolicy
from clockhands.utilities.env.parsing import _env_enum, _env_float, _env_int

DEFAULT_SMOOTHING_FACTOR = 0.2
DEFAULT_MAX_FPS = 60
MIN_WINDOW_WIDTH = 400
MIN_WINDOW_HEIGHT = 480


class ClockConfiguration:
    @classmethod
    def smoothing_policy(cls) -> SmoothingPolicy:
        return _env_enum(
            "CLOCKHANDS_SMOOTHING", SmoothingPolicy, default=SmoothingPolicy.PID
        )

    @classmethod
    def smoothing_factor(cls) -> float:
        factor = _env_float(
            "CLOCKHANDS_SMOOTHING_FACTOR",
            default=DEFAULT_SMOOTHING_FACTOR,
            maximum=1.0,
        )
        if factor <= 0.0:
            raise ValueError("CLOCKHANDS_SMOOTHING_FACTOR must be greater than 0")
        return factor

    @classmethod
    def hour_dial(cls) -> HourDial:
        return _env_enum("CLOCKHANDS_HOUR_DIAL", HourDial, default=HourDial.TWELVE)

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("CLOCKHANDS_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def window_size(cls) -> tuple[int, int]:
        return (
            _env_int(
                "CLOCKHANDS_WINDOW_WIDTH",
                default=MIN_WINDOW_WIDTH,
                minimum=MIN_WINDOW_WIDTH,
            ),
            _env_int(
                "CLOCKHANDS_WINDOW_HEIGHT",
                default=MIN_WINDOW_HEIGHT,
                minimum=MIN_WINDOW_HEIGHT,
            ),
        )
