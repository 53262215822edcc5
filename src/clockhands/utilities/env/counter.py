from clockhands.utilities.env.parsing import _env_int

DEFAULT_COUNTER_THREADS = 10


class CounterConfiguration:
    @classmethod
    def counter_threads(cls) -> int:
        return _env_int(
            "CLOCKHANDS_COUNTER_THREADS", default=DEFAULT_COUNTER_THREADS, minimum=0
        )
