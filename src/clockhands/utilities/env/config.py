from clockhands.utilities.env.clock import ClockConfiguration
from clockhands.utilities.env.counter import CounterConfiguration


class Configuration(ClockConfiguration, CounterConfiguration):
    """Aggregate environment configuration helpers."""
