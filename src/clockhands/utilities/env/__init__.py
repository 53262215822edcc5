"""Environment configuration helpers."""

from clockhands.utilities.env.config import Configuration as Configuration
from clockhands.utilities.env.enums import HourDial as HourDial
from clockhands.utilities.env.enums import SmoothingPolicy as SmoothingPolicy
