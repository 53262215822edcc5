from __future__ import annotations

from dataclasses import dataclass

import pygame

from clockhands.utilities.env.clock import MIN_WINDOW_HEIGHT, MIN_WINDOW_WIDTH
from clockhands.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_TITLE = "ClockApp"


@dataclass
class DisplayContext:
    """Track and initialize the pygame window."""

    size: tuple[int, int] = (MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)
    min_size: tuple[int, int] = (MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)
    screen: pygame.Surface | None = None
    clock: pygame.time.Clock | None = None

    def initialize(self) -> None:
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        self.resize(self.size)
        self.clock = pygame.time.Clock()

    def ensure_initialized(self) -> None:
        if self.clock is None or self.screen is None:
            raise RuntimeError("ClockLoop failed to initialize display surfaces")

    def clamp(self, size: tuple[int, int]) -> tuple[int, int]:
        return (max(size[0], self.min_size[0]), max(size[1], self.min_size[1]))

    def resize(self, size: tuple[int, int]) -> None:
        self.size = self.clamp(size)
        logger.info("Opening %s window at %dx%d", WINDOW_TITLE, *self.size)
        self.screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
