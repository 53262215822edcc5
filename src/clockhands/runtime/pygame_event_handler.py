from __future__ import annotations

from typing import Any

import pygame
from reactivex.subject import Subject

from clockhands.utilities.logging import get_logger

logger = get_logger(__name__)

RESET_KEY = pygame.K_r
QUIT_KEYS = frozenset({pygame.K_ESCAPE})


class PygameEventHandler:
    """Translate pygame events into loop control and reset requests."""

    def __init__(self) -> None:
        self.resets: Subject[Any] = Subject()
        self.resized: Subject[tuple[int, int]] = Subject()

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == RESET_KEY:
                logger.info("Reset key pressed")
                self.resets.on_next(event)
            elif event.key in QUIT_KEYS:
                return False
        elif event.type == pygame.VIDEORESIZE:
            self.resized.on_next(event.size)
        return True

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            running = self.handle_event(event) and running
        return running
