from __future__ import annotations

from datetime import datetime
from typing import Callable

import pygame
from reactivex.subject import Subject

from clockhands.clock.engine import ClockEngine
from clockhands.clock.provider import ClockStateProvider
from clockhands.renderers.clock_screen import ClockScreen
from clockhands.runtime.display_context import DisplayContext
from clockhands.runtime.pygame_event_handler import PygameEventHandler
from clockhands.utilities.env import Configuration
from clockhands.utilities.logging import get_logger

logger = get_logger(__name__)


class ClockLoop:
    def __init__(
        self,
        engine: ClockEngine,
        display: DisplayContext | None = None,
        screen: ClockScreen | None = None,
        max_fps: int | None = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.engine = engine
        self.display = display or DisplayContext(size=Configuration.window_size())
        self.screen = screen or ClockScreen()
        self.event_handler = PygameEventHandler()
        self.max_fps = max_fps or Configuration.max_fps()
        self.frame_ticks: Subject[datetime] = Subject()
        self.provider = ClockStateProvider(engine)
        self._now = now
        self.running = False

        self.screen.subscribe(
            self.provider.observable(self.frame_ticks, self.event_handler.resets)
        )
        self.event_handler.resized.subscribe(on_next=self.display.resize)

    def step(self) -> bool:
        """Run a single frame; return ``False`` once the window should close."""

        if not self.event_handler.handle_events():
            return False
        self.frame_ticks.on_next(self._now())

        assert self.display.screen is not None
        self.screen.process(self.display.screen)
        pygame.display.flip()
        return True

    def start(self) -> None:
        logger.info("Starting ClockLoop at up to %d fps", self.max_fps)
        self.display.initialize()
        self.display.ensure_initialized()
        assert self.display.clock is not None

        self.running = True
        try:
            while self.running:
                self.running = self.step()
                self.display.clock.tick(self.max_fps)
        finally:
            self.frame_ticks.on_completed()
            pygame.quit()
            logger.info("ClockLoop stopped")
