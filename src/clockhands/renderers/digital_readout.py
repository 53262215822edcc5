from __future__ import annotations

import pygame

from clockhands.clock.engine import ClockFrame
from clockhands.display.color import Color
from clockhands.renderers.base import StatefulRenderer


class DigitalReadoutRenderer(StatefulRenderer[ClockFrame]):
    """Monospace ``HH:MM:SS.mmm`` label centred in its area."""

    def __init__(
        self,
        font_name: str = "monospace",
        font_size: int = 24,
        color: Color | None = None,
    ) -> None:
        super().__init__()
        self._font_key = (font_name, font_size)
        self._font: pygame.font.Font | None = None
        self._color = color or Color.white()

    def _resolve_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont(*self._font_key)
        return self._font

    def draw(self, window: pygame.Surface, area: pygame.Rect) -> pygame.Rect:
        surface = self._resolve_font().render(
            self.state.readout, True, self._color.tuple()
        )
        target = surface.get_rect(center=area.center)
        window.blit(surface, target)
        return target

    def real_process(self, window: pygame.Surface) -> None:
        self.draw(window, window.get_rect())
