from __future__ import annotations

import pygame

from clockhands.clock.engine import ClockFrame
from clockhands.display.color import Color
from clockhands.renderers.analog_clock import AnalogClockRenderer
from clockhands.renderers.base import StatefulRenderer
from clockhands.renderers.digital_readout import DigitalReadoutRenderer

READOUT_HEIGHT = 60
SEPARATOR_WIDTH = 1


class ClockScreen(StatefulRenderer[ClockFrame]):
    """Digital readout on top, analog face filling the rest of the window."""

    def __init__(
        self,
        analog: AnalogClockRenderer | None = None,
        readout: DigitalReadoutRenderer | None = None,
    ) -> None:
        super().__init__()
        self.analog = analog or AnalogClockRenderer()
        self.readout = readout or DigitalReadoutRenderer()

    def set_state(self, state: ClockFrame) -> None:
        super().set_state(state)
        self.analog.set_state(state)
        self.readout.set_state(state)

    @staticmethod
    def layout(window_rect: pygame.Rect) -> tuple[pygame.Rect, pygame.Rect]:
        readout_area = pygame.Rect(0, 0, window_rect.width, READOUT_HEIGHT)
        face_area = pygame.Rect(
            0,
            READOUT_HEIGHT,
            window_rect.width,
            max(window_rect.height - READOUT_HEIGHT, 0),
        )
        return readout_area, face_area

    def real_process(self, window: pygame.Surface) -> None:
        window.fill(Color.background().tuple())
        readout_area, face_area = self.layout(window.get_rect())
        self.readout.draw(window, readout_area)
        pygame.draw.line(
            window,
            Color.dark_gray().tuple(),
            readout_area.bottomleft,
            readout_area.bottomright,
            SEPARATOR_WIDTH,
        )
        self.analog.draw(window, face_area)
