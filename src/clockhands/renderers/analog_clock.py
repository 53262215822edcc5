from __future__ import annotations

from dataclasses import dataclass

import pygame

from clockhands.clock.angles import Point, dial_marks, polar_to_cartesian
from clockhands.clock.engine import ClockFrame
from clockhands.display.color import Color
from clockhands.renderers.base import StatefulRenderer

FACE_MARGIN = 0.4
MINOR_TICK = 5.0
MAJOR_TICK = 10.0
NUMERAL_INSET = 25.0


@dataclass(frozen=True)
class HandStyle:
    length: float
    width: int
    color: Color


SECOND_HAND = HandStyle(length=0.9, width=2, color=Color.red())
MINUTE_HAND = HandStyle(length=0.7, width=6, color=Color.light_gray())
HOUR_HAND = HandStyle(length=0.5, width=8, color=Color.white())


def hand_endpoints(
    center: Point, radius: float, hand_radians: tuple[float, float, float]
) -> dict[HandStyle, Point]:
    seconds, minutes, hours = hand_radians
    return {
        style: polar_to_cartesian(center, radius * style.length, angle)
        for style, angle in (
            (HOUR_HAND, hours),
            (MINUTE_HAND, minutes),
            (SECOND_HAND, seconds),
        )
    }


def numeral_label(index: int, count: int = 12) -> str:
    """Label for the ``index``-th of ``count`` dial positions, ``count`` at the top."""

    return str((index + count - 1) % count + 1)


class AnalogClockRenderer(StatefulRenderer[ClockFrame]):
    def __init__(self, font_name: str | None = None, font_size: int = 24) -> None:
        super().__init__()
        self._font_key = (font_name, font_size)
        self._font: pygame.font.Font | None = None

    def face_geometry(self, area: pygame.Rect) -> tuple[Point, float]:
        size = min(area.width, area.height)
        return Point(area.centerx, area.centery), size * FACE_MARGIN

    def _resolve_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont(*self._font_key)
        return self._font

    def draw(self, window: pygame.Surface, area: pygame.Rect) -> None:
        center, radius = self.face_geometry(area)
        pygame.draw.circle(window, Color.white().tuple(), center.as_tuple(), radius, 2)
        self._draw_ticks(window, center, radius)
        self._draw_numerals(window, center, radius)

        for style, tip in hand_endpoints(center, radius, self.state.hand_radians).items():
            pygame.draw.line(
                window, style.color.tuple(), center.as_tuple(), tip.as_tuple(), style.width
            )

    def _draw_ticks(self, window: pygame.Surface, center: Point, radius: float) -> None:
        outer = dial_marks(center, radius, 60)
        minor = dial_marks(center, radius - MINOR_TICK, 60)
        major = dial_marks(center, radius - MAJOR_TICK, 60)
        for index in range(60):
            inner = major[index] if index % 5 == 0 else minor[index]
            color = Color.gray() if index % 5 == 0 else Color.dark_gray()
            pygame.draw.line(window, color.tuple(), tuple(inner), tuple(outer[index]), 2)

    def _draw_numerals(self, window: pygame.Surface, center: Point, radius: float) -> None:
        font = self._resolve_font()
        count = self.state.hour_dial.hours
        for index, position in enumerate(dial_marks(center, radius - NUMERAL_INSET, count)):
            surface = font.render(numeral_label(index, count), True, Color.white().tuple())
            window.blit(surface, surface.get_rect(center=(round(position[0]), round(position[1]))))

    def real_process(self, window: pygame.Surface) -> None:
        self.draw(window, window.get_rect())
