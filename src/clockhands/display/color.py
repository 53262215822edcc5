from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in self.tuple():
            assert 0 <= channel <= 255, (
                f"Expected all color values to be between 0 and 255. Found {self.tuple()}"
            )

    def tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __iter__(self) -> Iterator[int]:
        return iter(self.tuple())

    @staticmethod
    def background() -> "Color":
        return Color(r=27, g=27, b=27)

    @staticmethod
    def white() -> "Color":
        return Color(r=255, g=255, b=255)

    @staticmethod
    def light_gray() -> "Color":
        return Color(r=160, g=160, b=160)

    @staticmethod
    def gray() -> "Color":
        return Color(r=96, g=96, b=96)

    @staticmethod
    def dark_gray() -> "Color":
        return Color(r=60, g=60, b=60)

    @staticmethod
    def red() -> "Color":
        return Color(r=255, g=0, b=0)
