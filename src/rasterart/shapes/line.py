"""Line segment rasterized with a real-valued DDA stepper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from rasterart.render.surface import Color, Displayable

from .base import Shape
from .point import Point, copy_point

__all__ = ["Line", "line_pixels"]


def line_pixels(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    """Yield the pixels of the segment (x0, y0)-(x1, y1), both ends included.

    Steps along the dominant axis: ``max(|dx|, |dy|) + 1`` pixels, each the
    truncation toward zero of the real-valued position after ``i`` steps.
    The position is evaluated as ``start + i * d / steps`` so the last
    pixel always lands exactly on the end point.
    """
    dx = x1 - x0
    dy = y1 - y0
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        yield (x0, y0)
        return
    for i in range(steps + 1):
        yield (int(x0 + dx * i / steps), int(y0 + dy * i / steps))


@dataclass(frozen=True, slots=True)
class Line(Shape):
    start: Point
    end: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", copy_point(self.start))
        object.__setattr__(self, "end", copy_point(self.end))

    @classmethod
    def random(cls, width: int, height: int) -> "Line":
        return cls(Point.random(width, height), Point.random(width, height))

    def pixels(self) -> Iterator[Tuple[int, int]]:
        return line_pixels(self.start.x, self.start.y, self.end.x, self.end.y)

    def draw_with_color(self, surface: Displayable, color: Color) -> None:
        for x, y in self.pixels():
            surface.display(x, y, color)

    def draw(self, surface: Displayable) -> None:
        self.draw_with_color(surface, self.draw_color())
