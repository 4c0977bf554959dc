"""Circle outline rasterized with the midpoint algorithm."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from rasterart.core.rand import get_random_source
from rasterart.render.surface import Displayable

from .base import Shape
from .point import Point, copy_point

__all__ = ["Circle", "circle_pixels"]


def circle_pixels(cx: int, cy: int, radius: int) -> Iterator[Tuple[int, int]]:
    """Yield the eight-way symmetric pixels of a circle outline.

    Radius 0 yields the centre once. Otherwise one octant is walked from
    (0, -radius) while ``x < -y``; each step yields all eight reflections,
    so pixels on the diagonals and axes may repeat.
    """
    if radius == 0:
        yield (cx, cy)
        return
    r2 = radius * radius
    x, y = 0, -radius
    while x < -y:
        # Decision value: is the midpoint (x, y + 0.5) outside the circle?
        p = x * x + (y + 0.5) ** 2 - r2
        if p > 0:
            y += 1
        yield (cx + x, cy + y)
        yield (cx - x, cy + y)
        yield (cx - x, cy - y)
        yield (cx + x, cy - y)
        yield (cx + y, cy + x)
        yield (cx - y, cy + x)
        yield (cx - y, cy - x)
        yield (cx + y, cy - x)
        x += 1


@dataclass(frozen=True, slots=True)
class Circle(Shape):
    center: Point
    radius: int

    def __post_init__(self) -> None:
        radius = int(self.radius)
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        object.__setattr__(self, "center", copy_point(self.center))
        object.__setattr__(self, "radius", radius)

    @classmethod
    def random(cls, width: int, height: int) -> "Circle":
        """Random centre inside the bounds, radius drawn from 0..=height."""
        center = Point.random(width, height)
        return cls(center, get_random_source().randint(0, height))

    def pixels(self) -> Iterator[Tuple[int, int]]:
        return circle_pixels(self.center.x, self.center.y, self.radius)

    def draw(self, surface: Displayable) -> None:
        color = self.draw_color()
        for x, y in self.pixels():
            surface.display(x, y, color)
