"""Pseudo-3D cube outline: two offset squares joined at the corners."""

from __future__ import annotations

from dataclasses import dataclass

from rasterart.core.rand import get_random_source
from rasterart.render.surface import Displayable

from .base import Shape
from .line import Line
from .point import Point, copy_point
from .rectangle import Rectangle

__all__ = ["Cube"]


@dataclass(frozen=True, slots=True)
class Cube(Shape):
    """Cube seen at an angle.

    ``corner`` is the top-left of the front face. The back face is the
    same square shifted by ``side // 3`` right and up.
    """

    corner: Point
    side: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "corner", copy_point(self.corner))
        object.__setattr__(self, "side", int(self.side))

    @classmethod
    def random(cls, width: int, height: int) -> "Cube":
        corner = Point.random(width, height)
        side = get_random_source().randint(1, max(1, min(width, height) // 2))
        return cls(corner, side)

    def depth(self) -> int:
        return abs(self.side) // 3

    def draw(self, surface: Displayable) -> None:
        p1 = self.corner
        s = self.side
        p2 = p1.moved(s, 0)
        p3 = p1.moved(s, s)
        p4 = p1.moved(0, s)
        d = self.depth()
        p1b, p2b, p3b, p4b = (p.moved(d, -d) for p in (p1, p2, p3, p4))

        color = self.draw_color()
        Rectangle(p1, p3).draw_with_color(surface, color)
        Rectangle(p1b, p3b).draw_with_color(surface, color)
        for front, back in ((p1, p1b), (p2, p2b), (p3, p3b), (p4, p4b)):
            Line(front, back).draw_with_color(surface, color)
