"""Axis-aligned rectangle outline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from rasterart.render.surface import Color, Displayable

from .base import Shape
from .line import Line
from .point import Point

__all__ = ["Rectangle"]


@dataclass(frozen=True, slots=True)
class Rectangle(Shape):
    """Rectangle given by two opposite corners in any order.

    After construction ``a`` is the top-left (min x, min y) corner and
    ``b`` the bottom-right (max x, max y) corner.
    """

    a: Point
    b: Point

    def __post_init__(self) -> None:
        p1, p2 = self.a, self.b
        object.__setattr__(self, "a", Point(min(p1.x, p2.x), min(p1.y, p2.y)))
        object.__setattr__(self, "b", Point(max(p1.x, p2.x), max(p1.y, p2.y)))

    @classmethod
    def random(cls, width: int, height: int) -> "Rectangle":
        return cls(Point.random(width, height), Point.random(width, height))

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """Return (top_left, top_right, bottom_right, bottom_left)."""
        top_right = Point(self.b.x, self.a.y)
        bottom_left = Point(self.a.x, self.b.y)
        return (self.a, top_right, self.b, bottom_left)

    def draw_with_color(self, surface: Displayable, color: Color) -> None:
        tl, tr, br, bl = self.corners()
        Line(tl, tr).draw_with_color(surface, color)
        Line(tr, br).draw_with_color(surface, color)
        Line(br, bl).draw_with_color(surface, color)
        Line(bl, tl).draw_with_color(surface, color)

    def draw(self, surface: Displayable) -> None:
        self.draw_with_color(surface, self.draw_color())
