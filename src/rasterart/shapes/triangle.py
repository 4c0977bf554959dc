"""Triangle outline: three edges sharing one colour per draw."""

from __future__ import annotations

from dataclasses import dataclass

from rasterart.render.surface import Displayable

from .base import Shape
from .line import Line
from .point import Point, copy_point

__all__ = ["Triangle"]


@dataclass(frozen=True, slots=True)
class Triangle(Shape):
    a: Point
    b: Point
    c: Point

    def __post_init__(self) -> None:
        for name in ("a", "b", "c"):
            object.__setattr__(self, name, copy_point(getattr(self, name)))

    @classmethod
    def random(cls, width: int, height: int) -> "Triangle":
        return cls(
            Point.random(width, height),
            Point.random(width, height),
            Point.random(width, height),
        )

    def draw(self, surface: Displayable) -> None:
        color = self.draw_color()
        Line(self.a, self.b).draw_with_color(surface, color)
        Line(self.b, self.c).draw_with_color(surface, color)
        Line(self.c, self.a).draw_with_color(surface, color)
