"""Regular pentagon outline inscribed in a circle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from rasterart.core.rand import get_random_source
from rasterart.render.surface import Displayable

from .base import Shape
from .line import Line
from .point import Point, copy_point

__all__ = ["Pentagon"]

_STEP_DEG = 360.0 / 5.0


def _floor(v: float) -> int:
    # Snap float noise (e.g. sin(2*pi) ~ -2e-16) before flooring
    return math.floor(round(v, 9))


@dataclass(frozen=True, slots=True)
class Pentagon(Shape):
    center: Point
    radius: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", copy_point(self.center))
        object.__setattr__(self, "radius", int(self.radius))

    @classmethod
    def random(cls, width: int, height: int) -> "Pentagon":
        """Random centre inside the bounds, radius in [0, min(width, height))."""
        center = Point.random(width, height)
        return cls(center, get_random_source().randrange(0, min(width, height)))

    def vertices(self) -> List[Point]:
        """Return the six vertices visited while drawing.

        The walk starts directly right of the centre and advances by 72
        degrees five times; the last vertex coincides with the first.
        """
        cx, cy, r = self.center.x, self.center.y, self.radius
        out = [Point(cx + r, cy)]
        for i in range(1, 6):
            angle = math.radians(i * _STEP_DEG)
            x = _floor(r * math.cos(angle) + cx)
            y = _floor(r * math.sin(angle) + cy)
            out.append(Point(x, y))
        return out

    def draw(self, surface: Displayable) -> None:
        color = self.draw_color()
        verts = self.vertices()
        for prev, nxt in zip(verts, verts[1:]):
            Line(prev, nxt).draw_with_color(surface, color)
