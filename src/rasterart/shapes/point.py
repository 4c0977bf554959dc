"""Point: integer coordinate plus its own colour."""

from __future__ import annotations

from dataclasses import dataclass, field

from rasterart.core.rand import get_random_source, random_color
from rasterart.render.surface import Color, Displayable

from .base import Shape

__all__ = ["Point", "copy_point"]


def _check_bounds(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"random bounds must be positive, got {width}x{height}")


@dataclass(frozen=True, slots=True)
class Point(Shape):
    """Pixel coordinate with an owned colour.

    Equality and hashing consider coordinates only.
    """

    x: int
    y: int
    color: Color = field(default_factory=random_color, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))

    @classmethod
    def random(cls, width: int, height: int) -> "Point":
        """Uniform point with x in [0, width) and y in [0, height).

        Raises:
            ValueError: If *width* or *height* is not positive.
        """
        _check_bounds(width, height)
        rng = get_random_source()
        return cls(rng.randrange(0, width), rng.randrange(0, height))

    def moved(self, dx: int, dy: int) -> "Point":
        """Derived point offset by (dx, dy) with a fresh colour."""
        return Point(self.x + dx, self.y + dy)

    def draw(self, surface: Displayable) -> None:
        surface.display(self.x, self.y, self.color)


def copy_point(p: Point) -> Point:
    """Return an independent point at the same coordinates as *p*.

    The copy gets a fresh colour, so shapes never alias a caller's point.
    """
    return Point(p.x, p.y)
