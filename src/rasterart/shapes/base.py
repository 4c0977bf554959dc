"""Drawable contract shared by every shape.

Shapes are plain immutable value types; the ``Drawable`` protocol is the
only thing a caller needs to draw a heterogeneous collection of them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rasterart.core.rand import random_color
from rasterart.render.surface import Color, Displayable

__all__ = ["Drawable", "Shape"]


@runtime_checkable
class Drawable(Protocol):
    def draw(self, surface: Displayable) -> None:
        ...

    def draw_color(self) -> Color:
        ...


class Shape:
    """Mixin providing the default per-draw colour."""

    __slots__ = ()

    def draw_color(self) -> Color:
        """Return a fresh random colour; called once per ``draw``."""
        return random_color()
