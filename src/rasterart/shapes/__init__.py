"""Geometric shapes that rasterize themselves onto a Displayable."""

from typing import Union

from .base import Drawable, Shape
from .circle import Circle, circle_pixels
from .cube import Cube
from .line import Line, line_pixels
from .pentagon import Pentagon
from .point import Point
from .rectangle import Rectangle
from .triangle import Triangle

AnyShape = Union[Point, Line, Triangle, Rectangle, Circle, Pentagon, Cube]

__all__ = [
    "AnyShape",
    "Circle",
    "Cube",
    "Drawable",
    "Line",
    "Pentagon",
    "Point",
    "Rectangle",
    "Shape",
    "Triangle",
    "circle_pixels",
    "line_pixels",
]
