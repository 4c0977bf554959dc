"""Random scene composition.

A scene is an ordered list of shapes generated within the canvas bounds
from the active random source (see :mod:`rasterart.core.rand`), then drawn
one after another onto a surface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Callable, Dict, Iterable, List

from rasterart.render.surface import Displayable
from rasterart.shapes import (
    AnyShape,
    Circle,
    Cube,
    Line,
    Pentagon,
    Point,
    Rectangle,
    Triangle,
)

__all__ = ["SceneSpec", "build_scene", "draw_scene"]

logger = logging.getLogger(__name__)

_FACTORIES: Dict[str, Callable[[int, int], AnyShape]] = {
    "points": Point.random,
    "lines": Line.random,
    "triangles": Triangle.random,
    "rectangles": Rectangle.random,
    "circles": Circle.random,
    "pentagons": Pentagon.random,
    "cubes": Cube.random,
}


@dataclass(slots=True)
class SceneSpec:
    """How many random shapes of each kind to generate."""

    points: int = 0
    lines: int = 0
    triangles: int = 0
    rectangles: int = 0
    circles: int = 0
    pentagons: int = 0
    cubes: int = 0

    def counts(self) -> Dict[str, int]:
        return {f.name: int(getattr(self, f.name)) for f in fields(self)}

    def total(self) -> int:
        return sum(self.counts().values())


def build_scene(width: int, height: int, spec: SceneSpec) -> List[AnyShape]:
    """Generate the shapes described by *spec* inside a width x height canvas.

    Shapes are grouped by kind in declaration order of :class:`SceneSpec`.

    Raises:
        ValueError: If *width* or *height* is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas size must be positive, got {width}x{height}")
    shapes: List[AnyShape] = []
    for kind, n in spec.counts().items():
        if n < 0:
            raise ValueError(f"{kind} count must be >= 0, got {n}")
        make = _FACTORIES[kind]
        shapes.extend(make(width, height) for _ in range(n))
    logger.debug("built scene %dx%d with %s", width, height, spec.counts())
    return shapes


def draw_scene(shapes: Iterable[AnyShape], surface: Displayable) -> int:
    """Draw *shapes* in order onto *surface*; return how many were drawn."""
    n = 0
    for shape in shapes:
        shape.draw(surface)
        n += 1
    logger.debug("drew %d shapes", n)
    return n
