"""Pillow-backed pixel surface.

Example:
    from rasterart.platform.display.pillow_backend import PillowSurface

    surface = PillowSurface(320, 240)
    Line(Point(0, 0), Point(319, 239)).draw(surface)
    surface.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from PIL import Image

from rasterart.render.surface import Color

__all__ = ["PillowSurface"]

logger = logging.getLogger(__name__)


class PillowSurface:
    """RGB image surface; pixels outside the image are silently dropped."""

    def __init__(
        self, width: int, height: int, background: Color = Color(0, 0, 0)
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self._width, self._height = int(width), int(height)
        self._image = Image.new("RGB", (self._width, self._height), tuple(background))
        self._pixels = self._image.load()
        self._dropped = 0

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def dropped(self) -> int:
        """Number of out-of-bounds pixels ignored so far."""
        return self._dropped

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def display(self, x: int, y: int, color: Color) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self._pixels[x, y] = (color[0], color[1], color[2])
        else:
            self._dropped += 1

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b = self._image.getpixel((x, y))
        return Color(r, g, b)

    def save_png(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        self._image.save(p, format="PNG")
        logger.debug(
            "saved %dx%d image to %s (%d pixels clipped)",
            self._width,
            self._height,
            p,
            self._dropped,
        )
