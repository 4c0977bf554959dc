from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from rasterart.platform.display.pillow_backend import PillowSurface
from rasterart.render.surface import Color, Displayable
from rasterart.shapes import Circle, Line, Point


def test_display_sets_pixel() -> None:
    s = PillowSurface(10, 8, background=Color(5, 5, 5))
    assert isinstance(s, Displayable)
    s.display(2, 3, Color(255, 0, 0))
    assert s.get_pixel(2, 3) == Color(255, 0, 0)
    assert s.get_pixel(0, 0) == Color(5, 5, 5)


def test_out_of_bounds_is_ignored() -> None:
    s = PillowSurface(4, 4)
    s.display(-1, 0, Color(1, 1, 1))
    s.display(4, 0, Color(1, 1, 1))
    s.display(0, 10, Color(1, 1, 1))
    assert s.dropped == 3


def test_clipped_circle_draws_partially() -> None:
    s = PillowSurface(20, 20)
    Circle(Point(0, 10), 5).draw(s)
    assert s.dropped > 0
    assert s.get_pixel(5, 10) != Color(0, 0, 0)


def test_save_png(tmp_path: Path) -> None:
    s = PillowSurface(32, 16)
    Line(Point(0, 0), Point(31, 15)).draw_with_color(s, Color(0, 255, 0))
    out = tmp_path / "nested" / "line.png"
    s.save_png(out)
    with Image.open(out) as img:
        assert img.size == (32, 16)
        assert img.convert("RGB").getpixel((31, 15)) == (0, 255, 0)


def test_rejects_empty_size() -> None:
    with pytest.raises(ValueError):
        PillowSurface(0, 10)
