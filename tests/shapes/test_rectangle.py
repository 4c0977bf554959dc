from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import given, settings

from rasterart.render.surface import Color, RecordingSurface
from rasterart.shapes import Point, Rectangle

coord = st.integers(min_value=-1000, max_value=1000)


def test_normalizes_corners() -> None:
    r = Rectangle(Point(5, 5), Point(0, 0))
    assert (r.a.x, r.a.y) == (0, 0)
    assert (r.b.x, r.b.y) == (5, 5)


def test_normalizes_mixed_corners() -> None:
    r = Rectangle(Point(0, 9), Point(4, 2))
    assert (r.a.x, r.a.y, r.b.x, r.b.y) == (0, 2, 4, 9)


def test_corners_order() -> None:
    tl, tr, br, bl = Rectangle(Point(1, 2), Point(6, 8)).corners()
    assert [(p.x, p.y) for p in (tl, tr, br, bl)] == [(1, 2), (6, 2), (6, 8), (1, 8)]


def test_outline(surface: RecordingSurface) -> None:
    blue = Color(0, 0, 255)
    Rectangle(Point(0, 0), Point(2, 1)).draw_with_color(surface, blue)
    assert len(surface) == 10
    assert set(surface.coords()) == {(0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1)}
    assert surface.colors() == {blue}


def test_draw_one_color(surface: RecordingSurface, rng: object) -> None:
    Rectangle(Point(3, 3), Point(30, 20)).draw(surface)
    assert len(surface.colors()) == 1


@settings(deadline=None, max_examples=200)
@given(x1=coord, y1=coord, x2=coord, y2=coord)
def test_construction_is_commutative(x1: int, y1: int, x2: int, y2: int) -> None:
    r1 = Rectangle(Point(x1, y1), Point(x2, y2))
    r2 = Rectangle(Point(x2, y2), Point(x1, y1))
    assert r1.a == r2.a
    assert r1.b == r2.b
    assert r1.a.x == min(x1, x2) and r1.a.y == min(y1, y2)
    assert r1.b.x == max(x1, x2) and r1.b.y == max(y1, y2)
