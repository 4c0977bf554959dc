from __future__ import annotations

import pytest

from rasterart.app.scene import SceneSpec, build_scene, draw_scene
from rasterart.render.surface import RecordingSurface
from rasterart.shapes import Circle, Cube, Line, Pentagon, Point, Rectangle, Triangle


def test_build_scene_counts_and_order(rng: object) -> None:
    spec = SceneSpec(points=3, lines=2, circles=1, cubes=1)
    shapes = build_scene(50, 40, spec)
    assert spec.total() == 7
    assert [type(s) for s in shapes] == [Point] * 3 + [Line] * 2 + [Circle, Cube]


def test_every_kind_is_buildable(rng: object) -> None:
    spec = SceneSpec(1, 1, 1, 1, 1, 1, 1)
    kinds = {type(s) for s in build_scene(20, 20, spec)}
    assert kinds == {Point, Line, Triangle, Rectangle, Circle, Pentagon, Cube}


def test_draw_scene(surface: RecordingSurface, rng: object) -> None:
    shapes = build_scene(30, 30, SceneSpec(points=5, triangles=2))
    assert draw_scene(shapes, surface) == 7
    assert len(surface) >= 5


def test_empty_scene(surface: RecordingSurface) -> None:
    assert build_scene(10, 10, SceneSpec()) == []
    assert draw_scene([], surface) == 0
    assert len(surface) == 0


def test_invalid_scene() -> None:
    with pytest.raises(ValueError):
        build_scene(0, 10, SceneSpec(points=1))
    with pytest.raises(ValueError):
        build_scene(10, 10, SceneSpec(points=-1))
