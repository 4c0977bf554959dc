from __future__ import annotations

import random

from rasterart.core.rand import (
    get_random_source,
    random_color,
    seeded,
    use_random_source,
)
from rasterart.render.surface import Color


def test_seeded_is_reproducible() -> None:
    with seeded(99):
        a = [random_color() for _ in range(5)]
    with seeded(99):
        b = [random_color() for _ in range(5)]
    assert a == b


def test_use_random_source_restores_previous() -> None:
    before = get_random_source()
    src = random.Random(1)
    with use_random_source(src):
        assert get_random_source() is src
        with seeded(2) as inner:
            assert get_random_source() is inner
        assert get_random_source() is src
    assert get_random_source() is before


def test_random_color_channels_in_range() -> None:
    rng = random.Random(5)
    for _ in range(200):
        c = random_color(rng)
        assert isinstance(c, Color)
        assert all(0 <= ch <= 255 for ch in c)


def test_explicit_rng_overrides_active_source() -> None:
    with seeded(1):
        c1 = random_color(random.Random(7))
    c2 = random_color(random.Random(7))
    assert c1 == c2
