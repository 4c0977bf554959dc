"""Random source abstraction for shape and colour generation.

The process-wide generator is exposed as an injectable capability so that
tests can swap in a deterministic source, in the same spirit as a
simulated clock replacing the wall clock.

Usage examples:

Default (non-reproducible) usage:
    c = random_color()

Deterministic usage:
    with seeded(1234):
        p = Point.random(100, 100)
"""

from __future__ import annotations

import random
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Protocol

from rasterart.render.surface import Color

__all__ = [
    "RandomSource",
    "get_random_source",
    "use_random_source",
    "seeded",
    "random_color",
]


class RandomSource(Protocol):
    """Uniform integer generator. :class:`random.Random` satisfies it."""

    def randint(self, a: int, b: int) -> int:
        """Return an integer in the inclusive range [a, b]."""
        ...

    def randrange(self, start: int, stop: int) -> int:
        """Return an integer in the half-open range [start, stop)."""
        ...


_DEFAULT_SOURCE: RandomSource = random.Random()
_ACTIVE: ContextVar[Optional[RandomSource]] = ContextVar(
    "rasterart_random_source", default=None
)


def get_random_source() -> RandomSource:
    """Return the source active in the current context."""
    src = _ACTIVE.get()
    return src if src is not None else _DEFAULT_SOURCE


@contextmanager
def use_random_source(src: RandomSource) -> Iterator[RandomSource]:
    """Install *src* as the active source for the duration of the block."""
    token = _ACTIVE.set(src)
    try:
        yield src
    finally:
        _ACTIVE.reset(token)


@contextmanager
def seeded(seed: int | str | None) -> Iterator[RandomSource]:
    """Shortcut for ``use_random_source(random.Random(seed))``."""
    with use_random_source(random.Random(seed)) as src:
        yield src


def random_color(rng: RandomSource | None = None) -> Color:
    """Return a colour with each channel drawn uniformly from 0..=255."""
    r = rng if rng is not None else get_random_source()
    return Color(r.randint(0, 255), r.randint(0, 255), r.randint(0, 255))
