"""Framework-agnostic pixel surface protocol and RGB colour value.

Rasterizers only ever call ``display(x, y, color)`` on a surface, so any
framework (Pillow, pygame, an in-memory recorder) can be plugged in by
implementing that single method.
"""

from __future__ import annotations

from typing import Iterator, List, NamedTuple, Protocol, Tuple, runtime_checkable

__all__ = ["Color", "Displayable", "RecordingSurface"]


class Color(NamedTuple):
    """Immutable 8-bit RGB triple."""

    r: int
    g: int
    b: int

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """Build a colour, validating each channel is an int in 0..255."""
        for name, v in (("r", r), ("g", g), ("b", b)):
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"channel {name} must be an int, got {v!r}")
            if not 0 <= v <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {v}")
        return cls(r, g, b)

    def as_rgba(self, alpha: int = 255) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, int(alpha))


@runtime_checkable
class Displayable(Protocol):
    """Anything that can set a single pixel.

    Behaviour for out-of-bounds coordinates is left to the implementation.
    """

    def display(self, x: int, y: int, color: Color) -> None:
        ...


class RecordingSurface:
    """In-memory surface that records every ``display`` call in order.

    Useful for tests and dry runs where no image backend is wanted.
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[int, int, Color]] = []

    def display(self, x: int, y: int, color: Color) -> None:
        self.calls.append((int(x), int(y), color))

    def coords(self) -> List[Tuple[int, int]]:
        return [(x, y) for x, y, _c in self.calls]

    def colors(self) -> set[Color]:
        return {c for _x, _y, c in self.calls}

    def clear(self) -> None:
        self.calls.clear()

    def __len__(self) -> int:
        return len(self.calls)

    def __iter__(self) -> Iterator[Tuple[int, int, Color]]:
        return iter(self.calls)
