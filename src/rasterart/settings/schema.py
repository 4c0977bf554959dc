"""Pydantic model for user settings."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

from .values import BACKENDS, CANVAS_DEFAULTS, OUTPUT_DEFAULTS, SCENE_DEFAULTS


class Settings(BaseModel):
    """Image generation settings persisted to disk.

    Parameters
    ----------
    width, height: Canvas size in pixels; both must be positive.
    background: RGB background colour, three channels in 0..255.
    output_path: Where the rendered PNG is written.
    backend: Surface implementation, ``pillow`` or ``pygame``.
    points .. cubes: How many random shapes of each kind to draw.
    """

    width: int = Field(default=int(CANVAS_DEFAULTS["width"]))
    height: int = Field(default=int(CANVAS_DEFAULTS["height"]))
    background: List[int] = Field(
        default_factory=lambda: list(CANVAS_DEFAULTS["background"])
    )
    output_path: str = Field(default=str(OUTPUT_DEFAULTS["path"]))
    backend: str = Field(default=str(OUTPUT_DEFAULTS["backend"]))

    points: int = Field(default=SCENE_DEFAULTS["points"], ge=0)
    lines: int = Field(default=SCENE_DEFAULTS["lines"], ge=0)
    triangles: int = Field(default=SCENE_DEFAULTS["triangles"], ge=0)
    rectangles: int = Field(default=SCENE_DEFAULTS["rectangles"], ge=0)
    circles: int = Field(default=SCENE_DEFAULTS["circles"], ge=0)
    pentagons: int = Field(default=SCENE_DEFAULTS["pentagons"], ge=0)
    cubes: int = Field(default=SCENE_DEFAULTS["cubes"], ge=0)

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("canvas dimensions must be > 0")
        return v

    @field_validator("background")
    @classmethod
    def _chk_background(cls, v: List[int]) -> List[int]:
        if len(v) != 3:
            raise ValueError("background must have exactly 3 channels")
        if any(c < 0 or c > 255 for c in v):
            raise ValueError("background channels must be in 0..255")
        return v

    @field_validator("backend")
    @classmethod
    def _chk_backend(cls, v: str) -> str:
        if v not in BACKENDS:
            raise ValueError("invalid backend: must be one of " + ", ".join(BACKENDS))
        return v
