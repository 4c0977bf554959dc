"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. On import we load and
parse the YAML; a missing or corrupt file falls back to the literal
defaults below so the application can still run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

_LOG = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

SHAPE_KINDS: tuple[str, ...] = (
    "points",
    "lines",
    "triangles",
    "rectangles",
    "circles",
    "pentagons",
    "cubes",
)
BACKENDS: tuple[str, ...] = ("pillow", "pygame")

# --- Fallback literals ---------------------------------------------------
_FALLBACK_CANVAS: Dict[str, Any] = {
    "width": 1000,
    "height": 1000,
    "background": [0, 0, 0],
}
_FALLBACK_OUTPUT: Dict[str, Any] = {"path": "image.png", "backend": "pillow"}
_FALLBACK_SCENE: Dict[str, int] = {
    "points": 1000,
    "lines": 50,
    "triangles": 1,
    "rectangles": 1,
    "circles": 50,
    "pentagons": 1,
    "cubes": 1,
}

_canvas: Dict[str, Any] = dict(_FALLBACK_CANVAS)
_output: Dict[str, Any] = dict(_FALLBACK_OUTPUT)
_scene: Dict[str, int] = dict(_FALLBACK_SCENE)


def _int_or(v: Any, default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _background(v: Any) -> List[int]:
    if isinstance(v, list) and len(v) == 3:
        try:
            chans = [int(c) for c in v]
        except (TypeError, ValueError):
            return list(_FALLBACK_CANVAS["background"])
        if all(0 <= c <= 255 for c in chans):
            return chans
    return list(_FALLBACK_CANVAS["background"])


if _YAML_PATH.exists():  # pragma: no branch - simple path
    try:
        with _YAML_PATH.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        canvas = raw.get("canvas", {})
        if isinstance(canvas, dict):
            _canvas["width"] = _int_or(canvas.get("width"), _canvas["width"])
            _canvas["height"] = _int_or(canvas.get("height"), _canvas["height"])
            if "background" in canvas:
                _canvas["background"] = _background(canvas["background"])
        output = raw.get("output", {})
        if isinstance(output, dict):
            if isinstance(output.get("path"), str):
                _output["path"] = output["path"]
            if output.get("backend") in BACKENDS:
                _output["backend"] = output["backend"]
        scene = raw.get("scene", {})
        if isinstance(scene, dict):
            for kind in SHAPE_KINDS:
                if kind in scene:
                    _scene[kind] = max(0, _int_or(scene[kind], _scene[kind]))
    except (OSError, yaml.YAMLError, AttributeError) as e:
        _LOG.warning("failed to load %s, using built-in defaults: %s", _YAML_PATH, e)
        _canvas = dict(_FALLBACK_CANVAS)
        _output = dict(_FALLBACK_OUTPUT)
        _scene = dict(_FALLBACK_SCENE)

CANVAS_DEFAULTS: Dict[str, Any] = _canvas
OUTPUT_DEFAULTS: Dict[str, Any] = _output
SCENE_DEFAULTS: Dict[str, int] = _scene

__all__ = [
    "BACKENDS",
    "CANVAS_DEFAULTS",
    "OUTPUT_DEFAULTS",
    "SCENE_DEFAULTS",
    "SHAPE_KINDS",
]
