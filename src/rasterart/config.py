"""Runtime configuration helpers.

Small aggregator that merges defaults from ``settings/values.yml``, the
persisted Settings store and optional CLI overrides into a single
RenderConfig. Later sources win.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .app.scene import SceneSpec
from .render.surface import Color
from .settings.schema import Settings
from .settings.store import SettingsStore
from .settings.values import SHAPE_KINDS

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RenderConfig:
    width: int
    height: int
    background: Color
    output_path: Path
    backend: str
    scene: SceneSpec
    seed: Optional[int] = None
    window: bool = False


def merge_settings(args: Optional[object] = None) -> Settings:
    """Return persisted settings with CLI *args* applied on top.

    *args* is argparse.Namespace-like; attributes that are missing or None
    leave the persisted value untouched. The merged result is validated
    through :class:`Settings`, so invalid overrides raise
    ``pydantic.ValidationError``.
    """
    settings = SettingsStore.load()

    if args is not None:
        overrides: dict[str, object] = {}
        for name in ("width", "height", "backend", *SHAPE_KINDS):
            v = getattr(args, name, None)
            if v is not None:
                overrides[name] = v
        out = getattr(args, "output", None)
        if out is not None:
            overrides["output_path"] = str(out)
        bg = getattr(args, "background", None)
        if bg is not None:
            overrides["background"] = list(bg)
        if overrides:
            logger.debug("applying CLI overrides: %s", overrides)
            try:
                settings = Settings.model_validate(
                    {**settings.model_dump(), **overrides}
                )
            except ValidationError:
                logger.error("invalid configuration overrides: %s", overrides)
                raise
    return settings


def make_render_config(
    *, args: Optional[object] = None, settings: Optional[Settings] = None
) -> RenderConfig:
    """Build a RenderConfig from *settings* (merged from *args* when omitted).

    A window only makes sense for the pygame surface, so asking for one
    selects that backend.
    """
    if settings is None:
        settings = merge_settings(args)
    window = bool(getattr(args, "window", False)) if args is not None else False
    scene = SceneSpec(**{k: int(getattr(settings, k)) for k in SHAPE_KINDS})
    seed = getattr(args, "seed", None) if args is not None else None
    return RenderConfig(
        width=settings.width,
        height=settings.height,
        background=Color.rgb(*settings.background),
        output_path=Path(settings.output_path).expanduser(),
        backend="pygame" if window else settings.backend,
        scene=scene,
        seed=seed,
        window=window,
    )
