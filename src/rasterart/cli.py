"""Command-line interface for rasterart.

Generates one procedural image made of randomly placed shapes and writes
it as PNG. Defaults come from ``settings/values.yml`` and the persisted
settings file; flags override both for the current run.
"""

from __future__ import annotations

import argparse
import logging
from contextlib import ExitStack
from pathlib import Path
from typing import Any

from rasterart import __version__
from rasterart.app.scene import build_scene, draw_scene
from rasterart.config import RenderConfig, make_render_config, merge_settings
from rasterart.core.rand import seeded
from rasterart.settings.store import SettingsStore
from rasterart.settings.values import BACKENDS, SHAPE_KINDS

logger = logging.getLogger(__name__)


def _channel(s: str) -> int:
    v = int(s)
    if not 0 <= v <= 255:
        raise argparse.ArgumentTypeError(f"channel out of range 0..255: {v}")
    return v


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rasterart",
        description="Rasterize random geometric shapes into a PNG image.",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--width", type=int, default=None, help="Canvas width in px")
    p.add_argument("--height", type=int, default=None, help="Canvas height in px")
    p.add_argument(
        "--background",
        type=_channel,
        nargs=3,
        metavar=("R", "G", "B"),
        default=None,
        help="Background colour",
    )
    p.add_argument("--output", "-o", default=None, help="Output PNG path")
    p.add_argument("--backend", choices=BACKENDS, default=None)
    p.add_argument(
        "--window",
        action="store_true",
        help="Show the result in a pygame window (implies --backend pygame)",
    )
    p.add_argument(
        "--save-settings",
        action="store_true",
        help="Persist the merged size, colour, output and counts as defaults",
    )
    p.add_argument(
        "--seed", type=int, default=None, help="Seed for a reproducible image"
    )
    for kind in SHAPE_KINDS:
        p.add_argument(
            f"--{kind}",
            type=int,
            default=None,
            metavar="N",
            help=f"Number of random {kind}",
        )
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return p


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _make_surface(cfg: RenderConfig) -> Any:
    if cfg.backend == "pygame":
        from rasterart.platform.display.pygame_backend import PygameSurface

        return PygameSurface(
            cfg.width, cfg.height, cfg.background, create_window=cfg.window
        )
    from rasterart.platform.display.pillow_backend import PillowSurface

    return PillowSurface(cfg.width, cfg.height, cfg.background)


def render(cfg: RenderConfig) -> Path:
    """Build, draw and save the scene described by *cfg*; return the path."""
    with ExitStack() as stack:
        if cfg.seed is not None:
            stack.enter_context(seeded(cfg.seed))
        shapes = build_scene(cfg.width, cfg.height, cfg.scene)
        surface = _make_surface(cfg)
        n = draw_scene(shapes, surface)
    surface.save_png(cfg.output_path)
    logger.info(
        "wrote %d shapes (%dx%d, %s) to %s",
        n,
        cfg.width,
        cfg.height,
        cfg.backend,
        cfg.output_path,
    )
    if cfg.window:
        surface.present()
        surface.wait_closed()
    return cfg.output_path


def main(argv: list[str] | None = None) -> None:
    """Synchronous entrypoint for the rasterart CLI."""
    args = parse_args(argv)

    if args.version:
        print(f"rasterart {__version__}")
        return

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = merge_settings(args)
    if args.save_settings:
        SettingsStore.save(settings)
        logger.info("saved settings to %s", SettingsStore.settings_path())
    cfg = make_render_config(args=args, settings=settings)
    render(cfg)


if __name__ == "__main__":
    main()
