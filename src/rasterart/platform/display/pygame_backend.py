"""Pygame-based pixel surface with headless (offscreen) support.

It's suitable for deterministic, headless tests by setting the environment
variable SDL_VIDEODRIVER=dummy before importing pygame.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from rasterart.platform.display.pygame_backend import PygameSurface

    surface = PygameSurface(320, 240)
    Circle(Point(160, 120), 50).draw(surface)
    surface.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Tuple

from rasterart.render.surface import Color

__all__ = ["PygameSurface"]

logger = logging.getLogger(__name__)

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


class PygameSurface:
    """Offscreen pygame surface, optionally mirrored to a window.

    Pixels outside the surface are ignored, matching pygame's own
    clipping for ``Surface.set_at``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = Color(0, 0, 0),
        *,
        create_window: bool = False,
    ) -> None:
        local_pg = pg
        if local_pg is None:
            raise RuntimeError(
                "pygame is not available. "
                "Ensure it is installed and that SDL is configured."
            )

        # Ensure headless if requested
        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        if not local_pg.get_init():
            local_pg.init()

        self._width, self._height = int(width), int(height)
        self._window_surface = None
        if create_window and os.environ.get("SDL_VIDEODRIVER") != "dummy":
            try:
                self._window_surface = local_pg.display.set_mode(
                    (self._width, self._height)
                )
            except Exception:
                logger.warning(
                    "Window creation failed; falling back to offscreen. "
                    "Check SDL_VIDEODRIVER and display permissions."
                )
                self._window_surface = None

        self._surface = local_pg.Surface((self._width, self._height))
        self._surface.fill(background.as_rgba())

    @property
    def surface(self) -> Any:
        return self._surface

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def display(self, x: int, y: int, color: Color) -> None:
        self._surface.set_at((x, y), color.as_rgba())

    def get_pixel(self, x: int, y: int) -> Color:
        c = self._surface.get_at((x, y))
        return Color(c.r, c.g, c.b)

    def present(self) -> None:
        """Blit the offscreen buffer to the window, when one exists."""
        local_pg = pg
        if self._window_surface is not None and local_pg is not None:
            self._window_surface.blit(self._surface, (0, 0))
            local_pg.display.flip()

    @property
    def has_window(self) -> bool:
        return self._window_surface is not None

    def wait_closed(self) -> None:
        """Block until the window is closed; returns at once when headless."""
        local_pg = pg
        if self._window_surface is None or local_pg is None:
            return
        while True:
            event = local_pg.event.wait()
            if event.type == local_pg.QUIT:
                break
            if event.type == local_pg.KEYDOWN and event.key == local_pg.K_ESCAPE:
                break
        local_pg.display.quit()

    def save_png(self, path: str | Path) -> None:
        local_pg = pg
        if local_pg is None:  # pragma: no cover - should not happen at runtime
            raise RuntimeError("pygame is not available")
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        local_pg.image.save(self._surface, str(p))
        logger.debug("saved %dx%d surface to %s", self._width, self._height, p)
