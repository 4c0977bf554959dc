"""Surface contract and colour type shared by every rasterizer."""

from rasterart.render.surface import Color, Displayable, RecordingSurface

__all__ = ["Color", "Displayable", "RecordingSurface"]
