"""Core drawing API."""

from .config import RenderConfig, DEFAULT_RENDER_CONFIG
from .renderer import draw_shape, render
from .drawable import DrawableBatch, with_material

__all__ = [
    "RenderConfig",
    "DEFAULT_RENDER_CONFIG",
    "draw_shape",
    "render",
    "DrawableBatch",
    "with_material",
]
