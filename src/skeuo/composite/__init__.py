"""Compositing system for layering shaded shapes."""

from .utils import (
    new_image,
    normalize_to_float32,
    normalize_alpha,
    clip_region,
    pixel_centers,
)
from .blend import alpha_over_composite

__all__ = [
    # Utils
    "new_image",
    "normalize_to_float32",
    "normalize_alpha",
    "clip_region",
    "pixel_centers",

    # Compositing
    "alpha_over_composite",
]
