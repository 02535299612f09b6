"""
Draw entrypoints.

Every draw mutates the caller's image in place and returns once its shape
is fully composited, so later draws always see the result of earlier ones.
"""

from __future__ import annotations
from typing import Iterable, Optional
import numpy as np

from ..composite.blend import alpha_over_composite
from ..composite.utils import clip_region, pixel_centers
from ..geometry.primitives import Shape
from ..shading.compute import compute_shading
from ..shading.config import Material, Setting
from ..utils.debug import debug_print, debug_array_info
from ..utils.validation import validate_image_buffer
from .config import DEFAULT_RENDER_CONFIG, RenderConfig


def draw_shape(
    shape: Shape,
    material: Material,
    setting: Setting,
    image: np.ndarray,
    config: Optional[RenderConfig] = None
) -> None:
    """
    Shade one shape and composite it over the image.

    Only the part of the shape's bounding box that overlaps the image is
    touched; a shape entirely outside the image is a no-op.

    Args:
        shape: Shape to draw
        material: Surface material
        setting: Lighting setting
        image: Target (H, W, 4) uint8 image, modified in place
        config: Rasterization options (defaults to RenderConfig())

    Raises:
        ImageBufferError: If image is not a writeable (H, W, 4) uint8 array
    """
    validate_image_buffer(image)
    config = config or DEFAULT_RENDER_CONFIG

    height, width = image.shape[:2]
    region = clip_region(shape.bounds(), width, height)
    if region is None:
        debug_print(f"[Draw] {shape.kind} outside {width}x{height} image, skipped")
        return

    x0, y0, x1, y1 = region
    xs, ys = pixel_centers(region, offset=config.pixel_offset)

    rgb, alpha, mask = compute_shading(
        shape,
        material,
        setting,
        xs,
        ys,
        image_size=(width, height),
        normal_step=config.normal_step,
        antialias=config.antialias,
        coverage_width=config.coverage_width,
    )

    debug_print(f"[Draw] {shape.kind} region=({x0}, {y0})-({x1}, {y1}) "
                f"covered={int(mask.sum())}")
    debug_array_info("alpha", alpha)

    alpha_over_composite(image[y0:y1, x0:x1], rgb, alpha, mask)


def render(
    batches: Iterable,
    setting: Setting,
    image: np.ndarray,
    config: Optional[RenderConfig] = None
) -> np.ndarray:
    """
    Draw several batches in order onto one image.

    Args:
        batches: DrawableBatch instances, bottom layer first
        setting: Lighting setting shared by all batches
        image: Target image, modified in place
        config: Rasterization options

    Returns:
        image
    """
    for batch in batches:
        batch.draw(setting, image, config)
    return image
