"""Image buffer utilities for compositing."""

from __future__ import annotations
from typing import Optional, Tuple
import math
import numpy as np

from ..utils.validation import require_rgba


Region = Tuple[int, int, int, int]


def new_image(
    width: int,
    height: int,
    color: Tuple[int, int, int, int] = (0, 0, 0, 0)
) -> np.ndarray:
    """
    Allocate an RGBA image buffer.

    Args:
        width: Image width in pixels (> 0)
        height: Image height in pixels (> 0)
        color: Fill color, transparent black by default

    Returns:
        (height, width, 4) uint8 array
    """
    if int(width) <= 0 or int(height) <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")

    color = require_rgba("color", color)
    image = np.empty((int(height), int(width), 4), dtype=np.uint8)
    image[...] = np.asarray(color, dtype=np.uint8)
    return image


def normalize_to_float32(img: np.ndarray) -> np.ndarray:
    """
    Normalize a uint8 image to float32 in range [0, 1].

    Args:
        img: Input image, uint8

    Returns:
        Normalized float32 image in [0, 1]
    """
    img = np.asarray(img)
    if img.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 image, got {img.dtype}")

    return img.astype(np.float32) / 255.0


def normalize_alpha(alpha: np.ndarray) -> np.ndarray:
    """
    Normalize alpha channel to 2D array [0, 1].

    Args:
        alpha: Alpha channel (H, W) or (H, W, 1)

    Returns:
        2D alpha array (H, W) in [0, 1]
    """
    alpha = np.asarray(alpha, dtype=np.float64)

    if alpha.ndim == 3:
        alpha = alpha[..., 0]

    return np.clip(alpha, 0.0, 1.0)


def clip_region(
    bounds: Tuple[float, float, float, float],
    width: int,
    height: int
) -> Optional[Region]:
    """
    Intersect a continuous bounding box with the pixel grid.

    Args:
        bounds: (x0, y0, x1, y1) in pixel coordinates
        width: Image width
        height: Image height

    Returns:
        (x0, y0, x1, y1) integer pixel range with exclusive upper bounds,
        or None if the box does not overlap the image
    """
    bx0, by0, bx1, by1 = bounds

    x0 = max(0, math.floor(bx0))
    y0 = max(0, math.floor(by0))
    x1 = min(width, math.ceil(bx1) + 1)
    y1 = min(height, math.ceil(by1) + 1)

    if x1 <= x0 or y1 <= y0:
        return None

    return x0, y0, x1, y1


def pixel_centers(region: Region, offset: float = 0.5) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample coordinates of every pixel in a region.

    Args:
        region: (x0, y0, x1, y1) integer pixel range
        offset: Sample position inside the pixel, 0.5 is the centre

    Returns:
        xs, ys: (H, W) float arrays
    """
    x0, y0, x1, y1 = region
    ys, xs = np.mgrid[y0:y1, x0:x1].astype(np.float64)
    return xs + offset, ys + offset
