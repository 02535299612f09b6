"""Input validation utilities."""

from __future__ import annotations
from typing import Sequence, Tuple
import math

import numpy as np

from ..errors import ImageBufferError


def is_finite_number(value) -> bool:
    """Return True for real, finite numbers (bools excluded)."""
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def require_finite(name: str, value, error_cls=ValueError) -> float:
    """
    Coerce value to float, raising if it is not a finite number.

    Args:
        name: Field name used in the error message
        value: Candidate value
        error_cls: Exception class to raise

    Returns:
        value as float
    """
    if not is_finite_number(value):
        raise error_cls(f"{name} must be a finite number, got {value!r}")
    return float(value)


def require_rgba(name: str, color: Sequence, error_cls=ValueError) -> Tuple[int, int, int, int]:
    """
    Validate a 4-channel 8-bit color.

    Args:
        name: Field name used in the error message
        color: Sequence of 4 channel values in [0, 255]
        error_cls: Exception class to raise

    Returns:
        Color as a tuple of 4 ints
    """
    try:
        channels = tuple(color)
    except TypeError:
        raise error_cls(f"{name} must be a sequence of 4 channels, got {color!r}") from None

    if len(channels) != 4:
        raise error_cls(f"{name} must have 4 channels (RGBA), got {len(channels)}")

    out = []
    for value in channels:
        if not is_finite_number(value) or float(value) != int(value):
            raise error_cls(f"{name} channels must be integers, got {channels!r}")
        if not 0 <= int(value) <= 255:
            raise error_cls(f"{name} channels must be in [0, 255], got {channels!r}")
        out.append(int(value))
    return tuple(out)


def validate_image_buffer(image: np.ndarray):
    """
    Validate a target image buffer.

    Args:
        image: Candidate image

    Raises:
        ImageBufferError: If image is not a writable (H, W, 4) uint8 array
    """
    if not isinstance(image, np.ndarray):
        raise ImageBufferError(f"image must be a numpy array, got {type(image).__name__}")

    if image.ndim != 3 or image.shape[2] != 4:
        raise ImageBufferError(f"image must be (H, W, 4), got {image.shape}")

    if image.dtype != np.uint8:
        raise ImageBufferError(f"image must be uint8, got {image.dtype}")

    if not image.flags.writeable:
        raise ImageBufferError("image must be writeable")
