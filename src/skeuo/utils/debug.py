"""Debug utilities."""

from __future__ import annotations
from typing import Tuple
import os

import numpy as np

DEBUG_ENV_VAR = "SKEUO_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def get_array_stats(array: np.ndarray) -> Tuple[float, float, float]:
    """
    Get min, max, mean statistics of an array.

    Args:
        array: NumPy array (non-empty)

    Returns:
        (min, max, mean) as floats
    """
    return (
        float(np.min(array)),
        float(np.max(array)),
        float(np.mean(array))
    )


def debug_array_info(name: str, array: np.ndarray):
    """Print debug information about an array."""
    if is_debug_enabled():
        if array.size == 0:
            print(f"[{name}] shape={tuple(array.shape)} dtype={array.dtype} (empty)")
            return
        mn, mx, mean = get_array_stats(array)
        print(f"[{name}] shape={tuple(array.shape)} dtype={array.dtype} "
              f"min={mn:.4f} max={mx:.4f} mean={mean:.4f}")
