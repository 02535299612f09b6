"""Alpha blending compositing."""

from __future__ import annotations
from typing import Optional
import numpy as np

from .utils import normalize_alpha, normalize_to_float32


def alpha_over_composite(
    dst: np.ndarray,
    src_rgb: np.ndarray,
    src_alpha: np.ndarray,
    mask: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Straight-alpha src-over compositing, in place.

    Formula:
        a_out   = a_s + a_d (1 - a_s)
        rgb_out = (rgb_s a_s + rgb_d a_d (1 - a_s)) / a_out

    Pixels where the source alpha is 0 (or outside ``mask``) are not
    written, so they keep their exact previous bytes. A fully opaque
    source pixel replaces the destination exactly.

    Args:
        dst: Destination RGBA patch (H, W, 4) uint8, modified in place
        src_rgb: Source RGB (H, W, 3) uint8
        src_alpha: Source alpha (H, W) in [0, 1]
        mask: Optional (H, W) bool restricting the written pixels

    Returns:
        dst
    """
    alpha = normalize_alpha(src_alpha)
    write = alpha > 0.0
    if mask is not None:
        write &= mask

    if not np.any(write):
        return dst

    sa = alpha[write][:, None]
    src = src_rgb[write].astype(np.float64)

    current = dst[write]
    da = normalize_to_float32(current[:, 3:4]).astype(np.float64)
    drgb = current[:, :3].astype(np.float64)

    out_a = sa + da * (1.0 - sa)
    out_rgb_num = src * sa + drgb * da * (1.0 - sa)
    safe_a = np.where(out_a > 1e-12, out_a, 1.0)
    out_rgb = out_rgb_num / safe_a

    out = np.empty_like(current)
    out[:, :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    out[:, 3] = np.clip(np.rint(out_a[:, 0] * 255.0), 0, 255).astype(np.uint8)
    dst[write] = out

    return dst
