"""Height-field normal estimation."""

from __future__ import annotations
import numpy as np

from ..geometry.primitives import Shape
from .lights import safe_normalize


DEFAULT_NORMAL_STEP = 0.5


def estimate_normals(
    shape: Shape,
    xs: np.ndarray,
    ys: np.ndarray,
    step: float = DEFAULT_NORMAL_STEP
) -> np.ndarray:
    """
    Estimate surface normals of a height field by central differences.

    Formula:
        t_x = (2e, 0, h(x+e, y) - h(x-e, y))
        t_y = (0, 2e, h(x, y+e) - h(x, y-e))
        n   = normalize(t_x × t_y)

    Args:
        shape: Shape providing the height field
        xs, ys: Sample coordinates (H, W)
        step: Finite difference offset e (> 0)

    Returns:
        Unit normals (H, W, 3); z is always > 0, so they face the viewer
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)

    dhx = shape.heights(xs + step, ys) - shape.heights(xs - step, ys)
    dhy = shape.heights(xs, ys + step) - shape.heights(xs, ys - step)
    span = 2.0 * step

    # (span, 0, dhx) x (0, span, dhy)
    n = np.stack(
        [-span * dhx, -span * dhy, np.full(xs.shape, span * span)],
        axis=-1
    )
    return safe_normalize(n)
