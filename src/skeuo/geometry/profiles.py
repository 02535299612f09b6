"""Radial height profiles shared by the primitives."""

from __future__ import annotations
import numpy as np


def cone_profile(r: np.ndarray, radius: float, height: float) -> np.ndarray:
    """
    Linear cone profile.

    Formula:
        h(r) = height * (1 - r / radius)

    The line is continued past the rim so that finite differences taken
    near the edge see the same slope as the interior.

    Args:
        r: Distance from the apex (any shape)
        radius: Cone base radius (> 0)
        height: Apex elevation (negative for a pit)

    Returns:
        Heights with the same shape as r
    """
    r = np.asarray(r, dtype=np.float64)
    return height * (1.0 - r / radius)


def dome_profile(d: np.ndarray, radius: float, peak: float) -> np.ndarray:
    """
    Elliptic dome profile.

    Formula:
        h(d) = peak * sqrt(1 - (d / radius)²)

    Reaches ``peak`` at d = 0 and 0 on the rim for any peak, and is a
    hemisphere when |peak| == radius. Beyond the rim the profile is held
    at 0.

    Args:
        d: Distance from the dome centre (any shape)
        radius: Rim radius (> 0)
        peak: Height at d = 0 (negative for a bowl)

    Returns:
        Heights with the same shape as d
    """
    d = np.asarray(d, dtype=np.float64)
    t = np.minimum(d / radius, 1.0)
    return peak * np.sqrt(1.0 - t * t)


def distance_to_rect(
    xs: np.ndarray,
    ys: np.ndarray,
    x0: float,
    y0: float,
    x1: float,
    y1: float
):
    """
    Distances between points and an axis-aligned rectangle.

    The rectangle may be degenerate (zero width and/or height).

    Args:
        xs, ys: Point coordinates (broadcastable)
        x0, y0: Top-left corner
        x1, y1: Bottom-right corner

    Returns:
        outside: Euclidean distance to the rectangle (0 inside)
        inside: Distance to the nearest rectangle side for points inside (0 outside)
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)

    dx = np.maximum(np.maximum(x0 - xs, xs - x1), 0.0)
    dy = np.maximum(np.maximum(y0 - ys, ys - y1), 0.0)
    outside = np.hypot(dx, dy)

    inner = np.minimum(
        np.minimum(xs - x0, x1 - xs),
        np.minimum(ys - y0, y1 - ys)
    )
    inside = np.maximum(inner, 0.0)

    return outside, inside
