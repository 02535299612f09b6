"""Main shading computation."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from ..geometry.primitives import Shape
from .config import Material, Setting
from .lights import compute_light_vectors, compute_view_vectors
from .models import compute_phong_shading
from .normals import DEFAULT_NORMAL_STEP, estimate_normals


def compute_shading(
    shape: Shape,
    material: Material,
    setting: Setting,
    xs: np.ndarray,
    ys: np.ndarray,
    image_size: Tuple[int, int],
    normal_step: float = DEFAULT_NORMAL_STEP,
    antialias: bool = True,
    coverage_width: float = 1.0
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Shade one shape over a grid of sample points.

    Args:
        shape: Shape whose height field is lit
        material: Surface material
        setting: Lighting setting
        xs, ys: Pixel-centre coordinates (H, W)
        image_size: (width, height) of the target image, used to place the viewer
        normal_step: Finite difference offset for normal estimation
        antialias: Ramp alpha with edge coverage; if False covered pixels are opaque
        coverage_width: Width of the antialiasing ramp in pixels

    Returns:
        rgb: Shaded colors (H, W, 3) uint8
        alpha: Source opacity (H, W) float in [0, 1], 0 where not covered
        mask: Footprint coverage (H, W) bool

    Examples:
        >>> ys, xs = np.mgrid[0:200, 0:300] + 0.5
        >>> rgb, alpha, mask = compute_shading(
        ...     shape=Corn(point(150, 100), 80, 120),
        ...     material=white,
        ...     setting=DEFAULT_SETTING,
        ...     xs=xs, ys=ys,
        ...     image_size=(300, 200),
        ... )
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)

    if xs.shape != ys.shape:
        raise ValueError(f"xs and ys must have same shape: {xs.shape} != {ys.shape}")

    # Footprint and antialiasing
    edge = shape.edge_distance(xs, ys)
    mask = edge >= 0.0
    if antialias:
        coverage = np.clip(edge / coverage_width, 0.0, 1.0)
    else:
        coverage = mask.astype(np.float64)

    # Geometry
    V = compute_view_vectors(xs, ys, setting, image_size)
    N = estimate_normals(shape, xs, ys, step=normal_step)

    # Lighting
    L, incident = compute_light_vectors(setting)
    rgb = compute_phong_shading(N, L, incident, V, material, setting.ambient_brightness)

    alpha = np.where(mask, material.alpha * coverage, 0.0)

    return np.rint(rgb).astype(np.uint8), alpha, mask
