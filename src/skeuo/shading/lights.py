"""Light and view vector computation."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from .config import Setting


EPSILON_NORMALIZE = 1e-12


def safe_normalize(
    vectors: np.ndarray,
    axis: int = -1,
    eps: float = EPSILON_NORMALIZE
) -> np.ndarray:
    """
    Safely normalize vectors along specified axis.

    Args:
        vectors: Input vectors (..., D)
        axis: Axis to normalize along
        eps: Small constant to prevent division by zero

    Returns:
        Normalized vectors with same shape
    """
    norm = np.linalg.norm(vectors, axis=axis, keepdims=True) + eps
    return vectors / norm


def compute_light_vectors(setting: Setting) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute the directional light vectors for a setting.

    Args:
        setting: Lighting setting

    Returns:
        L: Unit vector from the surface toward the light (3,)
        incident: Unit vector along which the light travels (3,)
    """
    incident = setting.incident_direction()
    return -incident, incident


def compute_view_vectors(
    xs: np.ndarray,
    ys: np.ndarray,
    setting: Setting,
    image_size: Tuple[int, int]
) -> np.ndarray:
    """
    Compute per-pixel view vectors.

    The viewer sits ``setting.distance`` pixels above the image centre, so
    pixels away from the centre see it at a slant. As the distance grows the
    vectors converge to (0, 0, 1), an orthographic view.

    Args:
        xs, ys: Sample coordinates (H, W)
        setting: Lighting setting
        image_size: (width, height) of the target image

    Returns:
        V: Unit vectors from each point toward the viewer (H, W, 3)
    """
    width, height = image_size
    eye_x = width / 2.0
    eye_y = height / 2.0

    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)

    V = np.stack(
        [eye_x - xs, eye_y - ys, np.full(xs.shape, setting.distance)],
        axis=-1
    )
    return safe_normalize(V)
