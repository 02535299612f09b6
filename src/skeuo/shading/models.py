"""Shading models (Lambert, Phong)."""

from __future__ import annotations
import numpy as np

from .config import Material
from .lights import safe_normalize


SPECULAR_SCALE = 255.0


def compute_diffuse_term(
    N: np.ndarray,
    L: np.ndarray
) -> np.ndarray:
    """
    Compute Lambertian diffuse term.

    Formula:
        diffuse = max(0, N·L)

    Args:
        N: Surface normals (..., 3)
        L: Unit directions toward the light (..., 3) or (3,)

    Returns:
        Diffuse term (..., 1)
    """
    ndotl = (N * L).sum(axis=-1, keepdims=True)
    return np.clip(ndotl, 0.0, 1.0)


def compute_lambert_shading(
    N: np.ndarray,
    L: np.ndarray,
    ambient: float
) -> np.ndarray:
    """
    Compute the ambient-floored Lambert factor.

    Formula:
        lambert = ambient + (1 - ambient) * max(0, N·L)

    Args:
        N: Surface normals (..., 3)
        L: Unit directions toward the light
        ambient: Ambient brightness in [0, 1]

    Returns:
        Lambert factor (..., 1) in [ambient, 1]
    """
    diffuse = compute_diffuse_term(N, L)
    return ambient + (1.0 - ambient) * diffuse


def reflect(incident: np.ndarray, N: np.ndarray) -> np.ndarray:
    """
    Mirror an incoming direction about the surface normal.

    Formula:
        R = I - 2 (I·N) N

    Args:
        incident: Unit direction the light travels (3,) or (..., 3)
        N: Unit normals (..., 3)

    Returns:
        Unit reflected directions (..., 3)
    """
    idotn = (N * incident).sum(axis=-1, keepdims=True)
    return safe_normalize(incident - 2.0 * idotn * N)


def compute_specular_term(
    N: np.ndarray,
    incident: np.ndarray,
    V: np.ndarray,
    weight: float,
    shininess: float
) -> np.ndarray:
    """
    Compute Phong specular term in 8-bit channel units.

    Formula:
        specular = weight * 255 * max(0, R·V) ^ shininess

    Args:
        N: Surface normals (..., 3)
        incident: Unit direction the light travels
        V: Unit directions toward the viewer (..., 3)
        weight: Material reflection brightness
        shininess: Specular exponent

    Returns:
        Specular term (..., 1)
    """
    R = reflect(incident, N)
    rdotv = np.clip((R * V).sum(axis=-1, keepdims=True), 0.0, 1.0)
    return weight * SPECULAR_SCALE * np.power(rdotv, shininess)


def compute_phong_shading(
    N: np.ndarray,
    L: np.ndarray,
    incident: np.ndarray,
    V: np.ndarray,
    material: Material,
    ambient: float
) -> np.ndarray:
    """
    Combine Lambert diffuse and Phong specular into a surface color.

    Args:
        N: Surface normals (..., 3)
        L: Unit direction toward the light
        incident: Unit direction the light travels
        V: Unit directions toward the viewer (..., 3)
        material: Surface material
        ambient: Ambient brightness in [0, 1]

    Returns:
        RGB colors (..., 3) as floats clamped to [0, 255]
    """
    lambert = compute_lambert_shading(N, L, ambient)
    specular = compute_specular_term(
        N, incident, V, material.reflection_brightness, material.shininess
    )
    rgb = material.rgb * lambert + specular
    return np.clip(rgb, 0.0, 255.0)
