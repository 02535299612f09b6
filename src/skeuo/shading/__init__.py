"""Shading system for height-field illumination."""

from .config import (
    Material,
    Setting,
    DEFAULT_SETTING,
)
from .compute import compute_shading
from .lights import (
    safe_normalize,
    compute_light_vectors,
    compute_view_vectors,
)
from .models import (
    compute_diffuse_term,
    compute_lambert_shading,
    compute_specular_term,
    compute_phong_shading,
    reflect,
)
from .normals import estimate_normals

__all__ = [
    # Config
    "Material",
    "Setting",
    "DEFAULT_SETTING",

    # Main API
    "compute_shading",

    # Lights
    "safe_normalize",
    "compute_light_vectors",
    "compute_view_vectors",

    # Models
    "compute_diffuse_term",
    "compute_lambert_shading",
    "compute_specular_term",
    "compute_phong_shading",
    "reflect",

    # Normals
    "estimate_normals",
]
