"""Geometry primitives and their height fields."""

from .types import Point2, Vec3, point
from .profiles import dome_profile, cone_profile, distance_to_rect
from .primitives import (
    Shape,
    Corn,
    Concave,
    RoundBox,
    SHAPE_TYPES,
    shape_from_dict,
)

__all__ = [
    # Types
    "Point2",
    "Vec3",
    "point",

    # Profiles
    "dome_profile",
    "cone_profile",
    "distance_to_rect",

    # Shapes
    "Shape",
    "Corn",
    "Concave",
    "RoundBox",
    "SHAPE_TYPES",
    "shape_from_dict",
]
