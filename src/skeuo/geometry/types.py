"""Point and vector value types."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union
import math

import numpy as np

from ..errors import GeometryError, SettingError
from ..utils.validation import require_finite


@dataclass(frozen=True)
class Point2:
    """
    2D coordinate in image space (x right, y down).

    Attributes:
        x: Horizontal coordinate in pixels
        y: Vertical coordinate in pixels
    """
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", require_finite("Point2.x", self.x, GeometryError))
        object.__setattr__(self, "y", require_finite("Point2.y", self.y, GeometryError))

    @classmethod
    def coerce(cls, value: Union["Point2", Sequence[float]]) -> "Point2":
        """Accept a Point2 or an (x, y) pair."""
        if isinstance(value, cls):
            return value
        try:
            x, y = value
        except (TypeError, ValueError):
            raise GeometryError(f"Expected a point (x, y), got {value!r}") from None
        return cls(x, y)

    def to_list(self) -> list:
        return [self.x, self.y]


def point(x: float, y: float) -> Point2:
    """Shorthand constructor for Point2."""
    return Point2(x, y)


@dataclass(frozen=True)
class Vec3:
    """
    3D direction vector.

    Image x and y axes, with z pointing out of the image toward the viewer.
    """
    x: float
    y: float
    z: float

    def __post_init__(self):
        for name in ("x", "y", "z"):
            value = require_finite(f"Vec3.{name}", getattr(self, name), SettingError)
            object.__setattr__(self, name, value)

    @classmethod
    def coerce(cls, value: Union["Vec3", Sequence[float]]) -> "Vec3":
        """Accept a Vec3 or an (x, y, z) triple."""
        if isinstance(value, cls):
            return value
        try:
            x, y, z = value
        except (TypeError, ValueError):
            raise SettingError(f"Expected a vector (x, y, z), got {value!r}") from None
        return cls(x, y, z)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vec3":
        """
        Return the unit vector with the same direction.

        Raises:
            SettingError: If the vector is zero
        """
        n = self.norm()
        if n == 0.0:
            raise SettingError("Cannot normalize the zero vector")
        return Vec3(self.x / n, self.y / n, self.z / n)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_list(self) -> list:
        return [self.x, self.y, self.z]
