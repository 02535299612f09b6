"""Material and lighting configuration."""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple
import numpy as np

from ..errors import MaterialError, SettingError
from ..geometry.types import Vec3
from ..utils.validation import require_finite, require_rgba


DEFAULT_INCIDENT = (0.2, 1.0, -0.2)
DEFAULT_AMBIENT_BRIGHTNESS = 0.8
DEFAULT_DISTANCE = 2000.0

DEFAULT_COLOR = (255, 255, 255, 255)
DEFAULT_SHININESS = 7.0
DEFAULT_REFLECTION_BRIGHTNESS = 1.0


@dataclass(frozen=True)
class Material:
    """
    Optical surface properties.

    Attributes:
        color: RGBA base color, 0-255 per channel
        shininess: Specular exponent (>= 0)
        reflection_brightness: Specular weight, usually in [0, 1]
            (not clamped; values above 1 over-brighten highlights)
    """
    color: Tuple[int, int, int, int]
    shininess: float
    reflection_brightness: float

    def __post_init__(self):
        color = require_rgba("Material.color", self.color, MaterialError)
        shininess = require_finite("Material.shininess", self.shininess, MaterialError)
        weight = require_finite(
            "Material.reflection_brightness", self.reflection_brightness, MaterialError
        )
        if shininess < 0.0:
            raise MaterialError(f"Material.shininess must be >= 0, got {shininess}")
        if weight < 0.0:
            raise MaterialError(f"Material.reflection_brightness must be >= 0, got {weight}")

        object.__setattr__(self, "color", color)
        object.__setattr__(self, "shininess", shininess)
        object.__setattr__(self, "reflection_brightness", weight)

    @property
    def rgb(self) -> np.ndarray:
        return np.asarray(self.color[:3], dtype=np.float64)

    @property
    def alpha(self) -> float:
        """Opacity in [0, 1]."""
        return self.color[3] / 255.0

    def with_color(self, color) -> "Material":
        """Copy of this material with another base color."""
        return replace(self, color=color)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "Material":
        """Create Material from dictionary."""
        return cls(
            color=cfg.get("color", DEFAULT_COLOR),
            shininess=cfg.get("shininess", DEFAULT_SHININESS),
            reflection_brightness=cfg.get("reflection_brightness", DEFAULT_REFLECTION_BRIGHTNESS),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "color": list(self.color),
            "shininess": self.shininess,
            "reflection_brightness": self.reflection_brightness,
        }


@dataclass(frozen=True)
class Setting:
    """
    Lighting configuration shared by every draw of a pass.

    Attributes:
        incident: Direction the light travels (need not be normalized).
            y points down the image, z toward the viewer, so the default
            (0.2, 1, -0.2) lights the scene from the top.
        ambient_brightness: Ambient floor of the diffuse term, in [0, 1]
        distance: Height of the viewer above the image centre, in pixels (> 0).
            Larger distances approach an orthographic view.
    """
    incident: Vec3
    ambient_brightness: float
    distance: float

    def __post_init__(self):
        incident = Vec3.coerce(self.incident)
        if incident.norm() == 0.0:
            raise SettingError("Setting.incident must be a nonzero vector")
        ambient = require_finite(
            "Setting.ambient_brightness", self.ambient_brightness, SettingError
        )
        distance = require_finite("Setting.distance", self.distance, SettingError)
        if not 0.0 <= ambient <= 1.0:
            raise SettingError(f"Setting.ambient_brightness must be in [0, 1], got {ambient}")
        if distance <= 0.0:
            raise SettingError(f"Setting.distance must be > 0, got {distance}")

        object.__setattr__(self, "incident", incident)
        object.__setattr__(self, "ambient_brightness", ambient)
        object.__setattr__(self, "distance", distance)

    def incident_direction(self) -> np.ndarray:
        """Normalized incidence vector (3,)."""
        return self.incident.normalized().as_array()

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "Setting":
        """Create Setting from dictionary."""
        return cls(
            incident=cfg.get("incident", DEFAULT_INCIDENT),
            ambient_brightness=cfg.get("ambient_brightness", DEFAULT_AMBIENT_BRIGHTNESS),
            distance=cfg.get("distance", DEFAULT_DISTANCE),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "incident": self.incident.to_list(),
            "ambient_brightness": self.ambient_brightness,
            "distance": self.distance,
        }


DEFAULT_SETTING = Setting(
    incident=Vec3(*DEFAULT_INCIDENT),
    ambient_brightness=DEFAULT_AMBIENT_BRIGHTNESS,
    distance=DEFAULT_DISTANCE,
)
