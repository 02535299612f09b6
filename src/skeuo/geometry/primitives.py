"""
Shape primitives and their height fields.

Every shape is an immutable value validated on construction. The shading
engine talks to a shape only through the vectorised queries defined on
``Shape``, once per shape, never per pixel.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type

import numpy as np

from ..errors import GeometryError
from ..utils.validation import require_finite
from .profiles import dome_profile, cone_profile, distance_to_rect
from .types import Point2


Bounds = Tuple[float, float, float, float]


class Shape(ABC):
    """Base class for all primitives."""

    kind: str = ""

    @abstractmethod
    def heights(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """
        Height field at the given points.

        Defined everywhere so that finite differences straddling the
        footprint boundary stay finite; only meaningful inside.
        """

    @abstractmethod
    def edge_distance(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """Signed distance to the footprint boundary, positive inside."""

    @abstractmethod
    def bounds(self) -> Bounds:
        """Footprint bounding box (x0, y0, x1, y1)."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Plain-data description, inverse of ``shape_from_dict``."""

    def coverage(self, xs: np.ndarray, ys: np.ndarray, pixel_width: float = 1.0) -> np.ndarray:
        """
        Antialiasing coverage in [0, 1].

        Ramps linearly from 0 on the boundary to 1 one pixel inside.
        """
        return np.clip(self.edge_distance(xs, ys) / pixel_width, 0.0, 1.0)

    def contains(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return self.edge_distance(xs, ys) >= 0.0

    def height_at(self, p) -> Optional[Tuple[float, float]]:
        """
        Query the height field at a single point.

        Args:
            p: Point2 or (x, y)

        Returns:
            (height, coverage), or None if p is outside the footprint
        """
        p = Point2.coerce(p)
        xs = np.array([p.x])
        ys = np.array([p.y])
        if not self.contains(xs, ys)[0]:
            return None
        return float(self.heights(xs, ys)[0]), float(self.coverage(xs, ys)[0])


@dataclass(frozen=True)
class Corn(Shape):
    """
    Cone with its apex above the centre.

    Attributes:
        center: Apex position
        radius: Base radius (> 0)
        height: Apex elevation; negative values give an inverted pit
    """
    center: Point2
    radius: float
    height: float

    kind = "corn"

    def __post_init__(self):
        object.__setattr__(self, "center", Point2.coerce(self.center))
        radius = require_finite("Corn.radius", self.radius, GeometryError)
        height = require_finite("Corn.height", self.height, GeometryError)
        if radius <= 0.0:
            raise GeometryError(f"Corn.radius must be > 0, got {radius}")
        object.__setattr__(self, "radius", radius)
        object.__setattr__(self, "height", height)

    def _r(self, xs, ys):
        return np.hypot(np.asarray(xs, dtype=np.float64) - self.center.x,
                        np.asarray(ys, dtype=np.float64) - self.center.y)

    def heights(self, xs, ys):
        return cone_profile(self._r(xs, ys), self.radius, self.height)

    def edge_distance(self, xs, ys):
        return self.radius - self._r(xs, ys)

    def bounds(self):
        c, r = self.center, self.radius
        return (c.x - r, c.y - r, c.x + r, c.y + r)

    def to_dict(self):
        return {
            "type": self.kind,
            "center": self.center.to_list(),
            "radius": self.radius,
            "height": self.height,
        }


@dataclass(frozen=True)
class Concave(Shape):
    """
    Elliptic bowl (or dome) over a disk.

    Attributes:
        center: Bowl centre
        radius: Rim radius (> 0)
        depth: Bowl depth at the centre; height(center) = -depth.
            Negative depth gives a dome.
    """
    center: Point2
    radius: float
    depth: float

    kind = "concave"

    def __post_init__(self):
        object.__setattr__(self, "center", Point2.coerce(self.center))
        radius = require_finite("Concave.radius", self.radius, GeometryError)
        depth = require_finite("Concave.depth", self.depth, GeometryError)
        if radius <= 0.0:
            raise GeometryError(f"Concave.radius must be > 0, got {radius}")
        object.__setattr__(self, "radius", radius)
        object.__setattr__(self, "depth", depth)

    def _r(self, xs, ys):
        return np.hypot(np.asarray(xs, dtype=np.float64) - self.center.x,
                        np.asarray(ys, dtype=np.float64) - self.center.y)

    def heights(self, xs, ys):
        return dome_profile(self._r(xs, ys), self.radius, -self.depth)

    def edge_distance(self, xs, ys):
        return self.radius - self._r(xs, ys)

    def bounds(self):
        c, r = self.center, self.radius
        return (c.x - r, c.y - r, c.x + r, c.y + r)

    def to_dict(self):
        return {
            "type": self.kind,
            "center": self.center.to_list(),
            "radius": self.radius,
            "depth": self.depth,
        }


@dataclass(frozen=True)
class RoundBox(Shape):
    """
    Rounded rectangle (or capsule) with a bevelled rim.

    The footprint is the rectangle [top_left, bottom_right] inflated by
    border_radius. The rectangle itself may be degenerate in either axis,
    which yields a pill. Because the footprint is inflated, border_radius is
    always at most half its shorter side, so only ``border_radius > 0`` is
    checked. The rim follows the elliptic dome profile: height is ``depth``
    on the inner rectangle and 0 on the outer edge.

    Attributes:
        top_left: Top-left corner of the inner rectangle
        bottom_right: Bottom-right corner of the inner rectangle
        border_radius: Rim width and corner radius (> 0)
        depth: Signed extrusion; positive protrudes, negative recesses.
    """
    top_left: Point2
    bottom_right: Point2
    border_radius: float
    depth: float

    kind = "round_box"

    def __post_init__(self):
        tl = Point2.coerce(self.top_left)
        br = Point2.coerce(self.bottom_right)
        if tl.x > br.x or tl.y > br.y:
            raise GeometryError(
                f"RoundBox corners out of order: top_left={tl}, bottom_right={br}"
            )
        radius = require_finite("RoundBox.border_radius", self.border_radius, GeometryError)
        depth = require_finite("RoundBox.depth", self.depth, GeometryError)
        if radius <= 0.0:
            raise GeometryError(f"RoundBox.border_radius must be > 0, got {radius}")

        object.__setattr__(self, "top_left", tl)
        object.__setattr__(self, "bottom_right", br)
        object.__setattr__(self, "border_radius", radius)
        object.__setattr__(self, "depth", depth)

    def _distances(self, xs, ys):
        return distance_to_rect(
            xs, ys,
            self.top_left.x, self.top_left.y,
            self.bottom_right.x, self.bottom_right.y
        )

    def heights(self, xs, ys):
        outside, _ = self._distances(xs, ys)
        return dome_profile(outside, self.border_radius, self.depth)

    def edge_distance(self, xs, ys):
        outside, inside = self._distances(xs, ys)
        return self.border_radius - outside + inside

    def bounds(self):
        r = self.border_radius
        return (
            self.top_left.x - r,
            self.top_left.y - r,
            self.bottom_right.x + r,
            self.bottom_right.y + r,
        )

    def to_dict(self):
        return {
            "type": self.kind,
            "top_left": self.top_left.to_list(),
            "bottom_right": self.bottom_right.to_list(),
            "border_radius": self.border_radius,
            "depth": self.depth,
        }


SHAPE_TYPES: Dict[str, Type[Shape]] = {
    Corn.kind: Corn,
    Concave.kind: Concave,
    RoundBox.kind: RoundBox,
}


def shape_from_dict(cfg: Dict[str, Any]) -> Shape:
    """
    Build a shape from a plain-data description.

    Args:
        cfg: Mapping with a 'type' key ('corn', 'concave' or 'round_box')
            and the constructor fields of that shape

    Returns:
        Validated shape instance

    Raises:
        GeometryError: If the type is unknown or fields are missing/invalid
    """
    fields = dict(cfg)
    kind = fields.pop("type", None)
    if kind not in SHAPE_TYPES:
        available = ", ".join(sorted(SHAPE_TYPES))
        raise GeometryError(f"Unknown shape type: {kind!r}. Available: {available}")

    try:
        return SHAPE_TYPES[kind](**fields)
    except TypeError as e:
        raise GeometryError(f"Invalid fields for shape '{kind}': {e}") from e
