"""Material-bound shape batches."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple, Union
import numpy as np

from ..errors import GeometryError, MaterialError
from ..geometry.primitives import Shape, shape_from_dict
from ..shading.config import Material, Setting
from .config import RenderConfig
from .renderer import draw_shape


@dataclass(frozen=True)
class DrawableBatch:
    """
    Ordered shapes drawn with one material.

    Attributes:
        shapes: Shapes in draw order; later shapes composite over earlier ones
        material: Material applied to every shape
    """
    shapes: Tuple[Shape, ...]
    material: Material

    def __post_init__(self):
        shapes = tuple(self.shapes)
        for shape in shapes:
            if not isinstance(shape, Shape):
                raise GeometryError(f"DrawableBatch expects shapes, got {type(shape).__name__}")
        if not isinstance(self.material, Material):
            raise MaterialError(
                f"DrawableBatch expects a Material, got {type(self.material).__name__}"
            )
        object.__setattr__(self, "shapes", shapes)

    def __len__(self) -> int:
        return len(self.shapes)

    def draw(
        self,
        setting: Setting,
        image: np.ndarray,
        config: Optional[RenderConfig] = None
    ) -> None:
        """
        Draw every shape in order onto the image.

        Args:
            setting: Lighting setting
            image: Target (H, W, 4) uint8 image, modified in place
            config: Rasterization options
        """
        for shape in self.shapes:
            draw_shape(shape, self.material, setting, image, config)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "DrawableBatch":
        """Create DrawableBatch from dictionary with 'shapes' and 'material'."""
        material = cfg.get("material")
        if not isinstance(material, Material):
            material = Material.from_dict(material or {})
        return cls(
            shapes=tuple(shape_from_dict(s) for s in cfg.get("shapes", [])),
            material=material,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "shapes": [shape.to_dict() for shape in self.shapes],
            "material": self.material.to_dict(),
        }


def with_material(
    shapes: Union[Shape, Iterable[Shape]],
    material: Material
) -> DrawableBatch:
    """
    Attach a material to a shape or a sequence of shapes.

    Examples:
        >>> knob = with_material(RoundBox(point(50, 100), point(150, 100), 20, -20), black)
        >>> ticks = with_material([Corn(point(x, 40), 4, 4) for x in (90, 100, 110)], black)
    """
    if isinstance(shapes, Shape):
        shapes = (shapes,)
    return DrawableBatch(shapes=tuple(shapes), material=material)
