"""
skeuo - Procedural skeuomorphic shading for UI primitives

Shades rounded boxes, cones and concave caps into an RGBA image by lighting
their height fields, so sliders, dials and buttons look embossed and glossy.

Components:
    - Geometry: Point2, Vec3 and the RoundBox / Corn / Concave primitives
    - Shading: Material, Setting, normal estimation and Lambert/Phong lighting
    - Composite: Image buffers and src-over blending
    - Core: DrawableBatch and the draw entrypoints
    - Presets / Scene: Material presets and YAML scene loading

Example:
    >>> from skeuo import RoundBox, Setting, Vec3, new_image, point, with_material
    >>> from skeuo import get_material_preset
    >>>
    >>> setting = Setting(Vec3(0.2, 1.0, -0.2), ambient_brightness=0.8, distance=2000)
    >>> image = new_image(300, 200)
    >>>
    >>> knob = RoundBox(point(50, 100), point(150, 100), border_radius=20, depth=-20)
    >>> with_material(knob, get_material_preset("black")).draw(setting, image)
"""

__version__ = "0.1.0"

# Errors
from .errors import (
    SkeuoError,
    GeometryError,
    MaterialError,
    SettingError,
    ImageBufferError,
    SceneError,
)

# Geometry
from .geometry import (
    Point2,
    Vec3,
    point,
    Shape,
    Corn,
    Concave,
    RoundBox,
    shape_from_dict,
)

# Shading
from .shading import (
    Material,
    Setting,
    DEFAULT_SETTING,
    compute_shading,
)

# Composite
from .composite import (
    new_image,
    alpha_over_composite,
)

# Core
from .core import (
    RenderConfig,
    DrawableBatch,
    with_material,
    draw_shape,
    render,
)

# Presets / Scene
from .presets import (
    MATERIAL_PRESETS,
    get_material_preset,
    resolve_material_preset,
)
from .scene import (
    Scene,
    load_scene,
    render_scene,
)

__all__ = [
    "__version__",

    # Errors
    "SkeuoError",
    "GeometryError",
    "MaterialError",
    "SettingError",
    "ImageBufferError",
    "SceneError",

    # Geometry
    "Point2",
    "Vec3",
    "point",
    "Shape",
    "Corn",
    "Concave",
    "RoundBox",
    "shape_from_dict",

    # Shading
    "Material",
    "Setting",
    "DEFAULT_SETTING",
    "compute_shading",

    # Composite
    "new_image",
    "alpha_over_composite",

    # Core
    "RenderConfig",
    "DrawableBatch",
    "with_material",
    "draw_shape",
    "render",

    # Presets / Scene
    "MATERIAL_PRESETS",
    "get_material_preset",
    "resolve_material_preset",
    "Scene",
    "load_scene",
    "render_scene",
]
