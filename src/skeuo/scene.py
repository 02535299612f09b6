"""
Declarative scenes.

A scene file describes a canvas, one lighting setting and an ordered list
of layers, each layer being a material plus the shapes drawn with it:

    canvas:
      width: 300
      height: 200
      background: [0, 0, 0, 0]
    setting:
      incident: [0.2, 1.0, -0.2]
      ambient_brightness: 0.8
      distance: 2000
    materials:
      track: {preset: mint}
    layers:
      - material: track
        shapes:
          - {type: round_box, top_left: [50, 100], bottom_right: [250, 100],
             border_radius: 40, depth: -40}
      - material: {preset: black, shininess: 9}
        shapes:
          - {type: corn, center: [100, 100], radius: 10, height: 5}

A layer's material is either a name (key of ``materials`` or a preset
name) or an inline material mapping.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import numpy as np
from omegaconf import DictConfig, OmegaConf

from .composite.utils import new_image
from .core.config import RenderConfig
from .core.drawable import DrawableBatch
from .core.renderer import render
from .errors import SceneError
from .geometry.primitives import shape_from_dict
from .presets import MATERIAL_PRESETS, get_material_preset, resolve_material_preset
from .shading.config import DEFAULT_SETTING, Material, Setting
from .utils.debug import debug_print


REQUIRED_SECTIONS = ["canvas", "layers"]


@dataclass(frozen=True)
class Scene:
    """A fully validated scene, ready to render."""

    width: int
    height: int
    background: Tuple[int, int, int, int]
    setting: Setting
    batches: Tuple[DrawableBatch, ...]
    config: RenderConfig

    def new_canvas(self) -> np.ndarray:
        return new_image(self.width, self.height, self.background)


def load_scene_config(source: Union[str, Path, Mapping[str, Any]]) -> DictConfig:
    """
    Load a scene description as an OmegaConf node.

    Args:
        source: Path to a YAML file, or a mapping / OmegaConf node

    Returns:
        OmegaConf configuration object

    Raises:
        FileNotFoundError: If a path is given and does not exist
        SceneError: If a required section is missing
    """
    if isinstance(source, (str, Path)):
        if not Path(source).exists():
            raise FileNotFoundError(f"Scene file not found: {source}")
        config = OmegaConf.load(source)
        debug_print(f"[Scene] Loaded scene from: {source}")
    elif isinstance(source, DictConfig):
        config = source
    else:
        config = OmegaConf.create(dict(source))

    for section in REQUIRED_SECTIONS:
        if section not in config:
            raise SceneError(f"Missing required scene section: {section}")

    return config


def _resolve_layer_material(entry: Any, named: Dict[str, Material]) -> Material:
    if isinstance(entry, str):
        if entry in named:
            return named[entry]
        if entry in MATERIAL_PRESETS:
            return get_material_preset(entry)
        available = ", ".join(sorted(set(named) | set(MATERIAL_PRESETS)))
        raise SceneError(f"Unknown material: '{entry}'. Available: {available}")
    if isinstance(entry, Mapping):
        return resolve_material_preset(entry)
    raise SceneError(f"Layer material must be a name or a mapping, got {entry!r}")


def build_scene(config: DictConfig) -> Scene:
    """
    Validate a scene configuration and build its objects.

    Args:
        config: Scene configuration (see module docstring)

    Returns:
        Scene
    """
    data = OmegaConf.to_container(config, resolve=True)

    canvas = data["canvas"] or {}
    try:
        width = int(canvas["width"])
        height = int(canvas["height"])
    except (KeyError, TypeError, ValueError) as e:
        raise SceneError(f"canvas needs integer width and height: {e}") from e
    background = tuple(canvas.get("background", (0, 0, 0, 0)))

    setting_cfg = data.get("setting")
    setting = Setting.from_dict(setting_cfg) if setting_cfg else DEFAULT_SETTING
    render_config = RenderConfig.from_dict(data.get("render") or {})

    named = {
        name: resolve_material_preset(spec)
        for name, spec in (data.get("materials") or {}).items()
    }

    layers = data["layers"]
    if not isinstance(layers, list):
        raise SceneError(f"layers must be a list, got {type(layers).__name__}")

    batches: List[DrawableBatch] = []
    for index, layer in enumerate(layers):
        if not isinstance(layer, Mapping) or "material" not in layer:
            raise SceneError(f"Layer {index} needs a 'material' and 'shapes'")
        material = _resolve_layer_material(layer["material"], named)
        shapes = tuple(shape_from_dict(s) for s in layer.get("shapes") or [])
        batches.append(DrawableBatch(shapes=shapes, material=material))

    debug_print(f"[Scene] {width}x{height}, {len(batches)} layers, "
                f"{sum(len(b) for b in batches)} shapes")

    return Scene(
        width=width,
        height=height,
        background=background,
        setting=setting,
        batches=tuple(batches),
        config=render_config,
    )


def load_scene(source: Union[str, Path, Mapping[str, Any]]) -> Scene:
    """Load and build a scene from a YAML file or mapping."""
    return build_scene(load_scene_config(source))


def render_scene(
    scene: Union[Scene, str, Path, Mapping[str, Any]],
    image: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Render a scene.

    Args:
        scene: Scene, or anything accepted by ``load_scene``
        image: Optional target image; a new canvas is allocated if None

    Returns:
        The rendered (H, W, 4) uint8 image
    """
    if not isinstance(scene, Scene):
        scene = load_scene(scene)
    if image is None:
        image = scene.new_canvas()
    return render(scene.batches, scene.setting, image, scene.config)
