"""Material presets for common skeuomorphic surfaces.

Each preset maps a material name to the parameters of ``Material``.

Usage in config:
    material:
      preset: "mint"        # applies all preset values
      shininess: 9          # optional: override individual params
"""

from __future__ import annotations
from typing import Any, Dict, Mapping

from omegaconf import DictConfig, OmegaConf

from .errors import MaterialError
from .shading.config import Material
from .utils.debug import debug_print


MATERIAL_PRESETS = {
    "white": {
        "color": [255, 255, 255, 255],
        "shininess": 7,
        "reflection_brightness": 1.0,
        "description": "Glossy white plastic",
    },
    "black": {
        "color": [0, 0, 0, 255],
        "shininess": 7,
        "reflection_brightness": 1.0,
        "description": "Glossy black plastic",
    },
    "mint": {
        "color": [179, 220, 214, 255],
        "shininess": 4,
        "reflection_brightness": 0.2,
        "description": "Matte pastel mint, slider tracks",
    },
}

# Keys that get applied from preset to the material
_PRESET_KEYS = ["color", "shininess", "reflection_brightness"]


def get_material_preset(name: str) -> Material:
    """
    Build the material for a preset name.

    Raises:
        MaterialError: If the preset does not exist
    """
    if name not in MATERIAL_PRESETS:
        available = ", ".join(sorted(MATERIAL_PRESETS.keys()))
        raise MaterialError(
            f"Unknown material preset: '{name}'. "
            f"Available: {available}"
        )
    preset = MATERIAL_PRESETS[name]
    return Material.from_dict({key: preset[key] for key in _PRESET_KEYS})


def resolve_material_preset(cfg: Mapping[str, Any]) -> Material:
    """Build a material from a config node, applying preset values first.

    If cfg.preset names a valid preset, its values are used as defaults.
    Any values explicitly specified alongside the preset override them.

    Args:
        cfg: Mapping or OmegaConf node with an optional 'preset' key and
            any of the Material fields

    Returns:
        Validated Material
    """
    if not isinstance(cfg, DictConfig):
        cfg = OmegaConf.create(dict(cfg))

    preset_name = cfg.get("preset", None)
    overrides = {k: v for k, v in cfg.items() if k != "preset"}

    if preset_name is None:
        return Material.from_dict(OmegaConf.to_container(OmegaConf.create(overrides)))

    base = get_material_preset(preset_name)
    debug_print(f"[Material] Applying preset: '{preset_name}' - "
                f"{MATERIAL_PRESETS[preset_name]['description']}")

    merged = OmegaConf.merge(OmegaConf.create(base.to_dict()), OmegaConf.create(overrides))
    return Material.from_dict(OmegaConf.to_container(merged))


def list_material_presets() -> Dict[str, str]:
    """Preset names mapped to their descriptions."""
    return {name: preset["description"] for name, preset in MATERIAL_PRESETS.items()}
