"""Rendering configuration."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from ..utils.validation import require_finite


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for rasterization."""

    normal_step: float = 0.5
    antialias: bool = True
    coverage_width: float = 1.0
    pixel_offset: float = 0.5

    def __post_init__(self):
        step = require_finite("normal_step", self.normal_step)
        width = require_finite("coverage_width", self.coverage_width)
        offset = require_finite("pixel_offset", self.pixel_offset)
        if step <= 0.0:
            raise ValueError(f"normal_step must be > 0, got {step}")
        if width <= 0.0:
            raise ValueError(f"coverage_width must be > 0, got {width}")
        if not 0.0 <= offset < 1.0:
            raise ValueError(f"pixel_offset must be in [0, 1), got {offset}")

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from dictionary."""
        return cls(
            normal_step=float(cfg.get("normal_step", 0.5)),
            antialias=bool(cfg.get("antialias", True)),
            coverage_width=float(cfg.get("coverage_width", 1.0)),
            pixel_offset=float(cfg.get("pixel_offset", 0.5)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "normal_step": self.normal_step,
            "antialias": self.antialias,
            "coverage_width": self.coverage_width,
            "pixel_offset": self.pixel_offset,
        }


DEFAULT_RENDER_CONFIG = RenderConfig()
