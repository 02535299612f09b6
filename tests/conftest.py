"""Shared fixtures: lighting setting, materials and blank canvases."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from skeuo import Material, Setting, Vec3, new_image


CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"


@pytest.fixture()
def setting() -> Setting:
    return Setting(incident=Vec3(0.2, 1.0, -0.2), ambient_brightness=0.8, distance=2000)


@pytest.fixture()
def white() -> Material:
    return Material(color=(255, 255, 255, 255), shininess=7, reflection_brightness=1.0)


@pytest.fixture()
def black() -> Material:
    return Material(color=(0, 0, 0, 255), shininess=7, reflection_brightness=1.0)


@pytest.fixture()
def mint() -> Material:
    return Material(color=(179, 220, 214, 255), shininess=4, reflection_brightness=0.2)


@pytest.fixture()
def canvas() -> np.ndarray:
    return new_image(300, 200)


@pytest.fixture()
def config_dir() -> Path:
    return CONFIG_DIR
