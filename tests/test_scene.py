import numpy as np
import pytest
from omegaconf import OmegaConf

from skeuo import (
    MATERIAL_PRESETS,
    Concave,
    Corn,
    GeometryError,
    MaterialError,
    RoundBox,
    SceneError,
    get_material_preset,
    load_scene,
    new_image,
    point,
    render,
    render_scene,
    resolve_material_preset,
    with_material,
)
from skeuo.presets import list_material_presets


def test_presets_build_valid_materials():
    for name in MATERIAL_PRESETS:
        assert get_material_preset(name).color == tuple(MATERIAL_PRESETS[name]["color"])
    assert get_material_preset("mint").shininess == 4.0
    assert set(list_material_presets()) == set(MATERIAL_PRESETS)


def test_unknown_preset():
    with pytest.raises(MaterialError, match="Available"):
        get_material_preset("chrome")
    with pytest.raises(MaterialError):
        resolve_material_preset({"preset": "chrome"})


def test_resolve_preset_with_overrides(black):
    assert resolve_material_preset({"preset": "black"}) == black
    glossy = resolve_material_preset({"preset": "black", "shininess": 12})
    assert glossy.shininess == 12.0
    assert glossy.color == (0, 0, 0, 255)

    node = OmegaConf.create({"preset": "mint", "color": [1, 2, 3, 255]})
    tinted = resolve_material_preset(node)
    assert tinted.color == (1, 2, 3, 255)
    assert tinted.reflection_brightness == 0.2


def test_resolve_without_preset_uses_fields():
    m = resolve_material_preset({"color": [10, 20, 30, 40], "shininess": 2, "reflection_brightness": 0.5})
    assert m.color == (10, 20, 30, 40)
    with pytest.raises(MaterialError):
        resolve_material_preset({"color": [300, 0, 0, 255]})


def test_dial_scene_matches_hand_built_layers(config_dir, setting, white, black):
    scene = load_scene(config_dir / "dial.yaml")
    assert (scene.width, scene.height) == (300, 300)
    assert scene.setting == setting
    assert len(scene.batches) == 4

    expected = new_image(300, 300)
    render(
        [
            with_material(Corn(point(150, 150), 150, 450), white),
            with_material(Concave(point(150, 150), 130, 30), white),
            with_material(Corn(point(215, 85), 20, -30), white),
            with_material(Concave(point(215, 85), 15, 2.5), black),
        ],
        setting,
        expected,
    )
    assert np.array_equal(render_scene(scene), expected)


def test_slider_scene(config_dir, mint, black):
    scene = load_scene(str(config_dir / "slider.yaml"))
    assert [len(b) for b in scene.batches] == [2, 2, 3]
    assert scene.batches[0].material == mint
    assert scene.batches[1].material == black
    assert scene.batches[2].shapes[1] == RoundBox(point(100, 90), point(100, 110), 4, -4)

    img = render_scene(scene)
    assert img.shape == (200, 300, 4)
    # track spans x in [10, 290], nothing drawn outside it
    assert img[100, 5, 3] == 0 and img[100, 295, 3] == 0
    assert img[100, 200, 3] == 255


def test_render_scene_onto_existing_image(config_dir):
    base = new_image(300, 200, color=(255, 255, 255, 255))
    out = render_scene(config_dir / "slider.yaml", image=base)
    assert out is base
    assert base[5, 5].tolist() == [255, 255, 255, 255]


def test_scene_from_mapping_uses_defaults():
    scene = load_scene({
        "canvas": {"width": 40, "height": 30},
        "layers": [{"material": {"preset": "white"}, "shapes": [
            {"type": "corn", "center": [20, 15], "radius": 10, "height": 4},
        ]}],
    })
    assert scene.setting.distance == 2000.0
    assert scene.config.antialias is True
    assert scene.background == (0, 0, 0, 0)
    assert render_scene(scene)[15, 20, 3] == 255


def test_scene_render_options():
    scene = load_scene({
        "canvas": {"width": 40, "height": 30},
        "render": {"antialias": False},
        "layers": [{"material": "white", "shapes": [
            {"type": "corn", "center": [20, 15], "radius": 10.4, "height": 4},
        ]}],
    })
    assert set(np.unique(render_scene(scene)[..., 3]).tolist()) <= {0, 255}


def test_scene_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scene(tmp_path / "missing.yaml")

    with pytest.raises(SceneError, match="layers"):
        load_scene({"canvas": {"width": 10, "height": 10}})

    with pytest.raises(SceneError, match="width and height"):
        load_scene({"canvas": {"width": 10}, "layers": []})

    with pytest.raises(SceneError, match="Unknown material"):
        load_scene({"canvas": {"width": 10, "height": 10},
                    "layers": [{"material": "chrome", "shapes": []}]})

    with pytest.raises(SceneError, match="needs a 'material'"):
        load_scene({"canvas": {"width": 10, "height": 10}, "layers": [{"shapes": []}]})

    with pytest.raises(GeometryError):
        load_scene({"canvas": {"width": 10, "height": 10},
                    "layers": [{"material": "white",
                                "shapes": [{"type": "corn", "center": [1, 1], "radius": 0,
                                            "height": 1}]}]})


def test_scene_yaml_file(tmp_path):
    path = tmp_path / "button.yaml"
    path.write_text(
        "canvas: {width: 64, height: 64}\n"
        "materials:\n"
        "  face: {preset: white, reflection_brightness: 0.3}\n"
        "layers:\n"
        "  - material: face\n"
        "    shapes:\n"
        "      - {type: round_box, top_left: [16, 16], bottom_right: [48, 48],"
        " border_radius: 8, depth: 4}\n"
    )
    scene = load_scene(path)
    assert scene.batches[0].material.reflection_brightness == 0.3
    assert render_scene(scene)[32, 32, 3] == 255
