import numpy as np
import pytest

from skeuo import alpha_over_composite, new_image
from skeuo.composite import clip_region, normalize_alpha, normalize_to_float32, pixel_centers


def test_new_image_fill_and_layout():
    img = new_image(4, 3, color=(1, 2, 3, 4))
    assert img.shape == (3, 4, 4)
    assert img.dtype == np.uint8
    assert img[2, 3].tolist() == [1, 2, 3, 4]
    assert new_image(2, 2)[0, 0].tolist() == [0, 0, 0, 0]


def test_new_image_rejects_bad_size():
    with pytest.raises(ValueError):
        new_image(0, 10)


def test_opaque_source_replaces_destination_exactly():
    dst = new_image(3, 2, color=(10, 200, 30, 90))
    src = np.full((2, 3, 3), [255, 7, 128], dtype=np.uint8)
    alpha_over_composite(dst, src, np.ones((2, 3)))
    assert np.all(dst[..., :3] == [255, 7, 128])
    assert np.all(dst[..., 3] == 255)


def test_transparent_source_leaves_bytes_untouched():
    dst = np.random.default_rng(0).integers(0, 256, (4, 5, 4), dtype=np.uint8)
    before = dst.copy()
    src = np.zeros((4, 5, 3), dtype=np.uint8)
    alpha_over_composite(dst, src, np.zeros((4, 5)))
    assert np.array_equal(dst, before)


def test_mask_restricts_written_pixels():
    dst = new_image(2, 1, color=(0, 0, 0, 255))
    src = np.full((1, 2, 3), 200, dtype=np.uint8)
    mask = np.array([[True, False]])
    alpha_over_composite(dst, src, np.ones((1, 2)), mask)
    assert dst[0, 0].tolist() == [200, 200, 200, 255]
    assert dst[0, 1].tolist() == [0, 0, 0, 255]


def test_half_alpha_over_opaque_and_transparent():
    src = np.full((1, 1, 3), 200, dtype=np.uint8)

    opaque = new_image(1, 1, color=(0, 0, 0, 255))
    alpha_over_composite(opaque, src, np.full((1, 1), 0.5))
    assert opaque[0, 0].tolist() == [100, 100, 100, 255]

    empty = new_image(1, 1)
    alpha_over_composite(empty, src, np.full((1, 1), 0.5))
    # over nothing, color is the source color at the source opacity
    assert empty[0, 0].tolist() == [200, 200, 200, 128]


def test_composite_writes_through_views():
    img = new_image(10, 10)
    view = img[2:4, 3:6]
    alpha_over_composite(view, np.full((2, 3, 3), 9, dtype=np.uint8), np.ones((2, 3)))
    assert img[2, 3].tolist() == [9, 9, 9, 255]
    assert img[0, 0].tolist() == [0, 0, 0, 0]


def test_clip_region():
    assert clip_region((10.2, 5.5, 20.7, 8.0), 100, 100) == (10, 5, 22, 9)
    assert clip_region((-30, -30, 5, 5), 100, 50) == (0, 0, 6, 6)
    assert clip_region((90, 40, 130, 80), 100, 50) == (90, 40, 100, 50)
    assert clip_region((-50, -50, -10, -10), 100, 100) is None
    assert clip_region((100, 0, 120, 10), 100, 100) is None


def test_pixel_centers():
    xs, ys = pixel_centers((2, 1, 4, 3))
    np.testing.assert_array_equal(xs, [[2.5, 3.5], [2.5, 3.5]])
    np.testing.assert_array_equal(ys, [[1.5, 1.5], [2.5, 2.5]])


def test_normalize_helpers():
    assert normalize_to_float32(np.array([0, 255], dtype=np.uint8)).tolist() == [0.0, 1.0]
    assert normalize_to_float32(np.array([51], dtype=np.uint8)).dtype == np.float32
    with pytest.raises(ValueError, match="uint8"):
        normalize_to_float32(np.array([0, 65535], dtype=np.uint16))
    assert normalize_alpha(np.array([[[2.0]], [[-1.0]]])).tolist() == [[1.0], [0.0]]
