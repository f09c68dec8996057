import numpy as np
import pytest
from PIL import Image

from gameframe.sprite_common import SPRITE_SRV_COUNT, SpriteCommon


def _png(path, width, height, color=(10, 20, 30, 255)):
    Image.new("RGBA", (width, height), color).save(path)
    return path


def test_load_texture_reports_image_size(tmp_path):
    common = SpriteCommon(1280, 720)
    texture = common.load_texture(3, _png(tmp_path / "a.png", 8, 4))
    assert (texture.width, texture.height) == (8, 4)
    assert common.texture(3) is texture


def test_pixels_are_rgba_bytes(tmp_path):
    common = SpriteCommon(64, 64)
    texture = common.load_texture(0, _png(tmp_path / "a.png", 2, 3, (1, 2, 3, 4)))
    assert len(texture.pixels) == 2 * 3 * 4
    assert texture.pixels[:4] == bytes([1, 2, 3, 4])
    assert texture.row_pitch == 8


def test_rgb_image_gets_opaque_alpha(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new("RGB", (1, 1), (5, 6, 7)).save(path)
    texture = SpriteCommon(10, 10).load_texture(1, path)
    assert texture.pixels == bytes([5, 6, 7, 255])


def test_empty_slot_is_none():
    assert SpriteCommon(10, 10).texture(5) is None


@pytest.mark.parametrize("slot", [-1, SPRITE_SRV_COUNT])
def test_slot_out_of_range(slot, tmp_path):
    common = SpriteCommon(10, 10)
    with pytest.raises(ValueError):
        common.texture(slot)
    with pytest.raises(ValueError):
        common.load_texture(slot, _png(tmp_path / "a.png", 1, 1))


def test_last_slot_is_usable(tmp_path):
    common = SpriteCommon(10, 10)
    common.load_texture(SPRITE_SRV_COUNT - 1, _png(tmp_path / "a.png", 3, 3))
    assert common.texture(SPRITE_SRV_COUNT - 1).width == 3


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SpriteCommon(10, 10).load_texture(0, tmp_path / "missing.png")


def test_reload_replaces_slot(tmp_path):
    common = SpriteCommon(10, 10)
    common.load_texture(2, _png(tmp_path / "a.png", 2, 2))
    common.load_texture(2, _png(tmp_path / "b.png", 5, 6))
    assert (common.texture(2).width, common.texture(2).height) == (5, 6)


def test_projection_maps_screen_corners_to_clip_space():
    common = SpriteCommon(1280, 720)
    top_left = np.array([0.0, 0.0, 0.0, 1.0]) @ common.mat_projection
    bottom_right = np.array([1280.0, 720.0, 0.0, 1.0]) @ common.mat_projection
    assert np.allclose(top_left[:2], [-1.0, 1.0])
    assert np.allclose(bottom_right[:2], [1.0, -1.0])