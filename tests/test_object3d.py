import struct

import numpy as np
import pytest

from gameframe.camera import Camera
from gameframe.object3d import Object3d


@pytest.fixture
def camera():
    cam = Camera(1280, 720)
    cam.eye = (0.0, 5.0, -20.0)
    cam.update()
    return cam


def test_default_world_is_identity(camera):
    obj = Object3d()
    obj.update(camera)
    assert np.allclose(obj.mat_world, np.eye(4))


def test_position_goes_to_last_row(camera):
    obj = Object3d(position=(1.0, 2.0, 3.0))
    obj.update(camera)
    assert np.allclose(obj.mat_world[3, :3], [1.0, 2.0, 3.0])


def test_scale_on_diagonal(camera):
    obj = Object3d()
    obj.scale = (2.0, 3.0, 4.0)
    obj.update(camera)
    assert np.allclose(np.diag(obj.mat_world), [2.0, 3.0, 4.0, 1.0])


def test_rotation_keeps_lengths(camera):
    obj = Object3d()
    obj.rotation = (30.0, 45.0, 60.0)
    obj.update(camera)
    r = obj.mat_world[:3, :3]
    assert np.allclose(r @ r.T, np.eye(3))


def test_rotation_y_quarter_turn(camera):
    obj = Object3d()
    obj.rotation = (0.0, 90.0, 0.0)
    obj.update(camera)
    moved = np.array([1.0, 0.0, 0.0, 1.0]) @ obj.mat_world
    assert np.allclose(moved, [0.0, 0.0, -1.0, 1.0])


def test_billboard_uses_camera_rotation(camera):
    obj = Object3d(position=(4.0, 5.0, 6.0))
    obj.is_billboard = True
    obj.update(camera)
    assert np.allclose(obj.mat_world[:3, :3], camera.billboard_matrix[:3, :3])
    assert np.allclose(obj.mat_world[3, :3], [4.0, 5.0, 6.0])


def test_pack_layout(camera):
    obj = Object3d(position=(1.0, 2.0, 3.0))
    obj.update(camera)
    data = obj.pack()
    assert len(data) == 144
    vp = np.frombuffer(data[:64], dtype="<f4").reshape(4, 4)
    world = np.frombuffer(data[64:128], dtype="<f4").reshape(4, 4)
    assert np.allclose(vp, camera.view_projection_matrix, atol=1e-5)
    assert np.allclose(world, obj.mat_world)
    assert struct.unpack("<3f", data[128:140]) == pytest.approx(camera.eye)
    assert data[140:] == b"\0\0\0\0"


def test_update_requires_camera():
    with pytest.raises(ValueError):
        Object3d().update(None)


def test_model_is_kept():
    marker = object()
    obj = Object3d((0.0, 0.0, 0.0), marker)
    assert obj.model is marker