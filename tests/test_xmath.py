import math

import numpy as np
import pytest

from gameframe import xmath

ANGLES = [0.0, 0.3, math.pi / 2, 2.0, -1.1]


def _project(point, matrix):
    out = np.append(np.asarray(point, dtype=float), 1.0) @ matrix
    return out[:3] / out[3]


def test_identity_is_neutral():
    m = xmath.rotation_y(0.7) @ xmath.translation(1.0, 2.0, 3.0)
    assert np.allclose(xmath.identity() @ m, m)
    assert np.allclose(m @ xmath.identity(), m)
    assert np.array_equal(xmath.identity(), np.eye(4))


@pytest.mark.parametrize("make", [xmath.rotation_x, xmath.rotation_y, xmath.rotation_z])
@pytest.mark.parametrize("angle", ANGLES)
def test_rotations_are_orthonormal(make, angle):
    r = make(angle)
    assert np.allclose(r @ r.T, np.eye(4))
    assert np.isclose(np.linalg.det(r), 1.0)


@pytest.mark.parametrize("make", [xmath.rotation_x, xmath.rotation_y, xmath.rotation_z])
def test_rotation_inverse_and_composition(make):
    assert np.allclose(make(0.4) @ make(-0.4), np.eye(4))
    assert np.allclose(make(0.4) @ make(0.9), make(1.3))


@pytest.mark.parametrize(
    "make,axis",
    [
        (xmath.rotation_x, [1.0, 0.0, 0.0, 1.0]),
        (xmath.rotation_y, [0.0, 1.0, 0.0, 1.0]),
        (xmath.rotation_z, [0.0, 0.0, 1.0, 1.0]),
    ],
)
def test_rotation_keeps_its_axis(make, axis):
    v = np.array(axis)
    assert np.allclose(v @ make(1.234), v)


def test_rotation_z_turns_x_into_y():
    v = np.array([1.0, 0.0, 0.0, 1.0]) @ xmath.rotation_z(math.pi / 2)
    assert np.allclose(v, [0.0, 1.0, 0.0, 1.0])


def test_scaling_diagonal():
    m = xmath.scaling(2.0, 3.0, 4.0)
    assert np.allclose(np.diag(m)[:3], [2.0, 3.0, 4.0])
    assert m[3, 3] == 1.0
    assert np.allclose(m @ xmath.scaling(0.5, 1 / 3, 0.25), np.eye(4))


def test_translation_row_and_inverse():
    m = xmath.translation(4.0, -5.0, 6.5)
    assert np.allclose(m[3, :3], [4.0, -5.0, 6.5])
    assert np.allclose(m @ xmath.translation(-4.0, 5.0, -6.5), np.eye(4))
    assert np.allclose(m[:3, :3], np.eye(3))


@pytest.mark.parametrize("v", [[3.0, 4.0, 0.0], [-1.0, 2.0, 7.5], [0.0, 0.0, -9.0]])
def test_normalize_unit_length_same_direction(v):
    n = xmath.normalize(v)
    assert np.isclose(np.linalg.norm(n), 1.0)
    assert np.allclose(n * np.linalg.norm(v), v)


def test_normalize_zero_and_four_components():
    assert np.array_equal(xmath.normalize([0.0, 0.0, 0.0]), np.zeros(3))
    assert np.allclose(xmath.normalize([0.0, 2.0, 0.0, 1.0]), xmath.normalize([0.0, 5.0, 0.0]))


def test_perspective_depth_range():
    m = xmath.perspective_fov_lh(math.radians(60.0), 16 / 9, 0.1, 1000.0)
    near_depth = _project([0.0, 0.0, 0.1], m)[2]
    far_depth = _project([0.0, 0.0, 1000.0], m)[2]
    assert np.isclose(near_depth, 0.0)
    assert np.isclose(far_depth, 1.0)
    assert 0.0 < _project([0.0, 0.0, 50.0], m)[2] < 1.0


def test_perspective_aspect_relation():
    aspect = 1280 / 720
    m = xmath.perspective_fov_lh(math.radians(60.0), aspect, 0.1, 1000.0)
    assert np.isclose(m[0, 0] * aspect, m[1, 1])
    assert np.isclose(m[1, 1], 1.0 / math.tan(math.radians(30.0)))


@pytest.mark.parametrize(
    "args",
    [
        (1.0, 1.0, 0.0, 10.0),
        (1.0, 1.0, -1.0, 10.0),
        (1.0, 1.0, 5.0, 5.0),
        (0.0, 1.0, 0.1, 10.0),
        (1.0, 0.0, 0.1, 10.0),
    ],
)
def test_perspective_rejects_bad_arguments(args):
    with pytest.raises(ValueError):
        xmath.perspective_fov_lh(*args)


def test_orthographic_maps_screen_to_clip():
    m = xmath.orthographic_off_center_lh(0.0, 1280.0, 720.0, 0.0, 0.0, 1.0)
    top_left = _project([0.0, 0.0, 0.0], m)
    bottom_right = _project([1280.0, 720.0, 1.0], m)
    assert np.allclose(top_left, [-1.0, 1.0, 0.0])
    assert np.allclose(bottom_right, [1.0, -1.0, 1.0])
    centre = _project([640.0, 360.0, 0.5], m)
    assert np.allclose(centre[:2], [0.0, 0.0])


@pytest.mark.parametrize(
    "args",
    [
        (1.0, 1.0, 0.0, 10.0, 0.0, 1.0),
        (0.0, 10.0, 3.0, 3.0, 0.0, 1.0),
        (0.0, 10.0, 0.0, 10.0, 2.0, 2.0),
    ],
)
def test_orthographic_rejects_degenerate_volume(args):
    with pytest.raises(ValueError):
        xmath.orthographic_off_center_lh(*args)