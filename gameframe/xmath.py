"""Small row-major matrix helpers following left-handed, row-vector conventions.

Points are row vectors multiplied on the left (``v @ m``). The translation
part of a matrix is therefore stored in its last row.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_EPSILON = 1e-5


def _near_equal(a: float, b: float) -> bool:
    return abs(a - b) <= _EPSILON


def identity() -> np.ndarray:
    """Return a 4x4 identity matrix."""
    return np.eye(4, dtype=np.float64)


def normalize(v: Sequence[float]) -> np.ndarray:
    """Return the first three components of ``v`` scaled to unit length.

    A zero-length vector is returned unchanged as zeros.
    """
    vec = np.asarray(v, dtype=np.float64)[:3]
    length = float(np.linalg.norm(vec))
    if length == 0.0:
        return np.zeros(3, dtype=np.float64)
    return vec / length


def perspective_fov_lh(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Left-handed perspective projection mapping depth ``near..far`` to ``0..1``."""
    if near <= 0.0 or far <= 0.0:
        raise ValueError("near and far planes must be positive")
    if _near_equal(fov_y, 0.0):
        raise ValueError("field of view must not be zero")
    if _near_equal(aspect, 0.0):
        raise ValueError("aspect ratio must not be zero")
    if _near_equal(far, near):
        raise ValueError("near and far planes must differ")

    height = 1.0 / math.tan(fov_y * 0.5)
    width = height / aspect
    depth_range = far / (far - near)

    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = width
    m[1, 1] = height
    m[2, 2] = depth_range
    m[2, 3] = 1.0
    m[3, 2] = -depth_range * near
    return m


def orthographic_off_center_lh(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Left-handed off-centre orthographic projection onto the unit clip volume."""
    if _near_equal(right, left):
        raise ValueError("left and right must differ")
    if _near_equal(top, bottom):
        raise ValueError("top and bottom must differ")
    if _near_equal(far, near):
        raise ValueError("near and far planes must differ")

    reciprocal_width = 1.0 / (right - left)
    reciprocal_height = 1.0 / (top - bottom)
    depth_range = 1.0 / (far - near)

    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = reciprocal_width + reciprocal_width
    m[1, 1] = reciprocal_height + reciprocal_height
    m[2, 2] = depth_range
    m[3, 0] = -(left + right) * reciprocal_width
    m[3, 1] = -(top + bottom) * reciprocal_height
    m[3, 2] = -depth_range * near
    m[3, 3] = 1.0
    return m


def rotation_x(angle: float) -> np.ndarray:
    """Rotation about the X axis by ``angle`` radians."""
    s, c = math.sin(angle), math.cos(angle)
    m = identity()
    m[1, 1], m[1, 2] = c, s
    m[2, 1], m[2, 2] = -s, c
    return m


def rotation_y(angle: float) -> np.ndarray:
    """Rotation about the Y axis by ``angle`` radians."""
    s, c = math.sin(angle), math.cos(angle)
    m = identity()
    m[0, 0], m[0, 2] = c, -s
    m[2, 0], m[2, 2] = s, c
    return m


def rotation_z(angle: float) -> np.ndarray:
    """Rotation about the Z axis by ``angle`` radians."""
    s, c = math.sin(angle), math.cos(angle)
    m = identity()
    m[0, 0], m[0, 1] = c, s
    m[1, 0], m[1, 1] = -s, c
    return m


def scaling(x: float, y: float, z: float) -> np.ndarray:
    """Scale matrix."""
    m = identity()
    m[0, 0], m[1, 1], m[2, 2] = x, y, z
    return m


def translation(x: float, y: float, z: float) -> np.ndarray:
    """Translation matrix; the offset sits in the last row."""
    m = identity()
    m[3, 0], m[3, 1], m[3, 2] = x, y, z
    return m