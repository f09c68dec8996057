"""A placed 3D object: scale, rotation and position turned into a world matrix."""

from __future__ import annotations

import math
import struct
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from gameframe import xmath
from gameframe.camera import Camera

Vec3 = Tuple[float, float, float]

# Two 4x4 matrices and a float3, padded to the 16-byte alignment of the matrices.
CONSTANT_BUFFER_SIZE = 144


def _vec3(v: Sequence[float]) -> Vec3:
    return (float(v[0]), float(v[1]), float(v[2]))


class Object3d:
    """Transform state of one object and the per-frame constants it feeds to a shader."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        model: Optional[Any] = None,
    ) -> None:
        self.model = model
        self.color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
        self.scale: Vec3 = (1.0, 1.0, 1.0)
        self.rotation: Vec3 = (0.0, 0.0, 0.0)
        self.position: Vec3 = _vec3(position)
        self.is_billboard = False
        self.mat_world = xmath.identity()
        self.view_projection = xmath.identity()
        self.camera_pos: Vec3 = (0.0, 0.0, 0.0)

    def update(self, camera: Camera) -> None:
        """Rebuild the world matrix and capture the camera's constants."""
        if camera is None:
            raise ValueError("a camera is required")
        mat_scale = xmath.scaling(*self.scale)
        rx, ry, rz = (math.radians(a) for a in self.rotation)
        mat_rot = xmath.rotation_y(ry) @ xmath.rotation_x(rx) @ xmath.rotation_z(rz)
        mat_trans = xmath.translation(*self.position)

        if self.is_billboard:
            self.mat_world = mat_scale @ mat_rot @ camera.billboard_matrix @ mat_trans
        else:
            self.mat_world = mat_scale @ mat_rot @ mat_trans

        self.view_projection = np.array(camera.view_projection_matrix, dtype=np.float64)
        self.camera_pos = _vec3(camera.eye)

    def pack(self) -> bytes:
        """Constant-buffer bytes: view-projection, world, camera position (float32)."""
        data = b"".join(
            (
                np.asarray(self.view_projection, dtype="<f4").tobytes(),
                np.asarray(self.mat_world, dtype="<f4").tobytes(),
                struct.pack("<3f", *self.camera_pos),
            )
        )
        return data.ljust(CONSTANT_BUFFER_SIZE, b"\0")