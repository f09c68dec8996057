"""A look-at camera with lazily rebuilt view and projection matrices."""

from __future__ import annotations

import math
import random
from typing import Optional, Sequence, Tuple

import numpy as np

from gameframe import xmath
from gameframe.input import Input, Key

Vec3 = Tuple[float, float, float]

FOV_Y_DEGREES = 60.0
NEAR_Z = 0.1
FAR_Z = 1000.0
SHAKE_DECAY = 0.005
SHAKE_REST_TARGET: Vec3 = (0.0, 2.7, 0.0)


def _vec3(v: Sequence[float]) -> Vec3:
    return (float(v[0]), float(v[1]), float(v[2]))


def _check_direction(v: np.ndarray, what: str) -> None:
    if not np.all(np.isfinite(v)):
        raise ValueError(f"{what} must be finite")
    if np.allclose(v, 0.0, atol=0.0):
        raise ValueError(f"{what} must not be a zero vector")


class Camera:
    """Camera defined by eye, target and up vectors.

    Changing ``eye``, ``target``, ``up`` or ``aspect_ratio`` marks the
    matrices dirty; they are rebuilt on the next :meth:`update`.
    """

    def __init__(
        self,
        window_width: int,
        window_height: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        if window_height == 0:
            raise ValueError("window height must not be zero")
        self._aspect_ratio = window_width / window_height
        self._eye: Vec3 = (0.0, 0.0, 1.0)
        self._target: Vec3 = (0.0, 0.0, 0.0)
        self._up: Vec3 = (0.0, 1.0, 0.0)
        self._view_dirty = False
        self._projection_dirty = False
        self.shake_timer = 0.0
        self.shake: Tuple[float, float] = (0.0, 0.0)
        self._rng = rng if rng is not None else random.Random()

        self.view_matrix = xmath.identity()
        self.billboard_matrix = xmath.identity()
        self.billboard_y_matrix = xmath.identity()
        self.projection_matrix = xmath.identity()

        self.update_view_matrix()
        self.update_projection_matrix()
        self.view_projection_matrix = self.view_matrix @ self.projection_matrix

    # positions

    @property
    def eye(self) -> Vec3:
        return self._eye

    @eye.setter
    def eye(self, value: Sequence[float]) -> None:
        self._eye = _vec3(value)
        self._view_dirty = True

    @property
    def target(self) -> Vec3:
        return self._target

    @target.setter
    def target(self, value: Sequence[float]) -> None:
        self._target = _vec3(value)
        self._view_dirty = True

    @property
    def up(self) -> Vec3:
        return self._up

    @up.setter
    def up(self, value: Sequence[float]) -> None:
        self._up = _vec3(value)
        self._view_dirty = True

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, value: float) -> None:
        self._aspect_ratio = float(value)
        self._projection_dirty = True

    # matrices

    def update(self) -> None:
        """Rebuild whichever matrices are out of date."""
        if not (self._view_dirty or self._projection_dirty):
            return
        if self._view_dirty:
            self.update_view_matrix()
            self._view_dirty = False
        if self._projection_dirty:
            self.update_projection_matrix()
            self._projection_dirty = False
        self.view_projection_matrix = self.view_matrix @ self.projection_matrix

    def update_view_matrix(self) -> None:
        """Rebuild the view and billboard matrices from eye, target and up."""
        eye = np.array(self._eye, dtype=np.float64)
        target = np.array(self._target, dtype=np.float64)
        up = np.array(self._up, dtype=np.float64)

        axis_z = target - eye
        _check_direction(axis_z, "view direction")
        _check_direction(up, "up vector")
        axis_z = xmath.normalize(axis_z)
        axis_x = xmath.normalize(np.cross(up, axis_z))
        axis_y = np.cross(axis_z, axis_x)

        rotation = xmath.identity()
        rotation[0, :3] = axis_x
        rotation[1, :3] = axis_y
        rotation[2, :3] = axis_z

        view = rotation.T.copy()
        reverse_eye = -eye
        view[3] = (
            float(np.dot(axis_x, reverse_eye)),
            float(np.dot(axis_y, reverse_eye)),
            float(np.dot(axis_z, reverse_eye)),
            1.0,
        )
        self.view_matrix = view
        self.billboard_matrix = rotation

        y_axis_y = xmath.normalize(up)
        y_axis_z = np.cross(axis_x, y_axis_y)
        billboard_y = xmath.identity()
        billboard_y[0, :3] = axis_x
        billboard_y[1, :3] = y_axis_y
        billboard_y[2, :3] = y_axis_z
        self.billboard_y_matrix = billboard_y

    def update_projection_matrix(self) -> None:
        """Rebuild the perspective projection matrix."""
        self.projection_matrix = xmath.perspective_fov_lh(
            math.radians(FOV_Y_DEGREES), self._aspect_ratio, NEAR_Z, FAR_Z
        )

    # movement

    def move_eye_vector(self, move: Sequence[float]) -> None:
        """Shift the eye only."""
        self.eye = tuple(e + float(m) for e, m in zip(self._eye, move[:3]))

    def move_vector(self, move: Sequence[float]) -> None:
        """Shift both eye and target."""
        delta = _vec3(move)
        self.eye = tuple(e + d for e, d in zip(self._eye, delta))
        self.target = tuple(t + d for t, d in zip(self._target, delta))

    def shake_camera(self, camera_pos: Sequence[float]) -> None:
        """Jitter the target around ``camera_pos`` while the shake timer runs."""
        if self.shake_timer > 0:
            timer = self.shake_timer
            sx = self._rng.random() * timer - timer / 2.0
            sy = self._rng.random() * timer - timer / 2.0
            self.shake = (sx, sy)
            self.target = (
                float(camera_pos[0]) + sx,
                float(camera_pos[1]) + sy,
                float(camera_pos[2]),
            )
            self.shake_timer -= SHAKE_DECAY
        else:
            self.shake = (0.0, 0.0)
            self.target = SHAKE_REST_TARGET

    def move_camera(self, input: Input, move_power: float) -> None:
        """Fly the camera with the arrow keys and W/S."""
        if input is None:
            raise ValueError("input is required")
        moves = (
            (Key.LEFT, (-move_power, 0.0, 0.0)),
            (Key.RIGHT, (move_power, 0.0, 0.0)),
            (Key.UP, (0.0, move_power, 0.0)),
            (Key.DOWN, (0.0, -move_power, 0.0)),
            (Key.W, (0.0, 0.0, move_power)),
            (Key.S, (0.0, 0.0, -move_power)),
        )
        for key, delta in moves:
            if input.push_key(key):
                self.move_vector(delta)