"""A textured screen-space quad with anchor, flip, rotation and sub-rectangle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from gameframe import xmath
from gameframe.sprite_common import SpriteCommon

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]


@dataclass(frozen=True)
class VertexPosUv:
    """Position and texture coordinate of one quad corner."""

    pos: Vec3
    uv: Vec2


def _vec2(v: Sequence[float]) -> Vec2:
    return (float(v[0]), float(v[1]))


def _vec4(v: Sequence[float]) -> Vec4:
    return (float(v[0]), float(v[1]), float(v[2]), float(v[3]))


class Sprite:
    """A quad sized to its texture unless told otherwise.

    Corners come out in the order left-bottom, left-top, right-bottom,
    right-top, ready to be drawn as a triangle strip.
    """

    def __init__(
        self,
        sprite_common: SpriteCommon,
        tex_number: int,
        position: Sequence[float] = (0.0, 0.0),
        color: Sequence[float] = (1.0, 1.0, 1.0, 1.0),
        anchorpoint: Sequence[float] = (0.0, 0.0),
        is_flip_x: bool = False,
        is_flip_y: bool = False,
    ) -> None:
        self.common = sprite_common
        texture = sprite_common.texture(tex_number)
        size: Vec2 = (
            (float(texture.width), float(texture.height)) if texture else (0.0, 0.0)
        )
        self.tex_number = int(tex_number)
        self.position: Vec2 = _vec2(position)
        self.size: Vec2 = size
        self.color: Vec4 = _vec4(color)
        self.anchorpoint: Vec2 = _vec2(anchorpoint)
        self.is_flip_x = bool(is_flip_x)
        self.is_flip_y = bool(is_flip_y)
        self.rotation = 0.0
        self.tex_left_top: Vec2 = (0.0, 0.0)
        self.tex_size: Vec2 = size
        self.is_invisible = False
        self.mat_world: np.ndarray = xmath.identity()
        self.constant_matrix: np.ndarray = np.array(sprite_common.mat_projection)

    @property
    def alpha(self) -> float:
        return self.color[3]

    @alpha.setter
    def alpha(self, value: float) -> None:
        r, g, b, _ = self.color
        self.color = (r, g, b, float(value))

    def vertices(self) -> List[VertexPosUv]:
        """The four corners in left-bottom, left-top, right-bottom, right-top order."""
        ax, ay = self.anchorpoint
        w, h = self.size
        left, right = -ax * w, (1.0 - ax) * w
        top, bottom = -ay * h, (1.0 - ay) * h
        if self.is_flip_x:
            left, right = -left, -right
        if self.is_flip_y:
            top, bottom = -top, -bottom

        texture = self.common.texture(self.tex_number)
        if texture is not None:
            tx, ty = self.tex_left_top
            tw, th = self.tex_size
            u_left = tx / texture.width
            u_right = (tx + tw) / texture.width
            v_top = ty / texture.height
            v_bottom = (ty + th) / texture.height
        else:
            u_left = u_right = v_top = v_bottom = 0.0

        return [
            VertexPosUv((left, bottom, 0.0), (u_left, v_bottom)),
            VertexPosUv((left, top, 0.0), (u_left, v_top)),
            VertexPosUv((right, bottom, 0.0), (u_right, v_bottom)),
            VertexPosUv((right, top, 0.0), (u_right, v_top)),
        ]

    def update(self) -> None:
        """Rebuild the world matrix and the combined world-projection matrix."""
        self.mat_world = xmath.rotation_z(math.radians(self.rotation)) @ xmath.translation(
            self.position[0], self.position[1], 0.0
        )
        self.constant_matrix = self.mat_world @ self.common.mat_projection

    def set_texture(self, tex_number: int) -> None:
        """Switch texture; the size follows the new texture when one is loaded."""
        texture = self.common.texture(tex_number)
        self.tex_number = int(tex_number)
        if texture is not None:
            self.size = (float(texture.width), float(texture.height))

    def set_texture_rect(
        self, tex_left_top: Sequence[float], tex_size: Sequence[float]
    ) -> None:
        """Show only the given pixel rectangle of the texture."""
        self.tex_left_top = _vec2(tex_left_top)
        self.tex_size = _vec2(tex_size)