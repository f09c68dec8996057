"""Shared sprite state: the screen projection and the table of loaded textures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
from PIL import Image

from gameframe import xmath

SPRITE_SRV_COUNT = 512


@dataclass(frozen=True)
class Texture:
    """A decoded image held as RGBA bytes."""

    width: int
    height: int
    pixels: bytes
    path: str = ""

    @property
    def row_pitch(self) -> int:
        return self.width * 4


def _check_slot(tex_number: int) -> int:
    tex_number = int(tex_number)
    if not 0 <= tex_number < SPRITE_SRV_COUNT:
        raise ValueError(
            f"texture number {tex_number} out of range 0..{SPRITE_SRV_COUNT - 1}"
        )
    return tex_number


class SpriteCommon:
    """Projection and texture slots shared by every sprite drawn to one window."""

    def __init__(self, window_width: int, window_height: int) -> None:
        self.window_width = int(window_width)
        self.window_height = int(window_height)
        self.mat_projection: np.ndarray = xmath.orthographic_off_center_lh(
            0.0, float(self.window_width), float(self.window_height), 0.0, 0.0, 1.0
        )
        self._textures: List[Optional[Texture]] = [None] * SPRITE_SRV_COUNT

    def load_texture(self, tex_number: int, filename: Union[str, Path]) -> Texture:
        """Decode an image file into the given slot, replacing what was there."""
        slot = _check_slot(tex_number)
        with Image.open(filename) as image:
            rgba = image.convert("RGBA")
            texture = Texture(
                width=rgba.width,
                height=rgba.height,
                pixels=rgba.tobytes(),
                path=str(filename),
            )
        self._textures[slot] = texture
        return texture

    def texture(self, tex_number: int) -> Optional[Texture]:
        """The texture in a slot, or None when nothing is loaded there."""
        return self._textures[_check_slot(tex_number)]