"""Renderer-independent game building blocks: matrix math, camera, 3D transforms, sprites, input, collision, WAVE parsing and scenes."""

__version__ = "0.1.0"