"""Geometry for drawing text with a 16x16 glyph atlas."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np

__all__ = ["TextMesh", "glyph_uv", "build_text_mesh"]

_CELL = 1.0 / 16.0


@dataclass
class TextMesh:
    """Screen-space triangles (six corners per glyph) and their atlas UVs."""

    vertices: np.ndarray
    uvs: np.ndarray

    def __len__(self) -> int:
        return len(self.vertices)


def _signed_byte(character: Union[str, int]) -> int:
    code = ord(character) if isinstance(character, str) else int(character)
    if not 0 <= code <= 255:
        raise ValueError(f"character code {code} does not fit in one byte")
    return code - 256 if code > 127 else code


def glyph_uv(character: Union[str, int]) -> tuple[float, float]:
    """Top-left atlas coordinate of a character's glyph cell."""
    code = _signed_byte(character)
    column = int(math.fmod(code, 16))
    row = int(code / 16)
    return column / 16.0, row / 16.0


def build_text_mesh(text: Union[str, bytes], x: int, y: int, size: int) -> TextMesh:
    """Lay out one quad per byte of text, starting at (x, y), each size wide."""
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    vertices: list[tuple[float, float]] = []
    uvs: list[tuple[float, float]] = []
    for i, code in enumerate(raw):
        left = x + i * size
        right = left + size
        top = y + size
        up_left, up_right = (left, top), (right, top)
        down_right, down_left = (right, y), (left, y)
        vertices += [up_left, down_left, up_right, down_right, up_right, down_left]

        u, v = glyph_uv(code)
        uv_up_left, uv_up_right = (u, v), (u + _CELL, v)
        uv_down_right, uv_down_left = (u + _CELL, v + _CELL), (u, v + _CELL)
        uvs += [uv_up_left, uv_down_left, uv_up_right, uv_down_right, uv_up_right, uv_down_left]

    return TextMesh(
        vertices=np.array(vertices, dtype=np.float32).reshape(-1, 2),
        uvs=np.array(uvs, dtype=np.float32).reshape(-1, 2),
    )