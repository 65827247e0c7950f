"""Minimal Wavefront OBJ reader producing flat, de-indexed triangle lists."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

import numpy as np

__all__ = ["ObjFormatError", "ObjMesh", "parse_obj", "load_obj"]


class ObjFormatError(ValueError):
    """Raised when OBJ text cannot be understood by this simple loader."""


@dataclass
class ObjMesh:
    """Per-corner triangle data: three consecutive rows form one triangle."""

    vertices: np.ndarray
    uvs: np.ndarray
    normals: np.ndarray

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.vertices) // 3


def _floats(args: Sequence[str], count: int, lineno: int) -> tuple[float, ...]:
    if len(args) < count:
        raise ObjFormatError(f"line {lineno}: expected {count} numbers, got {len(args)}")
    try:
        return tuple(float(token) for token in args[:count])
    except ValueError as exc:
        raise ObjFormatError(f"line {lineno}: invalid number ({exc})") from None


def _face_corners(args: Sequence[str], lineno: int) -> list[tuple[int, int, int, int]]:
    # Only the first three v/vt/vn groups are used; anything after them is ignored.
    if len(args) < 3:
        raise ObjFormatError(
            f"line {lineno}: face needs three v/vt/vn groups; try exporting with other options"
        )
    corners = []
    for group in args[:3]:
        parts = group.split("/")
        if len(parts) != 3:
            raise ObjFormatError(
                f"line {lineno}: face group {group!r} is not v/vt/vn; "
                "try exporting with other options"
            )
        try:
            v, t, n = (int(part) for part in parts)
        except ValueError:
            raise ObjFormatError(
                f"line {lineno}: face group {group!r} is not v/vt/vn; "
                "try exporting with other options"
            ) from None
        corners.append((v, t, n, lineno))
    return corners


def _lookup(table: list, index: int, kind: str, lineno: int):
    if not 1 <= index <= len(table):
        raise ObjFormatError(
            f"line {lineno}: {kind} index {index} out of range (1..{len(table)})"
        )
    return table[index - 1]


def parse_obj(lines: Union[str, Iterable[str]]) -> ObjMesh:
    """Parse OBJ text (a string or an iterable of lines) into an ObjMesh.

    Texture V coordinates are inverted, as expected by DDS textures.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()

    positions: list[tuple[float, ...]] = []
    texcoords: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    corners: list[tuple[int, int, int, int]] = []

    for lineno, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        head, args = tokens[0], tokens[1:]
        if head == "v":
            positions.append(_floats(args, 3, lineno))
        elif head == "vt":
            u, v = _floats(args, 2, lineno)
            texcoords.append((u, -v))
        elif head == "vn":
            normals.append(_floats(args, 3, lineno))
        elif head == "f":
            corners.extend(_face_corners(args, lineno))
        # Anything else (comments, groups, materials...) is skipped.

    out_v = [_lookup(positions, v, "vertex", ln) for v, _, _, ln in corners]
    out_t = [_lookup(texcoords, t, "uv", ln) for _, t, _, ln in corners]
    out_n = [_lookup(normals, n, "normal", ln) for _, _, n, ln in corners]

    return ObjMesh(
        vertices=np.array(out_v, dtype=np.float32).reshape(-1, 3),
        uvs=np.array(out_t, dtype=np.float32).reshape(-1, 2),
        normals=np.array(out_n, dtype=np.float32).reshape(-1, 3),
    )


def load_obj(path: Union[str, os.PathLike]) -> ObjMesh:
    """Read and parse an OBJ file from disk."""
    with open(path, "r", encoding="utf-8", errors="replace") as handle:
        return parse_obj(handle)