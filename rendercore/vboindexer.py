"""Merge duplicate vertices into an indexed vertex buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

__all__ = [
    "IndexedMesh",
    "IndexedTBNMesh",
    "is_near",
    "find_similar_vertex",
    "index_vbo",
    "index_vbo_slow",
    "index_vbo_tbn",
]

_MAX_VERTICES = 1 << 16  # indices are unsigned 16-bit


@dataclass
class IndexedMesh:
    """Unique vertex attributes plus 16-bit indices into them."""

    indices: np.ndarray
    vertices: np.ndarray
    uvs: np.ndarray
    normals: np.ndarray


@dataclass
class IndexedTBNMesh(IndexedMesh):
    """Indexed mesh with accumulated tangents and bitangents."""

    tangents: np.ndarray
    bitangents: np.ndarray


def is_near(a: float, b: float) -> bool:
    """True if two components are within 0.01 of each other."""
    return bool(abs(a - b) < 0.01)


def find_similar_vertex(vertex, uv, normal, vertices, uvs, normals) -> Optional[int]:
    """Index of the first stored vertex with near-equal position, UV and normal."""
    for index, (other_v, other_t, other_n) in enumerate(zip(vertices, uvs, normals)):
        if (
            all(is_near(a, b) for a, b in zip(vertex, other_v))
            and all(is_near(a, b) for a, b in zip(uv, other_t))
            and all(is_near(a, b) for a, b in zip(normal, other_n))
        ):
            return index
    return None


def _as_rows(data, width: int, name: str) -> np.ndarray:
    array = np.asarray(data, dtype=np.float32)
    if array.size == 0:
        return array.reshape(0, width)
    if array.ndim != 2 or array.shape[1] != width:
        raise ValueError(f"{name} must have shape (n, {width}), got {array.shape}")
    return array


def _check_inputs(*columns: tuple[object, int, str]) -> list[np.ndarray]:
    arrays = [_as_rows(data, width, name) for data, width, name in columns]
    lengths = {len(a) for a in arrays}
    if len(lengths) > 1:
        names = ", ".join(name for _, _, name in columns)
        raise ValueError(f"{names} must have the same length")
    return arrays


def _next_index(count: int) -> int:
    if count >= _MAX_VERTICES:
        raise ValueError(f"more than {_MAX_VERTICES} unique vertices cannot be indexed")
    return count


def _stack(rows: Sequence[np.ndarray], width: int) -> np.ndarray:
    return np.array(rows, dtype=np.float32).reshape(-1, width)


def index_vbo_slow(vertices, uvs, normals) -> IndexedMesh:
    """Index by linear search, merging vertices that are nearly equal."""
    in_v, in_t, in_n = _check_inputs((vertices, 3, "vertices"), (uvs, 2, "uvs"), (normals, 3, "normals"))
    out_v: list[np.ndarray] = []
    out_t: list[np.ndarray] = []
    out_n: list[np.ndarray] = []
    indices: list[int] = []
    for vertex, uv, normal in zip(in_v, in_t, in_n):
        found = find_similar_vertex(vertex, uv, normal, out_v, out_t, out_n)
        if found is None:
            found = _next_index(len(out_v))
            out_v.append(vertex)
            out_t.append(uv)
            out_n.append(normal)
        indices.append(found)
    return IndexedMesh(
        indices=np.array(indices, dtype=np.uint16),
        vertices=_stack(out_v, 3),
        uvs=_stack(out_t, 2),
        normals=_stack(out_n, 3),
    )


def index_vbo(vertices, uvs, normals) -> IndexedMesh:
    """Index by exact bitwise match of position, UV and normal."""
    in_v, in_t, in_n = _check_inputs((vertices, 3, "vertices"), (uvs, 2, "uvs"), (normals, 3, "normals"))
    seen: dict[bytes, int] = {}
    out_v: list[np.ndarray] = []
    out_t: list[np.ndarray] = []
    out_n: list[np.ndarray] = []
    indices: list[int] = []
    for vertex, uv, normal in zip(in_v, in_t, in_n):
        key = vertex.tobytes() + uv.tobytes() + normal.tobytes()
        found = seen.get(key)
        if found is None:
            found = _next_index(len(out_v))
            out_v.append(vertex)
            out_t.append(uv)
            out_n.append(normal)
            seen[key] = found
        indices.append(found)
    return IndexedMesh(
        indices=np.array(indices, dtype=np.uint16),
        vertices=_stack(out_v, 3),
        uvs=_stack(out_t, 2),
        normals=_stack(out_n, 3),
    )


def index_vbo_tbn(vertices, uvs, normals, tangents, bitangents) -> IndexedTBNMesh:
    """Index like index_vbo_slow, summing tangents and bitangents of merged vertices."""
    in_v, in_t, in_n, in_tan, in_bit = _check_inputs(
        (vertices, 3, "vertices"),
        (uvs, 2, "uvs"),
        (normals, 3, "normals"),
        (tangents, 3, "tangents"),
        (bitangents, 3, "bitangents"),
    )
    out_v: list[np.ndarray] = []
    out_t: list[np.ndarray] = []
    out_n: list[np.ndarray] = []
    out_tan: list[np.ndarray] = []
    out_bit: list[np.ndarray] = []
    indices: list[int] = []
    for vertex, uv, normal, tangent, bitangent in zip(in_v, in_t, in_n, in_tan, in_bit):
        found = find_similar_vertex(vertex, uv, normal, out_v, out_t, out_n)
        if found is None:
            found = _next_index(len(out_v))
            out_v.append(vertex)
            out_t.append(uv)
            out_n.append(normal)
            out_tan.append(tangent.copy())
            out_bit.append(bitangent.copy())
        else:
            out_tan[found] += tangent
            out_bit[found] += bitangent
        indices.append(found)
    return IndexedTBNMesh(
        indices=np.array(indices, dtype=np.uint16),
        vertices=_stack(out_v, 3),
        uvs=_stack(out_t, 2),
        normals=_stack(out_n, 3),
        tangents=_stack(out_tan, 3),
        bitangents=_stack(out_bit, 3),
    )