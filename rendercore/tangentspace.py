"""Per-vertex tangent and bitangent computation for normal mapping."""

from __future__ import annotations

import numpy as np

__all__ = ["compute_tangent_basis"]


def _as_rows(data, width: int, name: str) -> np.ndarray:
    array = np.asarray(data, dtype=np.float32)
    if array.size == 0:
        return array.reshape(0, width)
    if array.ndim != 2 or array.shape[1] != width:
        raise ValueError(f"{name} must have shape (n, {width}), got {array.shape}")
    return array


def compute_tangent_basis(vertices, uvs, normals) -> tuple[np.ndarray, np.ndarray]:
    """Return (tangents, bitangents), one row per input vertex.

    Every three consecutive vertices form a triangle. Tangents are made
    orthogonal to the normal, normalised, and flipped to match handedness.
    """
    v = _as_rows(vertices, 3, "vertices")
    t = _as_rows(uvs, 2, "uvs")
    n = _as_rows(normals, 3, "normals")
    if len(v) % 3:
        raise ValueError("vertex count must be a multiple of 3")
    if len(t) != len(v) or len(n) != len(v):
        raise ValueError("vertices, uvs and normals must have the same length")

    tri_v = v.reshape(-1, 3, 3)
    tri_t = t.reshape(-1, 3, 2)
    delta_pos1 = tri_v[:, 1] - tri_v[:, 0]
    delta_pos2 = tri_v[:, 2] - tri_v[:, 0]
    delta_uv1 = tri_t[:, 1] - tri_t[:, 0]
    delta_uv2 = tri_t[:, 2] - tri_t[:, 0]

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        det = delta_uv1[:, 0] * delta_uv2[:, 1] - delta_uv1[:, 1] * delta_uv2[:, 0]
        r = (np.float32(1.0) / det)[:, None]
        tangent = (delta_pos1 * delta_uv2[:, 1:2] - delta_pos2 * delta_uv1[:, 1:2]) * r
        bitangent = (delta_pos2 * delta_uv1[:, 0:1] - delta_pos1 * delta_uv2[:, 0:1]) * r

        tangents = np.repeat(tangent, 3, axis=0).astype(np.float32)
        bitangents = np.repeat(bitangent, 3, axis=0).astype(np.float32)

        # Gram-Schmidt orthogonalisation against the normal.
        projected = tangents - n * np.sum(n * tangents, axis=1, keepdims=True)
        tangents = (projected / np.linalg.norm(projected, axis=1, keepdims=True)).astype(np.float32)

        flip = np.sum(np.cross(n, tangents) * bitangents, axis=1) < 0.0
        tangents[flip] *= np.float32(-1.0)

    return tangents, bitangents