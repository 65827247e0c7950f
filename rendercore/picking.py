"""Ray casting from screen positions and ray/oriented-box intersection."""

from __future__ import annotations

from typing import Optional

import numpy as np

__all__ = ["screen_pos_to_world_ray", "ray_obb_intersection"]

_PARALLEL_EPSILON = 0.001
_MAX_DISTANCE = 100000.0


def _unproject(inverse: np.ndarray, point: np.ndarray) -> np.ndarray:
    result = inverse @ point
    return result / result[3]


def screen_pos_to_world_ray(
    mouse_x, mouse_y, screen_width, screen_height, view, projection
) -> tuple[np.ndarray, np.ndarray]:
    """World-space ray through a pixel, as (origin, unit direction).

    Pixel coordinates count from the bottom-left corner. The origin lies on
    the near plane, not at the camera position.
    """
    if screen_width == 0 or screen_height == 0:
        raise ValueError("screen size must be non-zero")
    ndc_x = (mouse_x / screen_width - 0.5) * 2.0
    ndc_y = (mouse_y / screen_height - 0.5) * 2.0
    start_ndc = np.array([ndc_x, ndc_y, -1.0, 1.0])
    end_ndc = np.array([ndc_x, ndc_y, 0.0, 1.0])

    inverse_projection = np.linalg.inv(np.asarray(projection, dtype=np.float64))
    inverse_view = np.linalg.inv(np.asarray(view, dtype=np.float64))

    start_world = _unproject(inverse_view, _unproject(inverse_projection, start_ndc))
    end_world = _unproject(inverse_view, _unproject(inverse_projection, end_ndc))

    direction = end_world[:3] - start_world[:3]
    length = np.linalg.norm(direction)
    if length == 0.0:
        raise ValueError("ray has no direction")
    return start_world[:3].copy(), direction / length


def ray_obb_intersection(
    ray_origin, ray_direction, aabb_min, aabb_max, model
) -> Optional[float]:
    """Distance along the ray to an oriented box, or None if it is missed.

    The box is ``aabb_min``..``aabb_max`` in model space, placed in the world
    by ``model``. ``ray_direction`` must be normalised. Hits beyond 100000
    units are reported as misses.
    """
    origin = np.asarray(ray_origin, dtype=np.float64)
    direction = np.asarray(ray_direction, dtype=np.float64)
    box_min = np.asarray(aabb_min, dtype=np.float64)
    box_max = np.asarray(aabb_max, dtype=np.float64)
    model = np.asarray(model, dtype=np.float64)

    t_min = 0.0
    t_max = _MAX_DISTANCE
    delta = model[:3, 3] - origin

    for axis_index in range(3):
        axis = model[:3, axis_index]
        e = float(np.dot(axis, delta))
        f = float(np.dot(direction, axis))
        low, high = box_min[axis_index], box_max[axis_index]
        if abs(f) > _PARALLEL_EPSILON:
            t1, t2 = sorted(((e + low) / f, (e + high) / f))
            t_max = min(t_max, t2)
            t_min = max(t_min, t1)
            if t_max < t_min:
                return None
        elif -e + low > 0.0 or -e + high < 0.0:
            return None

    return float(t_min)