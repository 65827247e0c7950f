import math

import numpy as np
import pytest

from rendercore.camera import look_at, perspective
from rendercore.picking import ray_obb_intersection, screen_pos_to_world_ray

BOX_MIN = (-1.0, -1.0, -1.0)
BOX_MAX = (1.0, 1.0, 1.0)


def _translation(offset):
    matrix = np.eye(4)
    matrix[:3, 3] = offset
    return matrix


def _rotation_z(angle):
    matrix = np.eye(4)
    c, s = math.cos(angle), math.sin(angle)
    matrix[:2, :2] = [[c, -s], [s, c]]
    return matrix


@pytest.fixture
def camera_matrices():
    view = look_at((0.0, 0.0, 5.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    projection = perspective(45.0, 4.0 / 3.0, 0.1, 100.0)
    return view, projection


def test_center_ray_follows_camera_axis(camera_matrices):
    view, projection = camera_matrices
    origin, direction = screen_pos_to_world_ray(512, 384, 1024, 768, view, projection)
    assert direction == pytest.approx([0.0, 0.0, -1.0], abs=1e-9)
    assert origin == pytest.approx([0.0, 0.0, 5.0 - 0.1], abs=1e-9)


def test_ray_direction_is_unit(camera_matrices):
    view, projection = camera_matrices
    _, direction = screen_pos_to_world_ray(100, 700, 1024, 768, view, projection)
    assert np.linalg.norm(direction) == pytest.approx(1.0)


def test_ray_origin_projects_back_to_pixel(camera_matrices):
    view, projection = camera_matrices
    mouse_x, mouse_y = 200, 600
    origin, direction = screen_pos_to_world_ray(mouse_x, mouse_y, 1024, 768, view, projection)
    for point in (origin, origin + direction * 10.0):
        clip = projection @ view @ np.append(point, 1.0)
        ndc = clip[:3] / clip[3]
        assert ndc[0] == pytest.approx((mouse_x / 1024 - 0.5) * 2.0)
        assert ndc[1] == pytest.approx((mouse_y / 768 - 0.5) * 2.0)


def test_zero_screen_size_rejected(camera_matrices):
    view, projection = camera_matrices
    with pytest.raises(ValueError):
        screen_pos_to_world_ray(0, 0, 0, 768, view, projection)


def test_ray_hits_box_in_front():
    distance = ray_obb_intersection((0, 0, 5), (0, 0, -1), BOX_MIN, BOX_MAX, np.eye(4))
    assert distance == pytest.approx(4.0)


def test_ray_misses_box_to_the_side():
    assert ray_obb_intersection((3, 0, 5), (0, 0, -1), BOX_MIN, BOX_MAX, np.eye(4)) is None


def test_ray_pointing_away_misses():
    assert ray_obb_intersection((0, 0, 5), (0, 0, 1), BOX_MIN, BOX_MAX, np.eye(4)) is None


def test_origin_inside_box_gives_zero_distance():
    distance = ray_obb_intersection((0.2, 0.1, 0.0), (1, 0, 0), BOX_MIN, BOX_MAX, np.eye(4))
    assert distance == 0.0


def test_translation_does_not_change_distance():
    base = ray_obb_intersection((0, 0, 5), (0, 0, -1), BOX_MIN, BOX_MAX, np.eye(4))
    moved = ray_obb_intersection(
        (10, -3, 5), (0, 0, -1), BOX_MIN, BOX_MAX, _translation((10, -3, 0))
    )
    assert moved == pytest.approx(base)


def test_rotation_about_ray_axis_keeps_distance():
    base = ray_obb_intersection((0, 0, 5), (0, 0, -1), BOX_MIN, BOX_MAX, np.eye(4))
    rotated = ray_obb_intersection(
        (0, 0, 5), (0, 0, -1), BOX_MIN, BOX_MAX, _rotation_z(math.pi / 4)
    )
    assert rotated == pytest.approx(base)


def test_rotation_brings_corner_into_ray():
    # A ray at x=1.2 misses the axis-aligned box but hits it turned by 45 degrees.
    origin = (1.2, 0.0, 5.0)
    assert ray_obb_intersection(origin, (0, 0, -1), BOX_MIN, BOX_MAX, np.eye(4)) is None
    hit = ray_obb_intersection(origin, (0, 0, -1), BOX_MIN, BOX_MAX, _rotation_z(math.pi / 4))
    assert hit == pytest.approx(4.0)


def test_parallel_ray_outside_slab_misses():
    assert ray_obb_intersection((0, 2, 5), (0, 0, -1), BOX_MIN, BOX_MAX, np.eye(4)) is None


def test_box_beyond_maximum_distance_is_missed():
    model = _translation((0, 0, -200000))
    assert ray_obb_intersection((0, 0, 0), (0, 0, -1), BOX_MIN, BOX_MAX, model) is None


def test_picked_ray_from_screen_hits_box_at_center(camera_matrices):
    view, projection = camera_matrices
    origin, direction = screen_pos_to_world_ray(512, 384, 1024, 768, view, projection)
    distance = ray_obb_intersection(origin, direction, BOX_MIN, BOX_MAX, np.eye(4))
    hit_point = origin + direction * distance
    assert hit_point[2] == pytest.approx(1.0)