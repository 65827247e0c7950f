"""First-person fly camera driven by cursor movement and arrow keys."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

__all__ = ["Key", "FlyCamera", "perspective", "look_at"]


class Key(enum.Enum):
    """Movement keys understood by FlyCamera."""

    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return vector / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1].

    ``fovy`` is the vertical field of view in degrees. Matrices act on
    column vectors: ``clip = P @ (x, y, z, 1)``.
    """
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    half = math.radians(fovy) / 2.0
    tan_half = math.tan(half)
    if tan_half == 0.0:
        raise ValueError("field of view must be non-zero")
    focal = 1.0 / tan_half
    result = np.zeros((4, 4), dtype=np.float64)
    result[0, 0] = focal / aspect
    result[1, 1] = focal
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix placing the camera at ``eye`` looking at ``center``."""
    eye = np.asarray(eye, dtype=np.float64)
    center = np.asarray(center, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)
    forward = _normalize(center - eye)
    side = _normalize(np.cross(forward, up))
    upward = np.cross(side, forward)
    result = np.eye(4, dtype=np.float64)
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -np.dot(side, eye)
    result[1, 3] = -np.dot(upward, eye)
    result[2, 3] = np.dot(forward, eye)
    return result


@dataclass
class FlyCamera:
    """Camera that turns with the cursor and moves with arrow keys.

    After each update the caller should move the cursor back to
    ``cursor_center``; offsets from it turn the camera.
    """

    position: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 5.0]))
    horizontal_angle: float = 3.14
    vertical_angle: float = 0.0
    initial_fov: float = 45.0
    speed: float = 3.0
    mouse_speed: float = 0.005
    screen_width: int = 1024
    screen_height: int = 768
    aspect: float = 4.0 / 3.0
    near: float = 0.1
    far: float = 100.0
    view_matrix: np.ndarray = field(init=False)
    projection_matrix: np.ndarray = field(init=False)

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=np.float64).reshape(3)
        self.view_matrix = np.eye(4, dtype=np.float64)
        self.projection_matrix = np.eye(4, dtype=np.float64)

    @property
    def cursor_center(self) -> tuple[int, int]:
        """Cursor position the camera treats as "no movement"."""
        return self.screen_width // 2, self.screen_height // 2

    @property
    def direction(self) -> np.ndarray:
        """Unit vector the camera looks along."""
        return np.array(
            [
                math.cos(self.vertical_angle) * math.sin(self.horizontal_angle),
                math.sin(self.vertical_angle),
                math.cos(self.vertical_angle) * math.cos(self.horizontal_angle),
            ]
        )

    @property
    def right(self) -> np.ndarray:
        """Horizontal unit vector pointing to the camera's right."""
        angle = self.horizontal_angle - 3.14 / 2.0
        return np.array([math.sin(angle), 0.0, math.cos(angle)])

    @property
    def up(self) -> np.ndarray:
        """Camera up vector, perpendicular to right and direction."""
        return np.cross(self.right, self.direction)

    def update(
        self,
        cursor_x: float,
        cursor_y: float,
        delta_time: float,
        pressed: Iterable[Key] = (),
    ) -> tuple[np.ndarray, np.ndarray]:
        """Apply one frame of input and return (view, projection)."""
        center_x, center_y = self.cursor_center
        self.horizontal_angle += self.mouse_speed * float(center_x - cursor_x)
        self.vertical_angle += self.mouse_speed * float(center_y - cursor_y)

        direction = self.direction
        right = self.right
        up = np.cross(right, direction)

        keys = set(pressed)
        step = delta_time * self.speed
        if Key.UP in keys:
            self.position = self.position + direction * step
        if Key.DOWN in keys:
            self.position = self.position - direction * step
        if Key.RIGHT in keys:
            self.position = self.position + right * step
        if Key.LEFT in keys:
            self.position = self.position - right * step

        self.projection_matrix = perspective(self.initial_fov, self.aspect, self.near, self.far)
        self.view_matrix = look_at(self.position, self.position + direction, up)
        return self.view_matrix, self.projection_matrix