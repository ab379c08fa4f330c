"""A first-person camera driven by keyboard, mouse and scroll input."""

from __future__ import annotations

import math
from enum import Enum, auto

import numpy as np

from .transforms import look_at, normalize

YAW = -90.0
PITCH = 0.0
SPEED = 2.5
SPEED_FAST = 2.0 * SPEED
SENSITIVITY = 0.1
ZOOM = 45.0

MAX_PITCH = 89.0
MIN_ZOOM = 1.0
MAX_ZOOM = 45.0


class CameraMovement(Enum):
    """Input actions that move the camera, independent of any window system."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    MOVE_FAST = auto()
    SLOW_DOWN = auto()


# movement -> (camera axis attribute, sign)
_AXES = {
    CameraMovement.FORWARD: ("front", 1.0),
    CameraMovement.BACKWARD: ("front", -1.0),
    CameraMovement.LEFT: ("right", -1.0),
    CameraMovement.RIGHT: ("right", 1.0),
    CameraMovement.UP: ("up", 1.0),
    CameraMovement.DOWN: ("up", -1.0),
}


class Camera:
    """Camera described by a position and Euler angles, in degrees."""

    def __init__(self, position=(0.0, 0.0, 0.0), world_up=(0.0, 1.0, 0.0),
                 yaw=YAW, pitch=PITCH):
        self.position = np.array(position, dtype=np.float64).reshape(3)
        self.world_up = np.array(world_up, dtype=np.float64).reshape(3)
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.movement_speed = SPEED
        self.movement_speed_fast = SPEED_FAST
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self._current_speed = SPEED
        self.front = np.array([0.0, 0.0, -1.0])
        self.right = np.zeros(3)
        self.up = np.zeros(3)
        self._update_vectors()

    @classmethod
    def from_scalars(cls, pos_x, pos_y, pos_z, up_x, up_y, up_z, yaw, pitch):
        """Build a camera from separate coordinate values."""
        return cls((pos_x, pos_y, pos_z), (up_x, up_y, up_z), yaw, pitch)

    def view_matrix(self) -> np.ndarray:
        """The view matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        """Apply one keyboard action over ``delta_time`` seconds."""
        if direction is CameraMovement.MOVE_FAST:
            self._current_speed = self.movement_speed_fast
        elif direction is CameraMovement.SLOW_DOWN:
            self._current_speed = self.movement_speed

        axis = _AXES.get(direction)
        if axis is None:
            return
        name, sign = axis
        velocity = self._current_speed * delta_time
        self.position = self.position + sign * getattr(self, name) * velocity

    def process_mouse_movement(self, xoffset: float, yoffset: float,
                               constrain_pitch: bool = True) -> None:
        """Turn the camera by a mouse offset; optionally keep pitch in range."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -MAX_PITCH), MAX_PITCH)
        self._update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        """Zoom by a scroll-wheel offset, keeping the field of view in range."""
        self.zoom = min(max(self.zoom - yoffset, MIN_ZOOM), MAX_ZOOM)

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.front = normalize([
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ])
        self.right = normalize(np.cross(self.front, self.world_up))
        self.up = normalize(np.cross(self.right, self.front))