"""Vector and matrix helpers for view and projection transforms.

Matrices are 4x4 numpy arrays in mathematical (row, column) order and act on
column vectors: ``matrix @ [x, y, z, 1]``.
"""

from __future__ import annotations

import numpy as np


def _vec3(vector) -> np.ndarray:
    return np.asarray(vector, dtype=np.float64).reshape(3)


def normalize(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    v = np.asarray(vector, dtype=np.float64)
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    forward = normalize(_vec3(center) - eye)
    side = normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)

    view = np.identity(4)
    view[0, :3] = side
    view[1, :3] = upward
    view[2, :3] = -forward
    view[0, 3] = -side @ eye
    view[1, 3] = -upward @ eye
    view[2, 3] = forward @ eye
    return view


def ortho(left, right, bottom, top, near, far) -> np.ndarray:
    """Right-handed orthographic projection onto the [-1, 1] clip cube."""
    if right == left or top == bottom or far == near:
        raise ValueError("orthographic volume must have non-zero extent")
    projection = np.identity(4)
    projection[0, 0] = 2.0 / (right - left)
    projection[1, 1] = 2.0 / (top - bottom)
    projection[2, 2] = -2.0 / (far - near)
    projection[0, 3] = -(right + left) / (right - left)
    projection[1, 3] = -(top + bottom) / (top - bottom)
    projection[2, 3] = -(far + near) / (far - near)
    return projection