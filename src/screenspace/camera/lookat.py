"""Look-at camera pose."""

from __future__ import annotations
from typing import Optional
import numpy as np

from ..types import CameraPose
from ..utils.conversion import DTYPE, to_vector
from ..utils.rotation import rotation_matrix_to_quaternion


def build_lookat_rotation(
    eye: np.ndarray,
    target: np.ndarray,
    up: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Build camera rotation matrix from look-at parameters.

    Camera local axes in world space:
        +Z = forward (eye -> target)
        +Y = up
        +X = right

    Args:
        eye: (3,) Camera position in world coordinates
        target: (3,) Look-at point in world coordinates
        up: (3,) World 'up' direction hint (default: Y-up)
            Note: This is NOT the camera's up direction, but a world-space
            hint to define the camera's horizontal plane orientation.

    Returns:
        (3, 3) rotation matrix with columns [right, up, forward]

    Raises:
        ValueError: If eye and target coincide
    """
    if up is None:
        up = (0.0, 1.0, 0.0)

    eye = to_vector(eye, 3, "eye")
    target = to_vector(target, 3, "target")
    up = to_vector(up, 3, "up")

    # Step 1: forward direction (camera Z-axis)
    forward = target - eye
    forward_norm = np.linalg.norm(forward)

    if forward_norm < 1e-12:
        raise ValueError("Eye and target positions are too close (degenerate camera)")

    forward = forward / forward_norm

    # Step 2: right direction (camera X-axis)
    right = np.cross(up, forward)
    right_norm = np.linalg.norm(right)

    # forward and up are parallel
    if right_norm < 1e-6:
        if abs(np.dot(forward, [0.0, 0.0, 1.0])) < 0.999:
            alt_up = np.array([0.0, 0.0, 1.0], dtype=DTYPE)
        else:
            alt_up = np.array([1.0, 0.0, 0.0], dtype=DTYPE)

        right = np.cross(alt_up, forward)
        right_norm = np.linalg.norm(right)

    right = right / right_norm

    # Step 3: camera up (Y-axis); forward and right are orthonormal
    cam_up = np.cross(forward, right)

    return np.stack([right, cam_up, forward], axis=1)


def build_lookat_camera_pose(
    eye: np.ndarray,
    target: np.ndarray,
    up: Optional[np.ndarray] = None
) -> CameraPose:
    """
    Build a `CameraPose` at `eye` looking at `target`.

    The rotation is stored as an XYZW quaternion.
    """
    R = build_lookat_rotation(eye, target, up)
    q = rotation_matrix_to_quaternion(R)
    return CameraPose(position=tuple(to_vector(eye, 3, "eye")), rotation=tuple(q))
