"""Rotation representations."""

from __future__ import annotations
import numpy as np

from .conversion import DTYPE, to_vector
from .debug import debug_print


EPSILON_QUATERNION = 1e-12
UNIT_QUATERNION_TOLERANCE = 1e-6


def quaternion_to_rotation_matrix(q) -> np.ndarray:
    """
    Convert XYZW quaternion to 3x3 rotation matrix.

    Args:
        q: (4,) quaternion [x, y, z, w]

    Returns:
        (3, 3) rotation matrix

    Raises:
        ValueError: If the quaternion has zero length

    Notes:
        - The quaternion is NOT normalized; a non-unit quaternion yields
          a matrix that is not a pure rotation
    """
    q = to_vector(q, 4, "quaternion")
    norm = np.linalg.norm(q)

    if norm < EPSILON_QUATERNION:
        raise ValueError("quaternion has zero length")

    if abs(norm - 1.0) > UNIT_QUATERNION_TOLERANCE:
        debug_print(f"[Rotation] non-unit quaternion (|q|={norm:.6f})")

    x, y, z, w = q

    return np.array([
        [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - z * w), 2.0 * (x * z + y * w)],
        [2.0 * (x * y + z * w), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - x * w)],
        [2.0 * (x * z - y * w), 2.0 * (y * z + x * w), 1.0 - 2.0 * (x * x + y * y)],
    ], dtype=DTYPE)


def rotation_matrix_to_quaternion(R) -> np.ndarray:
    """
    Convert 3x3 rotation matrix to XYZW quaternion.

    Args:
        R: (3, 3) rotation matrix

    Returns:
        (4,) quaternion [x, y, z, w]

    Notes:
        - Uses Shepperd's method for numerical stability
        - Returns normalized quaternion
    """
    R = np.asarray(R, dtype=DTYPE)
    trace = np.trace(R)

    if trace > 0.0:
        # w is the largest component
        s = np.sqrt(trace + 1.0) * 2.0
        w = 0.25 * s
        x = (R[2, 1] - R[1, 2]) / s
        y = (R[0, 2] - R[2, 0]) / s
        z = (R[1, 0] - R[0, 1]) / s

    elif R[0, 0] > R[1, 1] and R[0, 0] > R[2, 2]:
        # x is the largest component
        s = np.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2]) * 2.0
        w = (R[2, 1] - R[1, 2]) / s
        x = 0.25 * s
        y = (R[0, 1] + R[1, 0]) / s
        z = (R[0, 2] + R[2, 0]) / s

    elif R[1, 1] > R[2, 2]:
        # y is the largest component
        s = np.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2]) * 2.0
        w = (R[0, 2] - R[2, 0]) / s
        x = (R[0, 1] + R[1, 0]) / s
        y = 0.25 * s
        z = (R[1, 2] + R[2, 1]) / s

    else:
        # z is the largest component
        s = np.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1]) * 2.0
        w = (R[1, 0] - R[0, 1]) / s
        x = (R[0, 2] + R[2, 0]) / s
        y = (R[1, 2] + R[2, 1]) / s
        z = 0.25 * s

    q = np.array([x, y, z, w], dtype=DTYPE)
    q /= (np.linalg.norm(q) + EPSILON_QUATERNION)

    return q


def quaternion_from_axis_angle(axis, angle: float) -> np.ndarray:
    """
    Build XYZW quaternion rotating `angle` degrees around `axis`.

    Raises:
        ValueError: If the axis has zero length
    """
    axis = to_vector(axis, 3, "axis")
    norm = np.linalg.norm(axis)

    if norm < EPSILON_QUATERNION:
        raise ValueError("rotation axis has zero length")

    half = np.radians(angle) * 0.5
    xyz = axis / norm * np.sin(half)

    return np.array([xyz[0], xyz[1], xyz[2], np.cos(half)], dtype=DTYPE)


def as_rotation_matrix(rotation) -> np.ndarray:
    """
    Normalize a rotation input to a 3x3 matrix.

    Args:
        rotation: (4,) XYZW quaternion or (3, 3) rotation matrix

    Returns:
        (3, 3) rotation matrix

    Raises:
        ValueError: If the input is neither a quaternion nor a 3x3 matrix
    """
    r = np.asarray(rotation, dtype=DTYPE)

    if r.shape == (4,):
        return quaternion_to_rotation_matrix(r)

    if r.shape == (3, 3):
        if not np.isfinite(r).all():
            raise ValueError("rotation matrix contains NaN or Inf")
        return r.copy()

    raise ValueError(
        f"rotation must be a (4,) XYZW quaternion or a (3, 3) matrix, got shape {r.shape}"
    )
