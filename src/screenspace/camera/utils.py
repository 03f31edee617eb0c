"""Camera matrix utilities.

All matrices are 4x4 float64 arrays indexed ``m[row, col]`` and act on
column vectors: a point ``p`` is transformed as ``M @ (x, y, z, 1)``.
Translation lives in ``m[:3, 3]`` and ``A @ B`` applies ``B`` first.
"""

from __future__ import annotations
from functools import reduce
from typing import Tuple
import numpy as np

from ..utils.conversion import DTYPE, to_vector
from ..utils.rotation import as_rotation_matrix


def ensure_4x4_matrix(m) -> np.ndarray:
    """
    Convert input to 4x4 numpy array.

    Args:
        m: Input matrix (4x4 array or flat row-major list of 16 floats)

    Returns:
        4x4 float64 numpy array

    Raises:
        ValueError: If input cannot be reshaped to 4x4
    """
    M = np.asarray(m, dtype=DTYPE)

    if M.shape == (16,):
        M = M.reshape(4, 4)

    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )

    return M


def invert_transform(m: np.ndarray) -> np.ndarray:
    """
    Compute inverse of 4x4 transformation matrix.

    Args:
        m: 4x4 transformation matrix

    Returns:
        Inverted 4x4 matrix (float64)

    Raises:
        numpy.linalg.LinAlgError: If the matrix is singular
    """
    return np.linalg.inv(ensure_4x4_matrix(m))


def compose(*matrices: np.ndarray) -> np.ndarray:
    """
    Multiply 4x4 matrices left to right: ``compose(A, B, C) == A @ B @ C``.

    The rightmost matrix is applied to a point first.
    """
    if not matrices:
        return np.eye(4, dtype=DTYPE)
    return reduce(np.matmul, (ensure_4x4_matrix(m) for m in matrices))


def translation_matrix(offset) -> np.ndarray:
    """Return translation matrix."""
    T = np.eye(4, dtype=DTYPE)
    T[:3, 3] = to_vector(offset, 3, "translation")
    return T


def scale_matrix(scale) -> np.ndarray:
    """Return non-uniform scale matrix."""
    S = np.eye(4, dtype=DTYPE)
    S[:3, :3] = np.diag(to_vector(scale, 3, "scale"))
    return S


def rotation_matrix(rotation) -> np.ndarray:
    """Embed a quaternion or 3x3 rotation into a 4x4 matrix."""
    R = np.eye(4, dtype=DTYPE)
    R[:3, :3] = as_rotation_matrix(rotation)
    return R


def trs_matrix(translation, rotation, scale) -> np.ndarray:
    """
    Build Translate · Rotate · Scale.

    Args:
        translation: (3,) position
        rotation: (4,) XYZW quaternion or (3, 3) rotation matrix
        scale: (3,) per-axis scale

    Returns:
        4x4 local-to-world matrix
    """
    return compose(
        translation_matrix(translation),
        rotation_matrix(rotation),
        scale_matrix(scale),
    )


def transform_point(m: np.ndarray, point) -> Tuple[np.ndarray, bool]:
    """
    Apply a projective 4x4 matrix to a 3D point and divide by w.

    The point is extended to ``(x, y, z, 1)`` and each output component is
    accumulated row by row so the ``w == 0`` case is checked explicitly.

    Args:
        m: 4x4 transformation matrix
        point: (3,) point

    Returns:
        (xyz, valid):
            - xyz: (3,) point after perspective division,
              zero vector when w == 0
            - valid: False when w == 0
    """
    m = ensure_4x4_matrix(m)
    px, py, pz = to_vector(point, 3, "point")

    x = px * m[0, 0] + py * m[0, 1] + pz * m[0, 2] + m[0, 3]
    y = px * m[1, 0] + py * m[1, 1] + pz * m[1, 2] + m[1, 3]
    z = px * m[2, 0] + py * m[2, 1] + pz * m[2, 2] + m[2, 3]
    w = px * m[3, 0] + py * m[3, 1] + pz * m[3, 2] + m[3, 3]

    if w == 0.0:
        return np.zeros(3, dtype=DTYPE), False

    return np.array([x / w, y / w, z / w], dtype=DTYPE), True
