"""Projection matrix construction."""

from __future__ import annotations
import math
import numpy as np

from ..utils.conversion import DTYPE
from ..utils.validation import validate_lens_inputs
from .fov import get_aspect


def build_projection_matrix(
    fov: float,
    width: float,
    height: float,
    near: float,
    far: float
) -> np.ndarray:
    """
    Build OpenGL-style perspective projection matrix.

    This matrix maps view space coordinates (camera looking down -Z) to
    homogeneous clip space. NDC are obtained by perspective division.

    Args:
        fov: Vertical field of view (degrees)
        width, height: Viewport dimensions (pixels); aspect = width / height
        near, far: Near and far clipping planes

    Returns:
        4x4 projection matrix

    Raises:
        ValueError: If fov, viewport size or clip planes are degenerate

    Notes:
        - clip.w = -z_view, positive for points in front of the camera
        - Depth encoding: z_ndc in [-1, 1] between near and far
    """
    validate_lens_inputs(fov, width, height, near, far)

    aspect = get_aspect(width, height)
    f = 1.0 / math.tan(math.radians(fov) * 0.5)

    P = np.zeros((4, 4), dtype=DTYPE)

    P[0, 0] = f / aspect
    P[1, 1] = f

    P[2, 2] = (far + near) / (near - far)
    P[2, 3] = (2.0 * far * near) / (near - far)

    P[3, 2] = -1.0

    return P
