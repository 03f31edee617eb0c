"""Viewport matrix construction."""

from __future__ import annotations
import numpy as np

from ..utils.conversion import DTYPE
from ..utils.validation import validate_viewport_size, validate_clip_planes


def build_viewport_matrix(
    width: float,
    height: float,
    near: float,
    far: float
) -> np.ndarray:
    """
    Build matrix mapping NDC to pixel coordinates.

    X and Y in [-1, 1] map to [0, width] and [0, height]. Z in [-1, 1]
    maps linearly to [near, far].

    Args:
        width, height: Viewport dimensions (pixels)
        near, far: Near and far clipping planes

    Returns:
        4x4 viewport matrix

    Notes:
        - Depth is remapped for unprojection only; this is not the
          [0, 1] depth-range viewport of a hardware rasterizer
    """
    validate_viewport_size(width, height)
    validate_clip_planes(near, far)

    V = np.eye(4, dtype=DTYPE)

    V[0, 0] = width * 0.5
    V[0, 3] = width * 0.5
    V[1, 1] = height * 0.5
    V[1, 3] = height * 0.5
    V[2, 2] = (far - near) * 0.5
    V[2, 3] = (far + near) * 0.5

    return V
