"""Field of view conversions.

All conversions follow the pinhole relation
``tan(fov_x / 2) = tan(fov_y / 2) * aspect``.
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple

from ..utils.validation import validate_aspect, validate_fov, validate_viewport_size


def get_aspect(width: float, height: float) -> float:
    """
    Aspect ratio width / height.

    Raises:
        ValueError: If height is zero
    """
    if height == 0:
        raise ValueError("height must be non-zero to compute an aspect ratio")
    return float(width) / float(height)


def horizontal_fov(fov: float, aspect: float) -> float:
    """
    Horizontal FOV (degrees) from vertical FOV (degrees) and aspect ratio.

    Raises:
        ValueError: If fov is outside (0, 180) or aspect is not > 0
    """
    validate_fov(fov)
    validate_aspect(aspect)
    return math.degrees(math.atan(math.tan(math.radians(fov) * 0.5) * aspect) * 2.0)


def vertical_fov(fov: float, aspect: float) -> float:
    """Vertical FOV (degrees) from horizontal FOV (degrees) and aspect ratio."""
    validate_fov(fov)
    validate_aspect(aspect)
    return math.degrees(math.atan(math.tan(math.radians(fov) * 0.5) / aspect) * 2.0)


def rescale_fov(
    base_fov: float,
    base_resolution: Sequence[float],
    current_resolution: Sequence[float]
) -> float:
    """
    Vertical FOV for `current_resolution` that keeps the horizontal FOV of
    `base_fov` at `base_resolution`.

    Args:
        base_fov: Vertical FOV (degrees) designed for the base resolution
        base_resolution: (width, height) the base FOV was designed for
        current_resolution: (width, height) of the current viewport

    Returns:
        Vertical FOV (degrees) for the current resolution

    Notes:
        - Horizontal FOV, not vertical, is preserved across aspect changes
    """
    validate_fov(base_fov, "base_fov")
    base_w, base_h = base_resolution
    cur_w, cur_h = current_resolution
    validate_viewport_size(base_w, base_h)
    validate_viewport_size(cur_w, cur_h)

    base_horizontal = horizontal_fov(base_fov, get_aspect(base_w, base_h))
    return vertical_fov(base_horizontal, get_aspect(cur_w, cur_h))


def compute_tan_half_fov(fov: float, aspect: float) -> Tuple[float, float]:
    """
    Compute tangent of half FOV in both directions.

    Args:
        fov: Vertical field of view (degrees)
        aspect: Width / height

    Returns:
        (tanfovx, tanfovy): Tangent of half horizontal and vertical FOV
    """
    tanfovy = math.tan(math.radians(fov) * 0.5)
    tanfovx = tanfovy * aspect
    return tanfovx, tanfovy


def fov_from_focal_length(focal_length: float, size: float) -> float:
    """
    FOV (degrees) along one image axis from pinhole intrinsics.

    For a pinhole camera: tan(FOV/2) = size / (2 * focal_length)

    Args:
        focal_length: Focal length in pixels
        size: Image extent along the same axis in pixels
    """
    if focal_length <= 0:
        raise ValueError(f"focal_length must be > 0, got {focal_length}")
    return math.degrees(2.0 * math.atan(float(size) / (2.0 * float(focal_length))))
