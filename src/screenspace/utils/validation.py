"""Input validation utilities."""

from __future__ import annotations
import math


def _require_finite(name: str, value: float):
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def validate_clip_planes(near: float, far: float):
    """
    Validate near/far clip distances.

    Args:
        near: Near clip distance
        far: Far clip distance

    Raises:
        ValueError: If near <= 0, far <= near or either is not finite
    """
    _require_finite("near", near)
    _require_finite("far", far)

    if near <= 0.0:
        raise ValueError(f"near must be > 0, got {near}")

    if far <= near:
        raise ValueError(f"far must be > near, got near={near} far={far}")


def validate_fov(fov: float, name: str = "fov"):
    """
    Validate a field of view angle in degrees.

    Raises:
        ValueError: If fov is outside the open interval (0, 180)
    """
    _require_finite(name, fov)

    if not 0.0 < fov < 180.0:
        raise ValueError(f"{name} must be in (0, 180) degrees, got {fov}")


def validate_viewport_size(width: float, height: float):
    """
    Validate viewport dimensions.

    Raises:
        ValueError: If width or height is not a positive finite number
    """
    _require_finite("width", width)
    _require_finite("height", height)

    if width <= 0.0 or height <= 0.0:
        raise ValueError(f"viewport size must be > 0, got {width}x{height}")


def validate_lens_inputs(
    fov: float,
    width: float,
    height: float,
    near: float,
    far: float
):
    """
    Validate the full set of projection inputs.

    Raises:
        ValueError: If any of the inputs would produce a degenerate projection
    """
    validate_fov(fov)
    validate_viewport_size(width, height)
    validate_clip_planes(near, far)


def validate_aspect(aspect: float):
    """
    Validate an aspect ratio (width / height).

    Raises:
        ValueError: If aspect is not a positive finite number
    """
    _require_finite("aspect", aspect)

    if aspect <= 0.0:
        raise ValueError(f"aspect must be > 0, got {aspect}")


def validate_focal_near_plane(near: float, focal_distance: float, far: float):
    """
    Validate the near plane shifted by a focal distance.

    Raises:
        ValueError: If near + focal_distance is not in (0, far)
    """
    _require_finite("focal_distance", focal_distance)
    shifted = near + focal_distance

    if not 0.0 < shifted < far:
        raise ValueError(
            f"near + focal_distance must be in (0, far={far}), "
            f"got {near} + {focal_distance} = {shifted}"
        )
