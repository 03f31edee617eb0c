"""Common utilities for coordinate conversion."""

from .conversion import DTYPE, to_vector
from .rotation import (
    quaternion_to_rotation_matrix,
    rotation_matrix_to_quaternion,
    quaternion_from_axis_angle,
    as_rotation_matrix,
)
from .validation import (
    validate_clip_planes,
    validate_fov,
    validate_viewport_size,
    validate_lens_inputs,
    validate_aspect,
    validate_focal_near_plane,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix_info,
)

__all__ = [
    # Conversion
    "DTYPE",
    "to_vector",

    # Rotation
    "quaternion_to_rotation_matrix",
    "rotation_matrix_to_quaternion",
    "quaternion_from_axis_angle",
    "as_rotation_matrix",

    # Validation
    "validate_clip_planes",
    "validate_fov",
    "validate_viewport_size",
    "validate_lens_inputs",
    "validate_aspect",
    "validate_focal_near_plane",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix_info",
]
