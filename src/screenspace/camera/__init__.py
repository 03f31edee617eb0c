"""Camera matrices and field of view."""

from .utils import (
    ensure_4x4_matrix,
    invert_transform,
    compose,
    translation_matrix,
    scale_matrix,
    rotation_matrix,
    trs_matrix,
    transform_point,
)
from .view import build_view_matrix, build_camera_to_world_matrix
from .projection import build_projection_matrix
from .viewport import build_viewport_matrix
from .fov import (
    get_aspect,
    horizontal_fov,
    vertical_fov,
    rescale_fov,
    compute_tan_half_fov,
    fov_from_focal_length,
)
from .lookat import build_lookat_rotation, build_lookat_camera_pose
from .config import load_camera_config, make_camera_from_config

__all__ = [
    # Matrix primitives
    "ensure_4x4_matrix",
    "invert_transform",
    "compose",
    "translation_matrix",
    "scale_matrix",
    "rotation_matrix",
    "trs_matrix",
    "transform_point",

    # Builders
    "build_view_matrix",
    "build_camera_to_world_matrix",
    "build_projection_matrix",
    "build_viewport_matrix",

    # Field of view
    "get_aspect",
    "horizontal_fov",
    "vertical_fov",
    "rescale_fov",
    "compute_tan_half_fov",
    "fov_from_focal_length",

    # Pose
    "build_lookat_rotation",
    "build_lookat_camera_pose",

    # Config
    "load_camera_config",
    "make_camera_from_config",
]
