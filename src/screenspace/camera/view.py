"""World-to-camera (view) transform."""

from __future__ import annotations
import numpy as np

from .utils import trs_matrix, invert_transform

# Camera looks down +Z locally; flipping Z maps it onto the -Z view space
# expected by the projection matrix.
VIEW_SPACE_FLIP = (1.0, 1.0, -1.0)


def build_camera_to_world_matrix(position, rotation) -> np.ndarray:
    """
    Build camera-to-world matrix: Translate(position) · Rotate(rotation) · Scale(1, 1, -1).

    Args:
        position: (3,) camera position in world coordinates
        rotation: (4,) XYZW unit quaternion or (3, 3) rotation matrix

    Returns:
        4x4 camera-to-world matrix
    """
    return trs_matrix(position, rotation, VIEW_SPACE_FLIP)


def build_view_matrix(position, rotation) -> np.ndarray:
    """
    Build world-to-camera (view) matrix from camera pose.

    In view space the camera sits at the origin looking down -Z with +Y up,
    matching the OpenGL-style projection built by `build_projection_matrix`.

    Args:
        position: (3,) camera position in world coordinates
        rotation: (4,) XYZW unit quaternion or (3, 3) rotation matrix

    Returns:
        4x4 world-to-camera matrix

    Notes:
        - The rotation is not normalized; an invalid rotation silently
          produces a degenerate matrix
        - Omitting the Z flip produces a mirrored image
    """
    return invert_transform(build_camera_to_world_matrix(position, rotation))
