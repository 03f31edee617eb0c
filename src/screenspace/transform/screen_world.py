"""Screen <-> world point conversion."""

from __future__ import annotations
from typing import Tuple, Union
import numpy as np

from ..camera.projection import build_projection_matrix
from ..camera.utils import compose, invert_transform, transform_point
from ..camera.view import build_view_matrix
from ..camera.viewport import build_viewport_matrix
from ..types import CameraPose, LensParameters, Viewport
from ..utils.conversion import DTYPE, to_vector
from ..utils.debug import debug_print, debug_matrix_info
from ..utils.validation import validate_focal_near_plane

PointResult = Union[np.ndarray, Tuple[np.ndarray, bool]]


def focal_near_plane(near: float, focal_distance: float) -> float:
    """
    Near plane shifted to the requested focal distance.

    Unprojecting a screen point on the near plane of a projection whose
    near plane sits at ``near + focal_distance`` yields the world point at
    that depth, so no dedicated unprojection formula is needed.
    """
    return near + focal_distance


def screen_to_world(
    screen_position,
    pose: CameraPose,
    lens: LensParameters,
    viewport: Viewport,
    focal_distance: float = 0.0,
    return_valid: bool = False
) -> PointResult:
    """
    Unproject a screen point to world space.

    Args:
        screen_position: (2,) pixel coordinates, origin bottom-left, +Y up
        pose: Camera pose
        lens: Vertical FOV and clip planes
        viewport: Viewport size in pixels
        focal_distance: Distance beyond the near plane, measured along the
            camera's viewing axis, at which the point is evaluated
        return_valid: Also return whether the mapping was defined

    Returns:
        (3,) world position, or (world_position, valid) if return_valid.
        The zero vector is returned (valid=False) when w == 0.

    Raises:
        ValueError: If the shifted near plane is not in (0, far)

    Notes:
        - Each matrix is inverted individually before composing
        - The result lies at view-space depth near + focal_distance
    """
    sx, sy = to_vector(screen_position, 2, "screen_position")
    validate_focal_near_plane(lens.near, focal_distance, lens.far)
    near = focal_near_plane(lens.near, focal_distance)

    view_inv = invert_transform(build_view_matrix(pose.position, pose.rotation))
    proj_inv = invert_transform(
        build_projection_matrix(lens.fov, viewport.width, viewport.height, near, lens.far)
    )
    viewport_inv = invert_transform(
        build_viewport_matrix(viewport.width, viewport.height, near, lens.far)
    )

    matrix = compose(view_inv, proj_inv, viewport_inv)
    debug_matrix_info("ScreenToWorld", matrix)

    world, valid = transform_point(matrix, (sx, sy, near))

    if not valid:
        debug_print(f"[ScreenToWorld] w == 0 for screen position ({sx}, {sy}), returning zero vector")

    if return_valid:
        return world, valid
    return world


def world_to_screen(
    world_position,
    pose: CameraPose,
    lens: LensParameters,
    viewport: Viewport,
    return_valid: bool = False
) -> PointResult:
    """
    Project a world point onto the screen.

    Args:
        world_position: (3,) world coordinates
        pose: Camera pose
        lens: Vertical FOV and clip planes (used unshifted)
        viewport: Viewport size in pixels
        return_valid: Also return whether the mapping was defined

    Returns:
        (3,) [x_pixel, y_pixel, z_ndc], or (screen_position, valid) if
        return_valid. The zero vector is returned (valid=False) when w == 0.

    Notes:
        - Z is left in NDC; only X and Y are remapped to pixels
        - Points behind the camera are not rejected; their w is negative
    """
    view = build_view_matrix(pose.position, pose.rotation)
    proj = build_projection_matrix(lens.fov, viewport.width, viewport.height, lens.near, lens.far)

    matrix = compose(proj, view)
    debug_matrix_info("WorldToScreen", matrix)

    ndc, valid = transform_point(matrix, world_position)

    if not valid:
        debug_print("[WorldToScreen] w == 0, returning zero vector")
        screen = ndc
    else:
        screen = np.array([
            ((ndc[0] + 1.0) * 0.5) * viewport.width,
            ((ndc[1] + 1.0) * 0.5) * viewport.height,
            ndc[2],
        ], dtype=DTYPE)

    if return_valid:
        return screen, valid
    return screen
