"""
screenspace - Perspective camera coordinate conversion

Builds view, projection and viewport matrices from plain camera parameters
and converts points between world space and screen space.

Components:
    - Types: CameraPose, LensParameters, Viewport
    - Camera: Matrix builders, field of view conversion, config
    - Transform: Screen <-> world point conversion
    - Utils: Rotation, validation and debug helpers

Example:
    >>> from screenspace import CameraPose, LensParameters, Viewport
    >>> from screenspace import world_to_screen, screen_to_world
    >>>
    >>> pose = CameraPose(position=(0, 0, -10))
    >>> lens = LensParameters(fov=60, near=0.3, far=1000)
    >>> viewport = Viewport(1920, 1080)
    >>>
    >>> screen = world_to_screen((0, 0, 0), pose, lens, viewport)
    >>> world = screen_to_world(screen[:2], pose, lens, viewport, focal_distance=9.7)
"""

__version__ = "1.0.0"

# Types
from .types import CameraPose, LensParameters, Viewport

# Camera
from .camera import (
    build_view_matrix,
    build_projection_matrix,
    build_viewport_matrix,
    get_aspect,
    horizontal_fov,
    vertical_fov,
    rescale_fov,
    build_lookat_camera_pose,
    load_camera_config,
    make_camera_from_config,
    invert_transform,
    transform_point,
)

# Transform
from .transform import (
    focal_near_plane,
    screen_to_world,
    world_to_screen,
)

__all__ = [
    "__version__",

    # Types
    "CameraPose",
    "LensParameters",
    "Viewport",

    # Camera
    "build_view_matrix",
    "build_projection_matrix",
    "build_viewport_matrix",
    "get_aspect",
    "horizontal_fov",
    "vertical_fov",
    "rescale_fov",
    "build_lookat_camera_pose",
    "load_camera_config",
    "make_camera_from_config",
    "invert_transform",
    "transform_point",

    # Transform
    "focal_near_plane",
    "screen_to_world",
    "world_to_screen",
]
