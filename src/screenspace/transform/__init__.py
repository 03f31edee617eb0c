"""Point conversion between screen and world space."""

from .screen_world import (
    focal_near_plane,
    screen_to_world,
    world_to_screen,
)

__all__ = [
    "focal_near_plane",
    "screen_to_world",
    "world_to_screen",
]
