"""Camera value types."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, Union

from .utils.conversion import to_vector
from .utils.rotation import as_rotation_matrix
from .utils.validation import validate_fov, validate_clip_planes, validate_viewport_size

IDENTITY_QUATERNION = (0.0, 0.0, 0.0, 1.0)

Rotation = Union[Tuple[float, float, float, float], Tuple[Tuple[float, ...], ...]]


@dataclass(frozen=True)
class CameraPose:
    """
    Camera placement in world space.

    `rotation` is either an XYZW unit quaternion or a 3x3 rotation matrix.
    """

    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: Rotation = field(default=IDENTITY_QUATERNION)

    def __post_init__(self):
        object.__setattr__(self, "position", tuple(to_vector(self.position, 3, "position").tolist()))

        # Raises on bad shape; matrices are stored as nested tuples
        R = as_rotation_matrix(self.rotation)
        if len(self.rotation) == 4:
            rotation = tuple(to_vector(self.rotation, 4, "rotation").tolist())
        else:
            rotation = tuple(tuple(row) for row in R.tolist())
        object.__setattr__(self, "rotation", rotation)


@dataclass(frozen=True)
class LensParameters:
    """Vertical FOV (degrees) and clip plane distances."""

    fov: float = 60.0
    near: float = 0.3
    far: float = 1000.0

    def __post_init__(self):
        validate_fov(self.fov)
        validate_clip_planes(self.near, self.far)


@dataclass(frozen=True)
class Viewport:
    """Viewport size in pixels."""

    width: float = 1920.0
    height: float = 1080.0

    def __post_init__(self):
        validate_viewport_size(self.width, self.height)

    @property
    def aspect(self) -> float:
        return float(self.width) / float(self.height)

    @property
    def resolution(self) -> Tuple[float, float]:
        return (self.width, self.height)
