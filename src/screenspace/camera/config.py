"""Camera configuration parser."""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import numpy as np
from omegaconf import DictConfig, OmegaConf

from ..types import CameraPose, LensParameters, Viewport, IDENTITY_QUATERNION
from .fov import rescale_fov
from .lookat import build_lookat_camera_pose

REQUIRED_SECTIONS = ("camera", "lens", "viewport")


def load_camera_config(config_path: Union[str, Path]) -> DictConfig:
    """
    Load and validate YAML camera configuration.

    Args:
        config_path: Path to YAML config file

    Returns:
        OmegaConf configuration object

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a required section is missing
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = OmegaConf.load(config_path)

    for section in REQUIRED_SECTIONS:
        if section not in config:
            raise ValueError(f"Missing required config section: {section}")

    print(f"[Config] Loaded camera configuration from: {config_path}")

    return config


def make_camera_from_config(
    config: Union[DictConfig, Dict[str, Any]]
) -> Tuple[CameraPose, LensParameters, Viewport]:
    """
    Build camera value types from configuration.

    Args:
        config: Configuration with sections:
            - camera:
                - position: [x, y, z] (default: origin)
                - rotation: XYZW quaternion or 3x3 matrix (default: identity)
                - lookat: {target: [x, y, z], up: [x, y, z]}
                    Note: If 'lookat' is provided, 'rotation' is ignored
            - lens:
                - fov: vertical FOV in degrees (default: 60)
                - near, far: clip planes (default: 0.3, 1000)
                - base_resolution: [w, h] the fov was designed for; when
                    set, fov is rescaled to the viewport
            - viewport:
                - width, height: pixels (default: 1920x1080)

    Returns:
        (pose, lens, viewport)

    Example:
        >>> pose, lens, viewport = make_camera_from_config({
        ...     "camera": {"position": [0, 0, -10]},
        ...     "lens": {"fov": 60, "near": 0.3, "far": 1000},
        ...     "viewport": {"width": 1920, "height": 1080},
        ... })
    """
    if not isinstance(config, DictConfig):
        config = OmegaConf.create(config)
    cfg = OmegaConf.to_container(config, resolve=True)

    camera_cfg = cfg.get("camera") or {}
    lens_cfg = cfg.get("lens") or {}
    viewport_cfg = cfg.get("viewport") or {}

    viewport = Viewport(
        width=float(viewport_cfg.get("width", 1920)),
        height=float(viewport_cfg.get("height", 1080)),
    )

    # Camera pose
    position = np.array(camera_cfg.get("position", [0.0, 0.0, 0.0]), dtype=np.float64)
    lookat_cfg = camera_cfg.get("lookat")

    if lookat_cfg is not None:
        pose = build_lookat_camera_pose(
            position,
            np.array(lookat_cfg.get("target", [0.0, 0.0, 0.0]), dtype=np.float64),
            np.array(lookat_cfg.get("up", [0.0, 1.0, 0.0]), dtype=np.float64),
        )
    else:
        rotation = camera_cfg.get("rotation", list(IDENTITY_QUATERNION))
        pose = CameraPose(
            position=tuple(position),
            rotation=np.array(rotation, dtype=np.float64),
        )

    # Lens
    fov = float(lens_cfg.get("fov", 60.0))
    base_resolution = lens_cfg.get("base_resolution")

    if base_resolution is not None:
        base_w, base_h = (float(v) for v in base_resolution)
        rescaled = rescale_fov(fov, (base_w, base_h), viewport.resolution)
        print(f"[Config] Rescaled fov {fov:.3f} -> {rescaled:.3f} "
              f"({base_w:g}x{base_h:g} -> {viewport.width:g}x{viewport.height:g})")
        fov = rescaled

    lens = LensParameters(
        fov=fov,
        near=float(lens_cfg.get("near", 0.3)),
        far=float(lens_cfg.get("far", 1000.0)),
    )

    return pose, lens, viewport
