"""
Command line entry point for screen/world point conversion.

Usage:
    screenspace --config configs/camera_config.yaml --world 0 0 0
    screenspace --config configs/camera_config.yaml --screen 960 540 --distance 9.7
"""

import argparse
from typing import List, Optional

from omegaconf import DictConfig

from .camera.config import load_camera_config, make_camera_from_config
from .transform.screen_world import screen_to_world, world_to_screen


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="screenspace",
        description="Convert points between world space and screen space",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  screenspace --config configs/camera_config.yaml --world 0 0 0
  screenspace --config configs/camera_config.yaml --screen 960 540 --distance 9.7
  screenspace --config configs/camera_config.yaml --world 1 2 3 --width 1024 --height 768
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default="configs/camera_config.yaml",
        help="Path to YAML camera configuration"
    )

    mode = parser.add_mutually_exclusive_group(required=True)

    mode.add_argument(
        "--world", "-w",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        help="World position to project onto the screen"
    )

    mode.add_argument(
        "--screen", "-s",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        help="Screen position (pixels, origin bottom-left) to unproject"
    )

    parser.add_argument(
        "--distance", "-d",
        type=float,
        default=0.0,
        help="Focal distance beyond the near plane for --screen"
    )

    parser.add_argument("--width", type=float, default=None, help="Override viewport width")
    parser.add_argument("--height", type=float, default=None, help="Override viewport height")
    parser.add_argument("--fov", type=float, default=None, help="Override vertical fov (degrees)")

    return parser.parse_args(argv)


def apply_cli_overrides(config: DictConfig, args) -> DictConfig:
    """
    Apply command-line argument overrides to config

    Args:
        config: Base configuration
        args: Parsed command-line arguments

    Returns:
        Modified configuration
    """
    if args.width is not None:
        config.viewport.width = args.width
        print(f"[Config] Override width: {args.width:g}")

    if args.height is not None:
        config.viewport.height = args.height
        print(f"[Config] Override height: {args.height:g}")

    if args.fov is not None:
        config.lens.fov = args.fov
        print(f"[Config] Override fov: {args.fov:g}")

    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    config = load_camera_config(args.config)
    config = apply_cli_overrides(config, args)
    pose, lens, viewport = make_camera_from_config(config)

    print(f"  - Camera: position={pose.position}")
    print(f"  - Lens: fov={lens.fov:.3f} near={lens.near:g} far={lens.far:g}")
    print(f"  - Viewport: {viewport.width:g}x{viewport.height:g}")

    if args.world is not None:
        screen, valid = world_to_screen(args.world, pose, lens, viewport, return_valid=True)
        label = "Screen"
        result = screen
    else:
        world, valid = screen_to_world(
            args.screen, pose, lens, viewport,
            focal_distance=args.distance, return_valid=True
        )
        label = "World"
        result = world

    if not valid:
        print(f"[{label}] undefined (w == 0)")
        return 1

    print(f"[{label}] {result[0]:.6f} {result[1]:.6f} {result[2]:.6f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
