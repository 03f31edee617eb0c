from pathlib import Path

import numpy as np
import pytest

from screenspace.camera.config import load_camera_config, make_camera_from_config
from screenspace.camera.fov import rescale_fov
from screenspace.utils.rotation import as_rotation_matrix


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_and_build_camera(tmp_path: Path):
    config_path = _write(
        tmp_path / "camera.yaml",
        "camera:\n"
        "  position: [0.0, 0.0, -10.0]\n"
        "  rotation: [0.0, 0.0, 0.0, 1.0]\n"
        "lens:\n"
        "  fov: 60.0\n"
        "  near: 0.3\n"
        "  far: 1000.0\n"
        "viewport:\n"
        "  width: 1920\n"
        "  height: 1080\n",
    )

    pose, lens, viewport = make_camera_from_config(load_camera_config(config_path))

    assert pose.position == (0.0, 0.0, -10.0)
    assert pose.rotation == (0.0, 0.0, 0.0, 1.0)
    assert (lens.fov, lens.near, lens.far) == (60.0, 0.3, 1000.0)
    assert viewport.resolution == (1920.0, 1080.0)


def test_load_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_camera_config(tmp_path / "missing.yaml")


def test_load_missing_section_raises(tmp_path: Path):
    config_path = _write(tmp_path / "camera.yaml", "camera:\n  position: [0, 0, 0]\nlens:\n  fov: 60\n")

    with pytest.raises(ValueError, match="viewport"):
        load_camera_config(config_path)


def test_defaults_for_empty_sections():
    pose, lens, viewport = make_camera_from_config({"camera": {}, "lens": {}, "viewport": {}})

    assert pose.position == (0.0, 0.0, 0.0)
    assert (lens.fov, lens.near, lens.far) == (60.0, 0.3, 1000.0)
    assert viewport.resolution == (1920.0, 1080.0)


def test_lookat_overrides_rotation():
    pose, _, _ = make_camera_from_config({
        "camera": {
            "position": [0.0, 5.0, 0.0],
            "rotation": [0.0, 0.0, 0.0, 1.0],
            "lookat": {"target": [0.0, 0.0, 0.0], "up": [0.0, 0.0, 1.0]},
        },
        "lens": {},
        "viewport": {},
    })

    forward = as_rotation_matrix(pose.rotation)[:, 2]
    np.testing.assert_allclose(forward, [0.0, -1.0, 0.0], atol=1e-9)


def test_rotation_matrix_in_config():
    pose, _, _ = make_camera_from_config({
        "camera": {"rotation": [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]},
        "lens": {},
        "viewport": {},
    })

    np.testing.assert_allclose(as_rotation_matrix(pose.rotation), np.eye(3))


def test_base_resolution_rescales_fov():
    _, lens, _ = make_camera_from_config({
        "camera": {},
        "lens": {"fov": 60.0, "base_resolution": [1920, 1080]},
        "viewport": {"width": 1024, "height": 768},
    })

    assert lens.fov == pytest.approx(rescale_fov(60.0, (1920, 1080), (1024, 768)))
    assert lens.fov > 60.0


def test_invalid_lens_in_config_raises():
    with pytest.raises(ValueError):
        make_camera_from_config({"camera": {}, "lens": {"near": 10.0, "far": 1.0}, "viewport": {}})
