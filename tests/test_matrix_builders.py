import math

import numpy as np
import pytest

from screenspace.camera.projection import build_projection_matrix
from screenspace.camera.utils import invert_transform, transform_point
from screenspace.camera.view import build_camera_to_world_matrix, build_view_matrix
from screenspace.camera.viewport import build_viewport_matrix
from screenspace.utils.rotation import quaternion_from_axis_angle, quaternion_to_rotation_matrix


# --- view ---------------------------------------------------------------


def test_view_matrix_times_its_inverse_is_identity():
    q = quaternion_from_axis_angle((0.3, 1.0, 0.2), 73.0)
    view = build_view_matrix((1.0, 2.0, 3.0), q)

    np.testing.assert_allclose(view @ invert_transform(view), np.eye(4), atol=1e-12)


def test_view_matrix_flips_z_for_identity_rotation():
    view = build_view_matrix((0.0, 0.0, -10.0), (0.0, 0.0, 0.0, 1.0))

    expected = np.array([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, -1.0, -10.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    np.testing.assert_allclose(view, expected, atol=1e-12)


def test_view_matrix_is_inverse_of_camera_to_world():
    q = quaternion_from_axis_angle((1.0, 0.0, 0.0), -25.0)
    c2w = build_camera_to_world_matrix((4.0, 5.0, 6.0), q)

    np.testing.assert_allclose(build_view_matrix((4.0, 5.0, 6.0), q) @ c2w, np.eye(4), atol=1e-12)


def test_rotated_camera_sees_point_ahead_on_negative_z():
    q = quaternion_from_axis_angle((0.0, 1.0, 0.0), 90.0)
    view = build_view_matrix((0.0, 0.0, 0.0), q)

    p, _ = transform_point(view, (5.0, 0.0, 0.0))
    np.testing.assert_allclose(p, [0.0, 0.0, -5.0], atol=1e-12)


def test_view_matrix_accepts_rotation_matrix():
    q = quaternion_from_axis_angle((0.0, 1.0, 1.0), 50.0)
    R = quaternion_to_rotation_matrix(q)

    np.testing.assert_allclose(
        build_view_matrix((1.0, 1.0, 1.0), R),
        build_view_matrix((1.0, 1.0, 1.0), q),
    )


# --- projection ---------------------------------------------------------


def test_projection_matrix_elements():
    P = build_projection_matrix(60.0, 1920, 1080, 0.3, 1000.0)
    f = 1.0 / math.tan(math.radians(30.0))

    assert P[0, 0] == pytest.approx(f / (1920 / 1080))
    assert P[1, 1] == pytest.approx(f)
    assert P[2, 2] == pytest.approx((1000.0 + 0.3) / (0.3 - 1000.0))
    assert P[2, 3] == pytest.approx(2.0 * 1000.0 * 0.3 / (0.3 - 1000.0))
    assert P[3, 2] == -1.0
    assert P[3, 3] == 0.0


def test_projection_maps_clip_planes_to_ndc_depth_range():
    P = build_projection_matrix(45.0, 800, 600, 0.5, 50.0)

    near_point, _ = transform_point(P, (0.0, 0.0, -0.5))
    far_point, _ = transform_point(P, (0.0, 0.0, -50.0))

    assert near_point[2] == pytest.approx(-1.0)
    assert far_point[2] == pytest.approx(1.0)


@pytest.mark.parametrize(
    "fov, width, height, near, far",
    [
        (60.0, 1920, 1080, 10.0, 10.0),
        (60.0, 1920, 1080, 10.0, 1.0),
        (60.0, 1920, 1080, 0.0, 100.0),
        (60.0, 1920, 1080, -1.0, 100.0),
        (60.0, 1920, 0, 0.3, 100.0),
        (0.0, 1920, 1080, 0.3, 100.0),
        (180.0, 1920, 1080, 0.3, 100.0),
        (float("nan"), 1920, 1080, 0.3, 100.0),
    ],
)
def test_projection_rejects_degenerate_inputs(fov, width, height, near, far):
    with pytest.raises(ValueError):
        build_projection_matrix(fov, width, height, near, far)


# --- viewport -----------------------------------------------------------


def test_viewport_matrix_elements():
    V = build_viewport_matrix(1920, 1080, 0.3, 1000.0)

    expected = np.array([
        [960.0, 0.0, 0.0, 960.0],
        [0.0, 540.0, 0.0, 540.0],
        [0.0, 0.0, 499.85, 500.15],
        [0.0, 0.0, 0.0, 1.0],
    ])
    np.testing.assert_allclose(V, expected)


def test_viewport_maps_ndc_corners_to_pixels_and_clip_range():
    V = build_viewport_matrix(1024, 768, 2.0, 10.0)

    lower, _ = transform_point(V, (-1.0, -1.0, -1.0))
    upper, _ = transform_point(V, (1.0, 1.0, 1.0))

    np.testing.assert_allclose(lower, [0.0, 0.0, 2.0])
    np.testing.assert_allclose(upper, [1024.0, 768.0, 10.0])


def test_viewport_rejects_zero_size():
    with pytest.raises(ValueError):
        build_viewport_matrix(0, 768, 0.3, 100.0)
