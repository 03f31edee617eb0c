import math

import pytest

from screenspace.camera.fov import (
    compute_tan_half_fov,
    fov_from_focal_length,
    get_aspect,
    horizontal_fov,
    rescale_fov,
    vertical_fov,
)


def test_aspect_of_1024x768():
    assert get_aspect(1024, 768) == pytest.approx(1.3333333333)


def test_aspect_rejects_zero_height():
    with pytest.raises(ValueError):
        get_aspect(1024, 0)


def test_horizontal_fov_matches_hand_computed_value():
    assert horizontal_fov(90.0, get_aspect(1024, 768)) == pytest.approx(106.26, abs=1e-2)
    assert horizontal_fov(90.0, 4.0 / 3.0) == pytest.approx(math.degrees(2.0 * math.atan(4.0 / 3.0)))


def test_square_aspect_keeps_fov():
    assert horizontal_fov(70.0, 1.0) == pytest.approx(70.0)
    assert vertical_fov(70.0, 1.0) == pytest.approx(70.0)


@pytest.mark.parametrize("fov", [1.0, 30.0, 60.0, 90.0, 120.0, 179.0])
@pytest.mark.parametrize("aspect", [0.5, 1.0, 16.0 / 9.0, 3.0])
def test_vertical_inverts_horizontal(fov, aspect):
    assert vertical_fov(horizontal_fov(fov, aspect), aspect) == pytest.approx(fov)


@pytest.mark.parametrize("resolution", [(1920, 1080), (1024, 768), (1080, 1920)])
def test_rescale_to_same_resolution_is_identity(resolution):
    assert rescale_fov(60.0, resolution, resolution) == pytest.approx(60.0)


def test_rescale_to_same_aspect_is_identity():
    assert rescale_fov(60.0, (1920, 1080), (1280, 720)) == pytest.approx(60.0)


def test_rescale_preserves_horizontal_fov():
    rescaled = rescale_fov(60.0, (1920, 1080), (1080, 1920))

    assert rescaled > 60.0
    assert horizontal_fov(rescaled, 1080 / 1920) == pytest.approx(horizontal_fov(60.0, 1920 / 1080))


def test_rescale_rejects_zero_height_resolution():
    with pytest.raises(ValueError):
        rescale_fov(60.0, (1920, 1080), (1920, 0))


def test_tan_half_fov():
    tanx, tany = compute_tan_half_fov(90.0, 2.0)

    assert tany == pytest.approx(1.0)
    assert tanx == pytest.approx(2.0)


def test_fov_from_focal_length():
    assert fov_from_focal_length(500.0, 1000.0) == pytest.approx(90.0)

    with pytest.raises(ValueError):
        fov_from_focal_length(0.0, 1000.0)


@pytest.mark.parametrize("convert", [horizontal_fov, vertical_fov])
@pytest.mark.parametrize("fov", [0.0, -10.0, 180.0, 200.0, float("nan")])
def test_conversions_reject_out_of_range_fov(convert, fov):
    with pytest.raises(ValueError):
        convert(fov, 1.0)


@pytest.mark.parametrize("convert", [horizontal_fov, vertical_fov])
@pytest.mark.parametrize("aspect", [0.0, -1.0, float("inf")])
def test_conversions_reject_non_positive_aspect(convert, aspect):
    with pytest.raises(ValueError):
        convert(60.0, aspect)
