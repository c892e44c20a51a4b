import numpy as np
import pytest

from palgrad.conversions import (
    ColorEncoding,
    convert,
    np_lch_to_linear_rgb,
    np_lch_to_srgb8,
    np_linear_rgb_to_lch,
    np_to_lch,
)
from samples import samples_rgb8_lch


def test_known_lch_values():
    for rgb, (l_exp, c_exp, h_exp) in samples_rgb8_lch.items():
        lightness, chroma, hue = np_to_lch(rgb, ColorEncoding.RGB8)

        assert abs(lightness - l_exp) < 0.05
        assert abs(chroma - c_exp) < 0.1
        if h_exp is not None:
            assert abs(hue - h_exp) < 0.1


def test_hue_is_in_degrees_range():
    lch = np_to_lch(np.array([[255, 0, 128], [10, 200, 255], [90, 0, 255]]), ColorEncoding.RGB8)
    assert np.all(lch[:, 2] >= 0.0)
    assert np.all(lch[:, 2] < 360.0)


def test_linear_rgb_round_trip_array():
    rng = np.random.default_rng(7)
    rgb = rng.random((4, 5, 3))

    back = np_lch_to_linear_rgb(np_linear_rgb_to_lch(rgb))

    np.testing.assert_allclose(back, rgb, atol=1e-9)


def test_lch_passes_through():
    assert np.allclose(np_to_lch((50.0, 20.0, 200.0), ColorEncoding.LCH), (50.0, 20.0, 200.0))


def test_out_of_gamut_is_clipped_to_8bit():
    # very high chroma cannot be shown in sRGB
    rgb = np_lch_to_srgb8(np.array([60.0, 250.0, 140.0]))
    assert rgb.dtype == np.uint8
    assert rgb.shape == (3,)


def test_convert_returns_tuple():
    result = convert((228, 68, 21), ColorEncoding.RGB8, ColorEncoding.LCH)
    assert isinstance(result, tuple)
    assert len(result) == 3


def test_convert_rejects_hsv_target():
    with pytest.raises(ValueError):
        convert((50.0, 20.0, 200.0), ColorEncoding.LCH, ColorEncoding.HSV)
