from typing import Callable, Dict

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_encoding import ColorEncoding
from ..types.color_types import ColorValue, element_to_array
from .hsv import np_hsv_to_unit_rgb
from .lch import np_lch_to_linear_rgb, np_linear_rgb_to_lch
from .srgb import np_8bit_to_unit, np_linear_to_srgb, np_srgb_to_linear, np_unit_to_8bit


def _rgb8_to_linear(color: NDArray) -> NDArray:
    return np_srgb_to_linear(np_8bit_to_unit(color))


def _unit_rgb_to_linear(color: NDArray) -> NDArray:
    return np_srgb_to_linear(color)


def _hsv_to_linear(color: NDArray) -> NDArray:
    # HSV components are taken as linear light, no transfer function applied
    return np_hsv_to_unit_rgb(color[..., 0], color[..., 1] / 100.0, color[..., 2] / 100.0)


TO_LINEAR_RGB: Dict[ColorEncoding, Callable[[NDArray], NDArray]] = {
    ColorEncoding.RGB8: _rgb8_to_linear,
    ColorEncoding.UNIT_RGB: _unit_rgb_to_linear,
    ColorEncoding.HSV: _hsv_to_linear,
}


def np_to_lch(color: ColorValue, encoding: ColorEncoding) -> NDArray:
    """
    Convert color values in any input encoding to LCh.

    Args:
        color: Array or tuple whose last axis holds the three channels
        encoding: Encoding of ``color``

    Returns:
        Float array of the same shape holding (L, C, h)
    """
    encoding = ColorEncoding(encoding)
    arr = element_to_array(color)
    if encoding == ColorEncoding.LCH:
        return arr.copy()
    return np_linear_rgb_to_lch(TO_LINEAR_RGB[encoding](arr))


def np_lch_to_srgb(lch: NDArray) -> NDArray:
    """LCh to gamma-encoded unit sRGB, clipped to the displayable range."""
    return np_linear_to_srgb(np_lch_to_linear_rgb(lch))


def np_lch_to_srgb8(lch: NDArray) -> NDArray:
    """LCh to gamma-encoded 8-bit sRGB."""
    return np_unit_to_8bit(np_lch_to_srgb(lch))


def convert(color: ColorValue, from_encoding: ColorEncoding, to_encoding: ColorEncoding = ColorEncoding.RGB8) -> tuple:
    """
    Scalar convenience converter between encodings, routed through LCh.

    Only ``RGB8``, ``UNIT_RGB`` and ``LCH`` are accepted as targets.
    """
    to_encoding = ColorEncoding(to_encoding)
    lch = np_to_lch(color, from_encoding)
    if to_encoding == ColorEncoding.LCH:
        result = lch
    elif to_encoding == ColorEncoding.UNIT_RGB:
        result = np_lch_to_srgb(lch)
    elif to_encoding == ColorEncoding.RGB8:
        result = np_lch_to_srgb8(lch).astype(int)
    else:
        raise ValueError(f"Unsupported target encoding: {to_encoding.value}")
    return tuple(result.flat)
