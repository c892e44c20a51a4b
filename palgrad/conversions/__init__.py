"""
Palgrad Color Space Conversions
===============================

Vectorized (numpy) conversions between the input color encodings and the
LCh space used for gradient interpolation.

Conversion Functions
--------------------

Transfer function:
    np_srgb_to_linear(rgb)
        Gamma-decode unit sRGB into linear light
    np_linear_to_srgb(rgb)
        Clip and gamma-encode linear light into unit sRGB
    np_unit_to_8bit(values) / np_8bit_to_unit(values)
        Quantize to and from 8-bit channels

Perceptual space:
    np_linear_rgb_to_lch(rgb) / np_lch_to_linear_rgb(lch)
        Linear sRGB <-> XYZ (D65) <-> L*a*b* <-> LCh
    np_hsv_to_unit_rgb(h, s, v)
        HSV to RGB

High-Level API
--------------
    np_to_lch(color, encoding)
        Any input encoding to LCh
    np_lch_to_srgb8(lch)
        LCh to 8-bit gamma-encoded sRGB, the pixel format of every render
    convert(color, from_encoding, to_encoding)
        Scalar converter returning a tuple

Examples
--------
>>> from palgrad.conversions import convert, ColorEncoding
>>> lch = convert((228, 68, 21), ColorEncoding.RGB8, ColorEncoding.LCH)
>>> convert(lch, ColorEncoding.LCH, ColorEncoding.RGB8)
(228, 68, 21)
"""

from .srgb import (
    np_srgb_to_linear,
    np_linear_to_srgb,
    np_unit_to_8bit,
    np_8bit_to_unit,
)
from .lch import (
    np_linear_rgb_to_xyz,
    np_xyz_to_linear_rgb,
    np_xyz_to_lab,
    np_lab_to_xyz,
    np_lab_to_lch,
    np_lch_to_lab,
    np_linear_rgb_to_lch,
    np_lch_to_linear_rgb,
)
from .hsv import np_hsv_to_unit_rgb
from .wrapper import np_to_lch, np_lch_to_srgb, np_lch_to_srgb8, convert

from ..types.color_encoding import ColorEncoding

__all__ = [
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'np_unit_to_8bit',
    'np_8bit_to_unit',

    'np_linear_rgb_to_xyz',
    'np_xyz_to_linear_rgb',
    'np_xyz_to_lab',
    'np_lab_to_xyz',
    'np_lab_to_lch',
    'np_lch_to_lab',
    'np_linear_rgb_to_lch',
    'np_lch_to_linear_rgb',
    'np_hsv_to_unit_rgb',

    'np_to_lch',
    'np_lch_to_srgb',
    'np_lch_to_srgb8',
    'convert',

    'ColorEncoding',
]
