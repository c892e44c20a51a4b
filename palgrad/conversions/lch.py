"""
CIE XYZ, L*a*b* and LCh(ab) conversions relative to the D65 white point.

All functions are vectorized: the last axis holds the three channels and
any leading shape is preserved.
"""

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_encoding import HUE_360

# Linear sRGB primaries -> XYZ (D65)
LINEAR_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
XYZ_TO_LINEAR_RGB = np.linalg.inv(LINEAR_RGB_TO_XYZ)

D65_WHITE = np.array([0.95047, 1.0, 1.08883])

LAB_EPSILON = 216.0 / 24389.0
LAB_KAPPA = 24389.0 / 27.0


def np_linear_rgb_to_xyz(rgb: NDArray) -> NDArray:
    return np.asarray(rgb, dtype=np.float64) @ LINEAR_RGB_TO_XYZ.T


def np_xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    return np.asarray(xyz, dtype=np.float64) @ XYZ_TO_LINEAR_RGB.T


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    ratio = np.asarray(xyz, dtype=np.float64) / D65_WHITE
    f = np.where(
        ratio > LAB_EPSILON,
        np.cbrt(ratio),
        (LAB_KAPPA * ratio + 16.0) / 116.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    lightness = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return np.stack([lightness, a, b], axis=-1)


def np_lab_to_xyz(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=np.float64)
    lightness, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (lightness + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    fx3 = fx ** 3
    fz3 = fz ** 3
    x = np.where(fx3 > LAB_EPSILON, fx3, (116.0 * fx - 16.0) / LAB_KAPPA)
    y = np.where(lightness > LAB_KAPPA * LAB_EPSILON, fy ** 3, lightness / LAB_KAPPA)
    z = np.where(fz3 > LAB_EPSILON, fz3, (116.0 * fz - 16.0) / LAB_KAPPA)
    return np.stack([x, y, z], axis=-1) * D65_WHITE


def np_lab_to_lch(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=np.float64)
    lightness, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    chroma = np.hypot(a, b)
    hue = np.degrees(np.arctan2(b, a)) % HUE_360
    return np.stack([lightness, chroma, hue], axis=-1)


def np_lch_to_lab(lch: NDArray) -> NDArray:
    lch = np.asarray(lch, dtype=np.float64)
    lightness, chroma, hue = lch[..., 0], lch[..., 1], lch[..., 2]
    radians = np.radians(hue)
    return np.stack([lightness, chroma * np.cos(radians), chroma * np.sin(radians)], axis=-1)


def np_linear_rgb_to_lch(rgb: NDArray) -> NDArray:
    return np_lab_to_lch(np_xyz_to_lab(np_linear_rgb_to_xyz(rgb)))


def np_lch_to_linear_rgb(lch: NDArray) -> NDArray:
    """LCh to linear sRGB. The result is not clipped and may leave [0, 1]."""
    return np_xyz_to_linear_rgb(np_lab_to_xyz(np_lch_to_lab(lch)))
