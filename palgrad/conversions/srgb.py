"""sRGB transfer function and 8-bit quantization."""

import numpy as np
from numpy import ndarray as NDArray

SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308


def np_srgb_to_linear(rgb: NDArray) -> NDArray:
    """Gamma-decode unit sRGB values into linear light."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.where(
        rgb <= SRGB_DECODE_THRESHOLD,
        rgb / 12.92,
        ((rgb + 0.055) / 1.055) ** 2.4,
    )


def np_linear_to_srgb(rgb: NDArray) -> NDArray:
    """
    Gamma-encode linear light into unit sRGB.

    Values are clipped to [0, 1] first, so out-of-gamut colors land on the
    nearest displayable channel value.
    """
    rgb = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0)
    return np.where(
        rgb <= SRGB_ENCODE_THRESHOLD,
        rgb * 12.92,
        1.055 * rgb ** (1.0 / 2.4) - 0.055,
    )


def np_unit_to_8bit(values: NDArray) -> NDArray:
    """Quantize unit-interval channel values to uint8."""
    scaled = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0) * 255.0
    return np.floor(scaled + 0.5).astype(np.uint8)


def np_8bit_to_unit(values: NDArray) -> NDArray:
    return np.asarray(values, dtype=np.float64) / 255.0
