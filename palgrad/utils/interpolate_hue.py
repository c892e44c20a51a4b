"""Hue interpolation along the shorter arc of the color wheel."""

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_encoding import HUE_360


def shortest_hue_delta(h0: NDArray, h1: NDArray) -> NDArray:
    """Signed difference ``h1 - h0`` wrapped into (-180, 180]."""
    delta = (np.asarray(h1, dtype=np.float64) - np.asarray(h0, dtype=np.float64)) % HUE_360
    return np.where(delta > HUE_360 / 2, delta - HUE_360, delta)


def interpolate_hue(h0: NDArray, h1: NDArray, u: NDArray) -> NDArray:
    """
    Interpolate hue values along the shortest path.

    Args:
        h0: Start hue(s) in degrees
        h1: End hue(s) in degrees
        u: Interpolation coefficients in [0, 1]

    Returns:
        Interpolated hue values in [0, 360)
    """
    h0 = np.asarray(h0, dtype=np.float64) % HUE_360
    return (h0 + np.asarray(u, dtype=np.float64) * shortest_hue_delta(h0, h1)) % HUE_360


def lerp(a: NDArray, b: NDArray, t: NDArray) -> NDArray:
    """Linear interpolation between a and b."""
    return a * (1 - t) + b * t
