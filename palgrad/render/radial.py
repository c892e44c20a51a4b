"""
Radial (angular) gradient rasterization.

The gradient parameter of a pixel is its angle around the image center,
measured from the positive x axis toward positive y (downward in image
space), shifted by ``angle_offset`` and scaled to [0, 1].
"""

from __future__ import annotations

import math
import warnings
from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..conversions import np_linear_to_srgb, np_unit_to_8bit
from ..gradients import Gradient, discrete_stops, nearest_stop_index
from .compositing import atop

TAU = 2.0 * math.pi
INNER_RADIUS_MAX = 0.49


class RadialSteps(NamedTuple):
    stops: NDArray
    buffer: Optional[NDArray]


def clamp_inner_radius(radius_inner: float) -> float:
    """Keep the inner radius factor inside [0, 0.49] so the annulus never inverts."""
    if radius_inner >= 0.5:
        warnings.warn(
            f"Inner radius {radius_inner} must be below 0.5; using {INNER_RADIUS_MAX}",
            UserWarning,
            stacklevel=2,
        )
        return INNER_RADIUS_MAX
    if radius_inner < 0.0:
        warnings.warn(
            f"Inner radius {radius_inner} must not be negative; using 0.0",
            UserWarning,
            stacklevel=2,
        )
        return 0.0
    return radius_inner


def compute_center(size: int) -> Tuple[float, float]:
    """Pixel center of a square image of side ``size``."""
    center = size / 2.0 - 1.0
    return center, center


def polar_grid(size: int, angle_offset: float = 0.0) -> Tuple[NDArray, NDArray]:
    """
    Squared distance and normalized angle of every pixel.

    The raw ``atan2`` angle is moved into [0, 2π), offset by
    ``angle_offset`` and reduced modulo 2π only when it exceeds 2π.

    Returns:
        (dist_squared, t) arrays of shape (size, size) where ``t`` is the
        angle divided by 2π
    """
    if size <= 0:
        raise ValueError("size must be a positive integer")

    cx, cy = compute_center(size)
    y_indices, x_indices = np.indices((size, size), dtype=np.float64)
    dx = x_indices - cx
    dy = y_indices - cy
    dist_squared = dx * dx + dy * dy

    angle = np.arctan2(dy, dx)
    angle = np.where(angle < 0.0, angle + TAU, angle)
    angle = angle + angle_offset
    angle = np.where(angle > TAU, np.mod(angle, TAU), angle)
    return dist_squared, angle / TAU


def annulus_mask(dist_squared: NDArray, size: int, radius_inner: float) -> NDArray:
    """Pixels with ``(size * radius_inner)² <= d² <= (size / 2)²``."""
    rad_squared = (size * 0.5) ** 2
    rad_inner = (size * radius_inner) ** 2
    return (dist_squared >= rad_inner) & (dist_squared <= rad_squared)


def _rgba_canvas(size: int) -> NDArray:
    return np.zeros((size, size, 4), dtype=np.uint8)


def radial_continuous(
    gradient: Gradient,
    size: int,
    radius_inner: float = 0.05,
    angle_offset: float = 0.0,
) -> NDArray:
    """
    Continuous angular gradient painted on an annulus.

    Returns:
        uint8 RGBA array of shape (size, size, 4); pixels outside the
        annulus are fully transparent
    """
    radius_inner = clamp_inner_radius(radius_inner)
    dist_squared, t = polar_grid(size, angle_offset)
    mask = annulus_mask(dist_squared, size, radius_inner)

    buffer = _rgba_canvas(size)
    buffer[mask, :3] = gradient.get_rgb8(t[mask])
    buffer[mask, 3] = 255
    return buffer


def radial_stepped(
    gradient: Gradient,
    requested: int,
    size: int,
    radius_inner: float = 0.05,
    angle_offset: float = 0.0,
    build_buffer: bool = True,
) -> RadialSteps:
    """
    Stepped angular gradient: each pixel takes the nearest discrete stop.

    Stops come from the closed sequence returned by ``discrete_stops``;
    its trailing copy of the first stop is selected when the angle rounds
    to the last index.
    """
    stops = discrete_stops(gradient, requested)
    if not build_buffer:
        return RadialSteps(stops, None)

    radius_inner = clamp_inner_radius(radius_inner)
    dist_squared, t = polar_grid(size, angle_offset)
    mask = annulus_mask(dist_squared, size, radius_inner)

    buffer = _rgba_canvas(size)
    buffer[mask, :3] = stops[nearest_stop_index(t[mask], len(stops))]
    buffer[mask, 3] = 255
    return RadialSteps(stops, buffer)


def overlay_alpha(dist_squared: NDArray, size: int, overlay_factor: float) -> NDArray:
    """Overlay opacity: ``overlay_factor`` at the center, falling linearly in d² to 0 at the edge."""
    rad_squared = (size * 0.5) ** 2
    return (1.0 - dist_squared / rad_squared) * overlay_factor


def radial_with_overlay(
    gradient: Gradient,
    size: int,
    overlay: Sequence[float],
    overlay_factor: float = 0.9,
    angle_offset: float = 0.0,
) -> NDArray:
    """
    Continuous angular gradient on a full disc with a centered overlay.

    Args:
        gradient: Closed gradient
        size: Side of the square image
        overlay: Overlay color as linear-light unit RGB
        overlay_factor: Overlay opacity at the center
        angle_offset: Added to every pixel angle, in radians

    Returns:
        uint8 RGBA array of shape (size, size, 4)
    """
    dist_squared, t = polar_grid(size, angle_offset)
    mask = dist_squared <= (size * 0.5) ** 2

    num = int(mask.sum())
    base = np.concatenate([gradient.get_linear_rgb(t[mask]), np.ones((num, 1))], axis=-1)

    top = np.empty((num, 4), dtype=np.float64)
    top[:, :3] = np.asarray(overlay, dtype=np.float64)[:3]
    top[:, 3] = overlay_alpha(dist_squared[mask], size, overlay_factor)

    blended = atop(top, base)

    buffer = _rgba_canvas(size)
    buffer[mask, :3] = np_unit_to_8bit(np_linear_to_srgb(blended[:, :3]))
    buffer[mask, 3] = np_unit_to_8bit(blended[:, 3])
    return buffer
