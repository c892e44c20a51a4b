from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..gradients import Gradient, discrete_stops


class LinearSteps(NamedTuple):
    stops: NDArray
    buffer: Optional[NDArray]


def linear_continuous(gradient: Gradient, width: int, height: int) -> NDArray:
    """
    Continuous horizontal strip.

    Column ``x`` shows the gradient at ``t = x / width``; all rows are equal.

    Returns:
        uint8 array of shape (height, width, 3)
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive integers")

    columns = gradient.get_rgb8(np.arange(width) / width)
    return np.ascontiguousarray(np.broadcast_to(columns, (height, width, 3)))


def linear_stepped(
    gradient: Gradient,
    requested: int,
    swatch_size: Tuple[int, int],
    build_buffer: bool = True,
) -> LinearSteps:
    """
    Row of uniform swatches, one per discrete stop.

    Args:
        gradient: Open gradient to sample
        requested: Caller step count, expanded through ``step_count``
        swatch_size: (width, height) of one swatch in pixels
        build_buffer: When False only the stops are computed

    Returns:
        ``LinearSteps`` with the (n, 3) stops and a
        (swatch_height, swatch_width * n, 3) buffer or None
    """
    swatch_width, swatch_height = swatch_size
    if swatch_width <= 0 or swatch_height <= 0:
        raise ValueError(f"Swatch dimensions cannot be 0 sized: {swatch_width}x{swatch_height}")

    stops = discrete_stops(gradient, requested)
    if not build_buffer:
        return LinearSteps(stops, None)

    row = np.repeat(stops, swatch_width, axis=0)
    buffer = np.ascontiguousarray(np.broadcast_to(row, (swatch_height,) + row.shape))
    return LinearSteps(stops, buffer)
