"""
Step-count policy and discrete stop sampling.

A stepped render shows a finite sequence of colors ("stops") taken from a
continuous gradient. How many stops a caller gets for a requested step
count depends on how many control points the gradient has.
"""

import numpy as np
from numpy import ndarray as NDArray

from ..conversions import np_lch_to_srgb8
from .gradient import Gradient


def step_count(length: int, requested: int) -> int:
    """
    Number of stops to sample for ``requested`` steps over ``length`` points.

    With more than two control points every segment receives ``requested``
    steps and the segments share their endpoints. Two control points are
    special-cased: a single requested step inserts one midpoint, and any
    larger request adds that many colors between the two endpoints.

    Args:
        length: Number of control points, closing duplicate included
        requested: Caller-requested step count, >= 0

    Returns:
        Total number of stops

    Examples:
        >>> step_count(2, 0), step_count(2, 1), step_count(2, 5), step_count(4, 3)
        (2, 3, 7, 10)
    """
    if length < 1:
        raise ValueError("step_count requires at least one control point")
    if requested < 0:
        raise ValueError("Requested step count must be non-negative")

    if length == 2:
        if requested > 1:
            return length + requested
        if requested == 1:
            return length * requested + 1
        return length
    return (length - 1) * requested + 1


def discrete_stops(gradient: Gradient, requested: int) -> NDArray:
    """
    Sample a gradient into 8-bit sRGB stops.

    Both geometries are sampled at ``step_count`` evenly spaced parameters
    covering both ends; with at least one requested step every control point
    lands on a stop. A closed
    (radial) gradient ends on its closing point: the returned sequence is
    ``steps - 1`` distinct stops followed by an exact copy of the first one.

    Returns:
        uint8 array of shape (num_stops, 3)
    """
    steps = step_count(len(gradient), requested)
    stops = np_lch_to_srgb8(gradient.take(steps))

    if gradient.geometry.is_closed and steps > 1:
        # hue wrap at t = 1 may differ from the first stop in the last bit
        stops[-1] = stops[0]
    return stops


def nearest_stop_index(t: NDArray, count: int) -> NDArray:
    """
    Index of the stop nearest to parameter ``t`` among ``count`` stops.

    Halves round away from zero, so t = 0.5 over three stops selects index 1.
    """
    if count < 1:
        raise ValueError("nearest_stop_index requires at least one stop")
    scaled = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0) * (count - 1)
    return np.floor(scaled + 0.5).astype(np.intp)
