from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorTriple = Tuple[Scalar, Scalar, Scalar]
ColorValue = Union[ColorTriple, ndarray]


def element_to_array(element: ColorValue) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    return np.asarray(element, dtype=np.float64)
