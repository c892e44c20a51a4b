from __future__ import annotations
from typing import ClassVar, Tuple

import numpy as np

from ..conversions import np_lch_to_srgb8, np_lch_to_linear_rgb, np_to_lch
from ..types.color_encoding import ColorEncoding, HUE_360
from ..types.color_types import ColorValue


class ColorLCh:
    """
    Immutable perceptual color (lightness, chroma, hue in degrees).

    Lightness is clamped to [0, 100], chroma to [0, inf) and hue wraps into
    [0, 360).
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    maxima: ClassVar[Tuple[float, float, float]] = (100.0, float('inf'), HUE_360)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue) -> None:
        if isinstance(value, ColorLCh):
            value = value.value
        arr = np.asarray(value, dtype=np.float64)
        if arr.shape != (self.num_channels,):
            raise ValueError(f"ColorLCh expects 3 channels, got shape {arr.shape}")

        lightness = min(max(float(arr[0]), 0.0), self.maxima[0])
        chroma = max(float(arr[1]), 0.0)
        hue = float(arr[2]) % HUE_360

        self._value = (lightness, chroma, hue)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_encoding(cls, value: ColorValue, encoding: ColorEncoding) -> ColorLCh:
        """Build a color from a numeric triple in any input encoding."""
        return cls(np_to_lch(value, encoding))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, float, float]:
        return self._value

    @property
    def lightness(self) -> float:
        return self._value[0]

    @property
    def chroma(self) -> float:
        return self._value[1]

    @property
    def hue(self) -> float:
        return self._value[2]

    def to_linear_rgb(self) -> Tuple[float, float, float]:
        return tuple(float(c) for c in np_lch_to_linear_rgb(np.array(self._value)))

    def to_rgb8(self) -> Tuple[int, int, int]:
        return tuple(int(c) for c in np_lch_to_srgb8(np.array(self._value)))

    def __array__(self, dtype=None, copy=None):
        return np.array(self._value, dtype=dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorLCh):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return "ColorLCh(({:.4f}, {:.4f}, {:.4f}))".format(*self._value)
