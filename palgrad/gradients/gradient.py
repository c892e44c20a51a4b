from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy import ndarray as NDArray

from ..colors import ColorLCh
from ..conversions import np_lch_to_linear_rgb, np_lch_to_srgb8
from ..utils.interpolate_hue import interpolate_hue, lerp
from .geometry import GeometryKind

ColorInput = Union[ColorLCh, Sequence[float], NDArray]


class Gradient:
    """
    Piecewise-linear gradient over a sequence of LCh control points.

    The N control points are placed evenly on [0, 1], giving N - 1 segments.
    Lightness and chroma are interpolated linearly inside each segment and
    hue follows the shorter arc between its two endpoints.

    For ``GeometryKind.RADIAL`` the first color is appended once more so the
    gradient ends where it started; the caller's sequence is left untouched.
    """

    def __init__(
        self,
        colors: Sequence[ColorInput],
        geometry: GeometryKind = GeometryKind.LINEAR,
    ) -> None:
        if len(colors) == 0:
            raise ValueError("A gradient requires at least one control point")

        self.geometry = GeometryKind(geometry)
        points = np.array([ColorLCh(c).value for c in colors], dtype=np.float64)
        if self.geometry.is_closed:
            points = np.concatenate([points, points[:1]], axis=0)
        points.setflags(write=False)
        self._points = points

    @property
    def control_points(self) -> NDArray:
        """Read-only (N, 3) array of control points, closing point included."""
        return self._points

    def __len__(self) -> int:
        return len(self._points)

    def get(self, t: Union[float, NDArray]) -> NDArray:
        """
        Evaluate the gradient.

        Args:
            t: Scalar or array of parameters; values outside [0, 1] are clamped

        Returns:
            Array of shape ``np.shape(t) + (3,)`` holding (L, C, h)
        """
        t = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
        num_segments = len(self._points) - 1
        if num_segments == 0:
            return np.broadcast_to(self._points[0], t.shape + (3,)).copy()

        position = t * num_segments
        index = np.minimum(np.floor(position).astype(np.intp), num_segments - 1)
        u = position - index

        start = self._points[index]
        end = self._points[index + 1]

        lightness = lerp(start[..., 0], end[..., 0], u)
        chroma = lerp(start[..., 1], end[..., 1], u)
        hue = interpolate_hue(start[..., 2], end[..., 2], u)
        return np.stack([lightness, chroma, hue], axis=-1)

    __call__ = get

    def take(self, n: int) -> NDArray:
        """``n`` evenly spaced samples from t = 0 to t = 1 inclusive."""
        if n < 1:
            raise ValueError("take() requires at least one sample")
        if n == 1:
            return self.get(np.zeros(1))
        return self.get(np.linspace(0.0, 1.0, n))

    def get_linear_rgb(self, t: Union[float, NDArray]) -> NDArray:
        """Evaluate in linear light; the result may leave [0, 1]."""
        return np_lch_to_linear_rgb(self.get(t))

    def get_rgb8(self, t: Union[float, NDArray]) -> NDArray:
        """Evaluate as gamma-encoded 8-bit sRGB."""
        return np_lch_to_srgb8(self.get(t))

    def __repr__(self) -> str:
        return f"Gradient({len(self._points)} points, geometry={self.geometry.value!r})"
