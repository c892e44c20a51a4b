"""
Palgrad - Perceptual Gradients and Palettes
===========================================

Renders color gradients, linear strips and radial discs, from a short list
of colors. Interpolation happens in LCh so equal parameter steps look like
equal color steps.

Key Features
------------
- Color literals as 8-bit RGB, unit RGB, HSV or LCh
- Continuous and stepped variants of linear and radial gradients
- Hue interpolation along the shorter arc
- Radial overlay composited "atop" the gradient in linear light
- PNG output through Pillow and a ``palgrad`` command line

Quick Start
-----------
>>> from palgrad import RenderConfig, render, parse_colors, ColorEncoding, save_image
>>>
>>> colors = parse_colors("228,68,21;236,228,38;46,137,209", ColorEncoding.RGB8)
>>> config = RenderConfig(colors=tuple(colors), size=256, stepped=True, steps=4)
>>> result = render(config)
>>> result.buffer.shape
(256, 256, 4)
>>> save_image(result.buffer, "palette.png")

Modules
-------
- conversions: sRGB, XYZ, Lab and LCh conversions
- colors: immutable LCh colors and literal parsing
- gradients: gradient evaluation and the step-count policy
- render: linear and radial rasterizers, overlay compositing
- config / renderer / output: configuration, dispatch and file output
"""

__version__ = "0.3.0"

from .errors import PalgradError, ParseError, ClockError, EncodeError
from .types.color_encoding import ColorEncoding
from .colors import ColorLCh, parse_color, parse_colors
from .gradients import GeometryKind, Gradient, step_count, discrete_stops, nearest_stop_index
from .render import (
    atop,
    linear_continuous,
    linear_stepped,
    radial_continuous,
    radial_stepped,
    radial_with_overlay,
)
from .config import RenderConfig, RenderKind
from .renderer import RenderResult, render
from .output import generate_filename, save_image, format_hex_colors

__all__ = [
    "__version__",
    # errors
    "PalgradError",
    "ParseError",
    "ClockError",
    "EncodeError",
    # colors
    "ColorEncoding",
    "ColorLCh",
    "parse_color",
    "parse_colors",
    # gradients
    "GeometryKind",
    "Gradient",
    "step_count",
    "discrete_stops",
    "nearest_stop_index",
    # rasterizers
    "atop",
    "linear_continuous",
    "linear_stepped",
    "radial_continuous",
    "radial_stepped",
    "radial_with_overlay",
    # rendering
    "RenderConfig",
    "RenderKind",
    "RenderResult",
    "render",
    # output
    "generate_filename",
    "save_image",
    "format_hex_colors",
]
