"""
Palgrad Color Classes
=====================

Immutable perceptual colors and the adapter that builds them from the
accepted literal encodings.

Encodings
---------
- RGB8:     ``R,G,B`` integers 0-255, gamma-decoded before conversion
- UNIT_RGB: ``R,G,B`` floats 0.0-1.0, gamma-decoded before conversion
- HSV:      ``H,S,V`` with H in [0, 360) and S, V as percentages
- LCH:      ``L,C,h`` with L, C in [0, 100] and h in [0, 360)

>>> from palgrad.colors import parse_colors, ColorEncoding
>>> parse_colors("228,68,21;236,228,38", ColorEncoding.RGB8)
[ColorLCh(...), ColorLCh(...)]
"""

from .color_lch import ColorLCh
from .parse import parse_color, parse_colors, parse_components
from ..types.color_encoding import ColorEncoding

__all__ = ['ColorEncoding', 'ColorLCh', 'parse_color', 'parse_colors', 'parse_components']
