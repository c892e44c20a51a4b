"""
Gradient sampling: continuous evaluation and discrete stops.

>>> from palgrad.gradients import Gradient, GeometryKind, discrete_stops
>>> from palgrad.colors import parse_colors, ColorEncoding
>>> colors = parse_colors("228,68,21;236,228,38;46,137,209", ColorEncoding.RGB8)
>>> discrete_stops(Gradient(colors), 2).shape
(5, 3)
"""

from .geometry import GeometryKind
from .gradient import Gradient
from .steps import step_count, discrete_stops, nearest_stop_index

__all__ = [
    "GeometryKind",
    "Gradient",
    "step_count",
    "discrete_stops",
    "nearest_stop_index",
]
