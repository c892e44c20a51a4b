"""
Rasterizers turning a ``Gradient`` into uint8 pixel buffers.

- ``linear_continuous`` / ``linear_stepped``: horizontal strips, RGB
- ``radial_continuous`` / ``radial_stepped``: annulus, RGBA
- ``radial_with_overlay``: full disc with a centered overlay, RGBA
"""

from .compositing import atop
from .linear import LinearSteps, linear_continuous, linear_stepped
from .radial import (
    RadialSteps,
    annulus_mask,
    clamp_inner_radius,
    compute_center,
    overlay_alpha,
    polar_grid,
    radial_continuous,
    radial_stepped,
    radial_with_overlay,
)

__all__ = [
    "atop",
    "LinearSteps",
    "linear_continuous",
    "linear_stepped",
    "RadialSteps",
    "annulus_mask",
    "clamp_inner_radius",
    "compute_center",
    "overlay_alpha",
    "polar_grid",
    "radial_continuous",
    "radial_stepped",
    "radial_with_overlay",
]
