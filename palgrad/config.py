"""
Render configuration.

A ``RenderConfig`` is built once per render, validated on construction and
never modified afterwards. The module-level constants are the defaults of
the command-line tool.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Tuple

from .colors import ColorLCh
from .gradients import GeometryKind
from .render.radial import clamp_inner_radius

MIN_COLORS = 2
MAX_COLORS = 32

DEFAULT_COLORS = "228,68,21;236,228,38;46,137,209"
DEFAULT_SIZE = 512
DEFAULT_RADIUS_INNER = 0.05
DEFAULT_STEPS = 11
DEFAULT_OVERLAY = (120, 120, 120)
DEFAULT_OVERLAY_FACTOR = 0.9
DEFAULT_ANGLE_OFFSET = math.pi / 2
DEFAULT_SWATCH_SIZE = (40, 40)


class RenderKind(str, Enum):
    LINEAR_CONTINUOUS = "linear_continuous"
    LINEAR_STEPPED = "linear_stepped"
    RADIAL_CONTINUOUS = "radial_continuous"
    RADIAL_STEPPED = "radial_stepped"
    RADIAL_OVERLAY = "radial_overlay"

    @property
    def is_stepped(self) -> bool:
        return self in (RenderKind.LINEAR_STEPPED, RenderKind.RADIAL_STEPPED)


@dataclass(frozen=True)
class RenderConfig:
    """
    Everything one render needs.

    ``stepped`` selects the discrete variant and ``overlay`` (8-bit sRGB)
    selects the overlay variant of a radial render; stepping wins when both
    are set. ``radius_inner`` is clamped into [0, 0.49] on construction.
    """
    colors: Tuple[ColorLCh, ...]
    geometry: GeometryKind = GeometryKind.RADIAL
    size: int = DEFAULT_SIZE
    swatch_size: Tuple[int, int] = DEFAULT_SWATCH_SIZE
    steps: int = DEFAULT_STEPS
    stepped: bool = False
    radius_inner: float = DEFAULT_RADIUS_INNER
    angle_offset: float = DEFAULT_ANGLE_OFFSET
    overlay: Optional[Tuple[int, int, int]] = None
    overlay_factor: float = DEFAULT_OVERLAY_FACTOR
    print_colors: bool = False
    no_file: bool = False
    output: Optional[Path] = field(default=None)

    def __post_init__(self) -> None:
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "colors", tuple(ColorLCh(c) for c in self.colors))
        object.__setattr__(self, "geometry", GeometryKind(self.geometry))
        object.__setattr__(self, "swatch_size", tuple(self.swatch_size))
        if self.output is not None:
            object.__setattr__(self, "output", Path(self.output))

        if not MIN_COLORS <= len(self.colors) <= MAX_COLORS:
            raise ValueError(
                f"Between {MIN_COLORS} and {MAX_COLORS} colors are required, got {len(self.colors)}"
            )
        if self.size <= 0:
            raise ValueError(f"Size must be a positive integer, got {self.size}")
        if len(self.swatch_size) != 2 or min(self.swatch_size) <= 0:
            raise ValueError(
                "Swatch dimensions cannot be 0 sized: {}x{}".format(*self.swatch_size)
            )
        if self.steps < 0:
            raise ValueError(f"Steps must be non-negative, got {self.steps}")
        if not 0.0 <= self.overlay_factor <= 1.0:
            raise ValueError(f"Overlay factor must be in [0, 1], got {self.overlay_factor}")
        if self.overlay is not None and self.geometry is GeometryKind.LINEAR:
            raise ValueError("An overlay can only be applied to a radial gradient")

        object.__setattr__(self, "radius_inner", clamp_inner_radius(self.radius_inner))

    @classmethod
    def from_colors(cls, colors: Sequence[ColorLCh], **kwargs) -> RenderConfig:
        return cls(colors=tuple(colors), **kwargs)

    @property
    def kind(self) -> RenderKind:
        if self.geometry is GeometryKind.LINEAR:
            return RenderKind.LINEAR_STEPPED if self.stepped else RenderKind.LINEAR_CONTINUOUS
        if self.stepped:
            return RenderKind.RADIAL_STEPPED
        if self.overlay is not None:
            return RenderKind.RADIAL_OVERLAY
        return RenderKind.RADIAL_CONTINUOUS
