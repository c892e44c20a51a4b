from __future__ import annotations

from typing import NamedTuple, Optional

from numpy import ndarray as NDArray

from .config import RenderConfig, RenderKind
from .conversions import np_8bit_to_unit, np_srgb_to_linear
from .gradients import Gradient
from .render import (
    linear_continuous,
    linear_stepped,
    radial_continuous,
    radial_stepped,
    radial_with_overlay,
)


class RenderResult(NamedTuple):
    kind: RenderKind
    buffer: Optional[NDArray]
    stops: Optional[NDArray]

    @property
    def mode(self) -> str:
        """PIL image mode of ``buffer``."""
        if self.kind in (RenderKind.LINEAR_CONTINUOUS, RenderKind.LINEAR_STEPPED):
            return "RGB"
        return "RGBA"


def render(config: RenderConfig) -> RenderResult:
    """
    Run the render described by ``config``.

    Stepped kinds return their discrete stops; with ``config.no_file`` they
    skip building the buffer. Radial gradients are closed, so the stops of
    a stepped radial render end with a copy of their first entry.
    """
    kind = config.kind
    gradient = Gradient(config.colors, config.geometry)
    build_buffer = not config.no_file

    if kind is RenderKind.LINEAR_CONTINUOUS:
        width, height = config.swatch_size
        return RenderResult(kind, linear_continuous(gradient, width, height), None)

    if kind is RenderKind.LINEAR_STEPPED:
        stops, buffer = linear_stepped(
            gradient, config.steps, config.swatch_size, build_buffer=build_buffer
        )
        return RenderResult(kind, buffer, stops)

    if kind is RenderKind.RADIAL_STEPPED:
        stops, buffer = radial_stepped(
            gradient,
            config.steps,
            config.size,
            radius_inner=config.radius_inner,
            angle_offset=config.angle_offset,
            build_buffer=build_buffer,
        )
        return RenderResult(kind, buffer, stops)

    if kind is RenderKind.RADIAL_OVERLAY:
        overlay = np_srgb_to_linear(np_8bit_to_unit(config.overlay))
        buffer = radial_with_overlay(
            gradient,
            config.size,
            overlay,
            overlay_factor=config.overlay_factor,
            angle_offset=config.angle_offset,
        )
        return RenderResult(kind, buffer, None)

    buffer = radial_continuous(
        gradient,
        config.size,
        radius_inner=config.radius_inner,
        angle_offset=config.angle_offset,
    )
    return RenderResult(kind, buffer, None)
