"""
Command line for rendering gradients and palettes.

    palgrad                                 radial gradient, default colors
    palgrad -c "255,0,0;0,0,255" -n 4 -p    stepped radial, colors printed
    palgrad -l --ss 20x60 -n 3 -- out.png   stepped linear swatches
"""

from __future__ import annotations

import math
from typing import List

import click
from click.core import ParameterSource

from . import __version__
from .colors import ColorLCh, parse_colors, parse_components
from .config import (
    DEFAULT_ANGLE_OFFSET,
    DEFAULT_COLORS,
    DEFAULT_OVERLAY,
    DEFAULT_OVERLAY_FACTOR,
    DEFAULT_RADIUS_INNER,
    DEFAULT_SIZE,
    DEFAULT_STEPS,
    MAX_COLORS,
    MIN_COLORS,
    RenderConfig,
)
from .errors import PalgradError, ParseError
from .gradients import GeometryKind
from .output import format_hex_colors, save_image
from .renderer import render
from .types.color_encoding import ColorEncoding

# option name -> encoding, in the order colors are concatenated
COLOR_OPTIONS = (
    ("colors", ColorEncoding.RGB8),
    ("dec", ColorEncoding.UNIT_RGB),
    ("hsv", ColorEncoding.HSV),
    ("lch", ColorEncoding.LCH),
)


class SwatchSize(click.ParamType):
    """``WIDTHxHEIGHT`` or a single number for square swatches."""
    name = "swatch size"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        parts = str(value).lower().split("x")
        if len(parts) not in (1, 2):
            self.fail(f"{value!r}: only 1 or 2 dimensions accepted", param, ctx)
        try:
            dims = tuple(int(p) for p in parts)
        except ValueError:
            self.fail(f"{value!r} is not of the form WIDTHxHEIGHT", param, ctx)
        if len(dims) == 1:
            dims = (dims[0], dims[0])
        if min(dims) <= 0:
            self.fail(f"Swatch dimensions cannot be 0 sized: {dims[0]}x{dims[1]}", param, ctx)
        return dims


def _given(ctx: click.Context, name: str) -> bool:
    return ctx.get_parameter_source(name) not in (None, ParameterSource.DEFAULT)


def _collect_colors(ctx: click.Context, params: dict) -> List[ColorLCh]:
    colors: List[ColorLCh] = []
    for name, encoding in COLOR_OPTIONS:
        literals = params.get(name)
        if literals is None:
            continue
        try:
            parsed = parse_colors(literals, encoding)
        except ParseError as exc:
            raise click.BadParameter(str(exc), ctx=ctx, param_hint=f"--{name}") from exc
        if not MIN_COLORS <= len(parsed) <= MAX_COLORS:
            raise click.BadParameter(
                f"expected {MIN_COLORS} to {MAX_COLORS} colors delimited by ';', got {len(parsed)}",
                ctx=ctx,
                param_hint=f"--{name}",
            )
        colors.extend(parsed)

    if not colors:
        colors = parse_colors(DEFAULT_COLORS, ColorEncoding.RGB8)
    return colors


def _parse_overlay(ctx: click.Context, literal: str):
    try:
        return parse_components(literal, ColorEncoding.RGB8)
    except ParseError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param_hint="--overlay") from exc


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="palgrad")
@click.option("-c", "--colors", metavar="COLORS",
              help="Colors in `R,G,B` format (0-255) delimited by `;`.")
@click.option("-d", "--dec", metavar="DECIMAL_COLORS",
              help="Colors in `R,G,B` format (0.0-1.0) delimited by `;`.")
@click.option("--hsv", metavar="HSV_COLORS",
              help="Colors in `H,S,V` format (0-360, 0-100, 0-100) delimited by `;`.")
@click.option("--lch", metavar="LCH_COLORS",
              help="Colors in `L,C,h` format (0-100, 0-100, 0-360) delimited by `;`.")
@click.option("-s", "--size", type=click.IntRange(min=1), default=DEFAULT_SIZE, show_default=True,
              help="Diameter of the round palette in pixels.")
@click.option("-r", "--radius", "radius_inner", type=float, default=DEFAULT_RADIUS_INNER, show_default=True,
              help="Inner radius factor between 0.0 and 0.5.")
@click.option("-n", "--steps", type=click.IntRange(min=0), default=DEFAULT_STEPS, show_default=True,
              help="Number of color steps; giving it selects a stepped gradient.")
@click.option("-o", "--overlay", default=",".join(str(c) for c in DEFAULT_OVERLAY), show_default=True,
              help="Overlay color in `R,G,B`; giving it selects the overlay variant.")
@click.option("--overlay-factor", type=click.FloatRange(0.0, 1.0), default=DEFAULT_OVERLAY_FACTOR,
              show_default=True, help="Overlay opacity at the center.")
@click.option("--angle-offset", type=float, default=math.degrees(DEFAULT_ANGLE_OFFSET), show_default=True,
              help="Rotation of a radial gradient in degrees.")
@click.option("-l", "--linear", is_flag=True, help="Create a linear gradient.")
@click.option("--ss", "swatch_size", type=SwatchSize(), default="40x40", show_default=True,
              help="Dimensions of a linear swatch, `WIDTHxHEIGHT` or `N`.")
@click.option("-p", "--print", "print_colors", is_flag=True,
              help="Print colors produced by stepped gradients.")
@click.option("--no-file", is_flag=True,
              help="Don't output a file, for use with printing stepped gradient colors.")
@click.argument("output", required=False, type=click.Path(dir_okay=False, writable=True))
@click.pass_context
def main(ctx: click.Context, **params) -> None:
    """Create gradients and palettes from the command line."""
    linear = params["linear"]
    if linear:
        conflicting = [f"--{name}" for name in ("overlay", "size") if _given(ctx, name)]
        if conflicting:
            raise click.UsageError(f"--linear cannot be used with {', '.join(conflicting)}")

    colors = _collect_colors(ctx, params)
    overlay = _parse_overlay(ctx, params["overlay"]) if _given(ctx, "overlay") else None

    try:
        config = RenderConfig(
            colors=tuple(colors),
            geometry=GeometryKind.LINEAR if linear else GeometryKind.RADIAL,
            size=params["size"],
            swatch_size=params["swatch_size"],
            steps=params["steps"],
            stepped=_given(ctx, "steps"),
            radius_inner=params["radius_inner"],
            angle_offset=math.radians(params["angle_offset"]),
            overlay=overlay,
            overlay_factor=params["overlay_factor"],
            print_colors=params["print_colors"],
            no_file=params["no_file"],
            output=params["output"],
        )
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    if config.no_file and not config.kind.is_stepped:
        return

    result = render(config)

    if config.print_colors and result.stops is not None:
        stops = result.stops
        if config.geometry.is_closed:
            stops = stops[:-1]
        click.echo(format_hex_colors(stops))

    if config.no_file:
        return

    try:
        path = save_image(result.buffer, config.output)
    except PalgradError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Saved {path}", err=True)
