"""Parsing of ``a,b,c`` color literals into perceptual colors."""

from __future__ import annotations
from typing import Iterable, List, Union

from ..errors import ParseError
from ..types.color_encoding import ColorEncoding, channel_classes, channel_names, channel_ranges
from .color_lch import ColorLCh

COLOR_DELIMITER = ";"
CHANNEL_DELIMITER = ","


def _describe_range(low, high, high_inclusive: bool) -> str:
    closing = "]" if high_inclusive else ")"
    return f"[{low}, {high}{closing}"


def parse_components(literal: str, encoding: ColorEncoding) -> tuple:
    """
    Split and validate a single ``a,b,c`` literal.

    Args:
        literal: Text such as ``"228,68,21"``
        encoding: How the three components are to be read

    Returns:
        Tuple of three numbers typed for the encoding (int for RGB8)

    Raises:
        ParseError: wrong component count, non-numeric text or a value
            outside the encoding's declared range
    """
    encoding = ColorEncoding(encoding)
    parts = [p.strip() for p in literal.split(CHANNEL_DELIMITER)]
    if len(parts) != 3:
        raise ParseError(
            f"Could not parse color {literal!r}: expected 3 comma-separated values, got {len(parts)}"
        )

    cast = channel_classes[encoding]
    values = []
    for part, name, (low, high, high_inclusive) in zip(
        parts, channel_names[encoding], channel_ranges[encoding]
    ):
        expected = _describe_range(low, high, high_inclusive)
        try:
            value = cast(part)
        except ValueError:
            raise ParseError(
                f"Could not parse {name} in {literal!r}, value should be in {expected}"
            ) from None

        in_range = low <= value <= high if high_inclusive else low <= value < high
        if not in_range:
            raise ParseError(
                f"{name} in {literal!r} is out of range, value should be in {expected}"
            )
        values.append(value)
    return tuple(values)


def parse_color(literal: str, encoding: ColorEncoding) -> ColorLCh:
    """Parse one literal and convert it to LCh."""
    return ColorLCh.from_encoding(parse_components(literal, encoding), encoding)


def parse_colors(literals: Union[str, Iterable[str]], encoding: ColorEncoding) -> List[ColorLCh]:
    """Parse a ``;``-delimited string (or an iterable of literals) into colors."""
    if isinstance(literals, str):
        literals = [lit for lit in literals.split(COLOR_DELIMITER) if lit.strip()]
    return [parse_color(lit, encoding) for lit in literals]
