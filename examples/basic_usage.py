"""Basic palgrad usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from palgrad import (
    ColorEncoding,
    ColorLCh,
    GeometryKind,
    Gradient,
    RenderConfig,
    discrete_stops,
    format_hex_colors,
    parse_colors,
    render,
    save_image,
)


def demonstrate_colors() -> None:
    # Every literal ends up as an LCh color.
    accent = ColorLCh.from_encoding((255, 128, 64), ColorEncoding.RGB8)
    print("RGB8 -> LCh:", accent.value)
    print("LCh -> RGB8:", accent.to_rgb8())

    hsv = parse_colors("120,100,100;300,100,100", ColorEncoding.HSV)
    print("HSV literals:", [c.value for c in hsv])


def demonstrate_gradients() -> None:
    colors = parse_colors("228,68,21;236,228,38;46,137,209", ColorEncoding.RGB8)

    strip = Gradient(colors, GeometryKind.LINEAR)
    print("Linear midpoint (LCh):", strip(0.5))
    print("Linear stops:", format_hex_colors(discrete_stops(strip, 2)))

    # Radial gradients close the loop back to their first color.
    ring = Gradient(colors, GeometryKind.RADIAL)
    print("Radial control points:", len(ring))
    print("Radial stops:", format_hex_colors(discrete_stops(ring, 2)[:-1]))


def demonstrate_render() -> None:
    colors = parse_colors("228,68,21;236,228,38;46,137,209", ColorEncoding.RGB8)
    config = RenderConfig(colors=tuple(colors), size=256, overlay=(120, 120, 120))
    result = render(config)
    print("Overlay disc:", result.kind.value, result.buffer.shape, result.mode)
    print("Saved", save_image(result.buffer, "palgrad_overlay.png"))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()
    demonstrate_render()
