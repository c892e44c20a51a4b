# No dependencies
from enum import Enum


class ColorEncoding(str, Enum):
    RGB8 = "rgb8"
    UNIT_RGB = "unit_rgb"
    HSV = "hsv"
    LCH = "lch"


# (low, high, high_inclusive) for each channel
channel_ranges = {
    ColorEncoding.RGB8: ((0, 255, True), (0, 255, True), (0, 255, True)),
    ColorEncoding.UNIT_RGB: ((0.0, 1.0, True), (0.0, 1.0, True), (0.0, 1.0, True)),
    ColorEncoding.HSV: ((0.0, 360.0, False), (0.0, 100.0, True), (0.0, 100.0, True)),
    ColorEncoding.LCH: ((0.0, 100.0, True), (0.0, 100.0, True), (0.0, 360.0, False)),
}

channel_names = {
    ColorEncoding.RGB8: ("Red", "Green", "Blue"),
    ColorEncoding.UNIT_RGB: ("Red", "Green", "Blue"),
    ColorEncoding.HSV: ("Hue", "Saturation", "Value"),
    ColorEncoding.LCH: ("Lightness", "Chroma", "Hue"),
}

channel_classes = {
    ColorEncoding.RGB8: int,
    ColorEncoding.UNIT_RGB: float,
    ColorEncoding.HSV: float,
    ColorEncoding.LCH: float,
}

HUE_360 = 360.0
