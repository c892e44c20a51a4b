import pytest

from palgrad.colors import ColorEncoding, ColorLCh, parse_color, parse_colors, parse_components
from palgrad.errors import ParseError


def test_parse_rgb8_components():
    assert parse_components("228,68,21", ColorEncoding.RGB8) == (228, 68, 21)
    assert parse_components(" 1, 2 ,3 ", ColorEncoding.RGB8) == (1, 2, 3)


def test_parse_each_encoding():
    for literal, encoding in [
        ("228,68,21", ColorEncoding.RGB8),
        ("1.0,0.6,0.0", ColorEncoding.UNIT_RGB),
        ("120,70,60", ColorEncoding.HSV),
        ("100.0,75.0,0.0", ColorEncoding.LCH),
    ]:
        assert isinstance(parse_color(literal, encoding), ColorLCh)


def test_parse_lch_is_direct():
    assert parse_color("20.0,25.0,200.0", ColorEncoding.LCH).value == (20.0, 25.0, 200.0)


def test_parse_colors_splits_on_semicolon():
    colors = parse_colors("228,68,21;236,228,38;46,137,209", ColorEncoding.RGB8)
    assert len(colors) == 3


def test_parse_colors_accepts_iterable():
    colors = parse_colors(["0,80,60", "120,70,60"], ColorEncoding.HSV)
    assert len(colors) == 2


@pytest.mark.parametrize(
    "literal, encoding",
    [
        ("256,0,0", ColorEncoding.RGB8),
        ("-1,0,0", ColorEncoding.RGB8),
        ("1.5,0,0", ColorEncoding.RGB8),
        ("1.1,0.0,0.0", ColorEncoding.UNIT_RGB),
        ("360,50,50", ColorEncoding.HSV),
        ("0,101,50", ColorEncoding.HSV),
        ("101,50,50", ColorEncoding.LCH),
        ("50,50,360", ColorEncoding.LCH),
        ("red,0,0", ColorEncoding.RGB8),
        ("nan,0,0", ColorEncoding.UNIT_RGB),
        ("1,2", ColorEncoding.RGB8),
        ("1,2,3,4", ColorEncoding.RGB8),
        ("", ColorEncoding.RGB8),
    ],
)
def test_parse_errors(literal, encoding):
    with pytest.raises(ParseError):
        parse_color(literal, encoding)


def test_parse_error_names_the_channel():
    with pytest.raises(ParseError, match="Green"):
        parse_components("0,300,0", ColorEncoding.RGB8)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_components("x,y,z", ColorEncoding.LCH)
