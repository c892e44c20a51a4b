import numpy as np
import pytest

from palgrad import (
    ColorEncoding,
    ColorLCh,
    GeometryKind,
    Gradient,
    discrete_stops,
    nearest_stop_index,
    step_count,
)


@pytest.mark.parametrize(
    "length, requested, expected",
    [
        (2, 0, 2),
        (2, 1, 3),
        (2, 2, 4),
        (2, 5, 7),
        (3, 0, 1),
        (3, 1, 3),
        (4, 3, 10),
        (4, 11, 34),
    ],
)
def test_step_count_policy(length, requested, expected):
    assert step_count(length, requested) == expected


def test_step_count_rejects_negative():
    with pytest.raises(ValueError):
        step_count(3, -1)
    with pytest.raises(ValueError):
        step_count(0, 3)


def test_linear_stops(warm_colors):
    gradient = Gradient(warm_colors)
    stops = discrete_stops(gradient, 2)

    assert stops.shape == (5, 3)
    assert stops.dtype == np.uint8
    np.testing.assert_array_equal(stops[0], gradient.get_rgb8(0.0))
    np.testing.assert_array_equal(stops[2], gradient.get_rgb8(0.5))
    np.testing.assert_array_equal(stops[-1], gradient.get_rgb8(1.0))


def test_linear_two_colors_one_step_inserts_midpoint():
    gradient = Gradient([(20.0, 10.0, 40.0), (80.0, 10.0, 40.0)])
    stops = discrete_stops(gradient, 1)
    assert len(stops) == 3
    np.testing.assert_array_equal(stops[1], gradient.get_rgb8(0.5))


def test_closed_stops_end_on_first(warm_colors):
    gradient = Gradient(warm_colors, GeometryKind.RADIAL)
    stops = discrete_stops(gradient, 3)

    # 3 colors + closing duplicate -> (4 - 1) * 3 + 1 stops, the last one closing the loop
    assert len(stops) == step_count(4, 3)
    np.testing.assert_array_equal(stops[-1], stops[0])


def test_closed_stops_are_evenly_spaced(warm_colors):
    gradient = Gradient(warm_colors, GeometryKind.RADIAL)
    stops = discrete_stops(gradient, 2)
    steps = step_count(len(gradient), 2)

    expected = gradient.get_rgb8(np.linspace(0.0, 1.0, steps))
    np.testing.assert_array_equal(stops[:-1], expected[:-1])


def test_closed_stops_contain_control_colors(warm_colors):
    gradient = Gradient(warm_colors, GeometryKind.RADIAL)
    stops = discrete_stops(gradient, 3).tolist()

    for color in warm_colors:
        assert list(color.to_rgb8()) in stops


def test_closed_two_colors_one_step():
    red = ColorLCh.from_encoding((255, 0, 0), ColorEncoding.RGB8)
    blue = ColorLCh.from_encoding((0, 0, 255), ColorEncoding.RGB8)
    stops = discrete_stops(Gradient([red, blue], GeometryKind.RADIAL), 1)

    assert stops.tolist() == [[255, 0, 0], [0, 0, 255], [255, 0, 0]]


def test_nearest_stop_index():
    assert nearest_stop_index(0.5, 3) == 1
    assert nearest_stop_index(0.0, 3) == 0
    assert nearest_stop_index(1.0, 3) == 2
    np.testing.assert_array_equal(
        nearest_stop_index(np.array([0.24, 0.25, 0.26, 0.74, 0.76]), 3),
        [0, 1, 1, 1, 2],
    )


def test_nearest_stop_index_rounds_halves_up():
    # 0.5 * 3 = 1.5 lands on index 2
    assert nearest_stop_index(0.5, 4) == 2
