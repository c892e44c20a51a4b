import sys
import os

import pytest

from palgrad import ColorEncoding, Gradient, GeometryKind, parse_colors

# Make tests/samples.py importable from the test subdirectories
tests_dir = os.path.dirname(os.path.abspath(__file__))
if tests_dir not in sys.path:
    sys.path.insert(0, tests_dir)


@pytest.fixture
def warm_colors():
    return parse_colors("228,68,21;236,228,38;46,137,209", ColorEncoding.RGB8)


@pytest.fixture
def radial_gradient(warm_colors):
    return Gradient(warm_colors, GeometryKind.RADIAL)


@pytest.fixture
def linear_gradient(warm_colors):
    return Gradient(warm_colors, GeometryKind.LINEAR)
