import numpy as np

from palgrad.render import atop


def test_opaque_source_replaces_color():
    result = atop(np.array([0.2, 0.4, 0.6, 1.0]), np.array([0.9, 0.9, 0.9, 1.0]))
    np.testing.assert_allclose(result, [0.2, 0.4, 0.6, 1.0])


def test_transparent_source_keeps_destination():
    result = atop(np.array([0.2, 0.4, 0.6, 0.0]), np.array([0.9, 0.8, 0.7, 1.0]))
    np.testing.assert_allclose(result, [0.9, 0.8, 0.7, 1.0])


def test_half_source_mixes():
    result = atop(np.array([1.0, 0.0, 0.0, 0.5]), np.array([0.0, 0.0, 1.0, 1.0]))
    np.testing.assert_allclose(result, [0.5, 0.0, 0.5, 1.0])


def test_result_alpha_is_destination_alpha():
    source = np.array([[1.0, 1.0, 1.0, 0.3], [0.0, 0.5, 1.0, 0.8]])
    destination = np.array([[0.5, 0.5, 0.5, 0.25], [0.1, 0.2, 0.3, 0.6]])
    result = atop(source, destination)
    np.testing.assert_allclose(result[:, 3], destination[:, 3])


def test_invisible_outside_destination():
    result = atop(np.array([1.0, 1.0, 1.0, 1.0]), np.array([0.3, 0.3, 0.3, 0.0]))
    np.testing.assert_allclose(result, [0.0, 0.0, 0.0, 0.0])


def test_partial_destination_coverage():
    # straight-alpha result: Cs * as + Cd * (1 - as) whenever ad > 0
    result = atop(np.array([1.0, 0.0, 0.0, 0.25]), np.array([0.0, 1.0, 0.0, 0.5]))
    np.testing.assert_allclose(result, [0.25, 0.75, 0.0, 0.5])
