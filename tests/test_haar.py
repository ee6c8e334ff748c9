import math

import numpy as np
import pytest

from chaoslab.haar import (
    compress,
    haar_decompose_1d,
    haar_inverse_transform_2d,
    haar_reconstruct_1d,
    haar_transform_2d,
    threshold_coefficients,
)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


def test_decompose_pair_of_ones():
    result = haar_decompose_1d([1.0, 1.0])
    assert result[0] == pytest.approx(math.sqrt(2))
    assert result[1] == pytest.approx(0.0)


def test_decompose_puts_differences_in_second_half():
    result = haar_decompose_1d([3.0, 3.0, 5.0, 5.0])
    assert np.allclose(result[2:], 0.0)


def test_one_dimensional_round_trip(rng):
    signal = rng.normal(size=16)
    assert np.allclose(haar_reconstruct_1d(haar_decompose_1d(signal)), signal)


def test_decompose_preserves_energy(rng):
    signal = rng.normal(size=32)
    result = haar_decompose_1d(signal)
    assert np.sum(result**2) == pytest.approx(np.sum(signal**2))


def test_odd_trailing_sample_passes_through():
    result = haar_decompose_1d([1.0, 2.0, 7.0])
    assert result[2] == 7.0
    assert np.allclose(haar_reconstruct_1d(result), [1.0, 2.0, 7.0])


def test_decompose_does_not_modify_input():
    signal = np.array([1.0, 2.0, 3.0, 4.0])
    haar_decompose_1d(signal)
    assert np.array_equal(signal, [1.0, 2.0, 3.0, 4.0])


def test_decompose_rejects_two_dimensional_input():
    with pytest.raises(ValueError):
        haar_decompose_1d([[1.0, 2.0]])


@pytest.mark.parametrize("size,levels", [(8, 1), (8, 3), (16, 3), (32, 2)])
def test_two_dimensional_round_trip(rng, size, levels):
    plane = rng.uniform(0, 255, size=(size, size))
    coefficients = haar_transform_2d(plane, levels)
    assert np.allclose(haar_inverse_transform_2d(coefficients, levels), plane)


def test_transform_preserves_energy(rng):
    plane = rng.normal(size=(16, 16))
    coefficients = haar_transform_2d(plane, 3)
    assert np.sum(coefficients**2) == pytest.approx(np.sum(plane**2))


def test_constant_plane_concentrates_in_corner():
    plane = np.full((8, 8), 10.0)
    coefficients = haar_transform_2d(plane, 3)
    rest = coefficients.copy()
    rest[0, 0] = 0.0
    assert np.allclose(rest, 0.0)
    assert coefficients[0, 0] ** 2 == pytest.approx(64 * 100.0)


def test_transform_zero_levels_is_identity(rng):
    plane = rng.normal(size=(4, 4))
    assert np.array_equal(haar_transform_2d(plane, 0), plane)


def test_transform_rejects_vector():
    with pytest.raises(ValueError):
        haar_transform_2d([1.0, 2.0], 1)


def test_inverse_rejects_zero_levels():
    with pytest.raises(ValueError):
        haar_inverse_transform_2d(np.zeros((4, 4)), 0)


def test_threshold_zeroes_small_magnitudes():
    result = threshold_coefficients([[0.5, -0.5], [2.0, -3.0]], 1.0)
    assert np.array_equal(result, [[0.0, 0.0], [2.0, -3.0]])


def test_threshold_keeps_values_equal_to_threshold():
    result = threshold_coefficients([[1.0, -1.0]], 1.0)
    assert np.array_equal(result, [[1.0, -1.0]])


def test_compress_with_zero_threshold_is_lossless(rng):
    plane = rng.uniform(0, 255, size=(16, 16))
    assert np.allclose(compress(plane, 3, 0.0), plane)


def test_compress_with_huge_threshold_erases_everything(rng):
    plane = rng.uniform(0, 255, size=(16, 16))
    assert np.allclose(compress(plane, 3, 1e9), 0.0)


def test_compress_keeps_constant_plane(rng):
    plane = np.full((16, 16), 42.0)
    assert np.allclose(compress(plane, 3, 1.0), plane)