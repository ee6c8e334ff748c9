"""Haar wavelet transforms and threshold compression of 2D planes.

The 1D step splits a signal into pairwise sums and differences scaled by
1/sqrt(2), approximation first and detail second.  An odd trailing sample
has no partner and is carried through unchanged.
"""

from __future__ import annotations

import numpy as np

_SCALE = 0.7071067811865476


def _decompose(block: np.ndarray, axis: int) -> np.ndarray:
    signal = np.moveaxis(block, axis, -1)
    half = signal.shape[-1] // 2
    even = signal[..., 0 : 2 * half : 2]
    odd = signal[..., 1 : 2 * half : 2]
    out = signal.copy()
    out[..., :half] = (even + odd) * _SCALE
    out[..., half : 2 * half] = (even - odd) * _SCALE
    return np.moveaxis(out, -1, axis)


def _reconstruct(block: np.ndarray, axis: int) -> np.ndarray:
    signal = np.moveaxis(block, axis, -1)
    half = signal.shape[-1] // 2
    approx = signal[..., :half]
    detail = signal[..., half : 2 * half]
    out = signal.copy()
    out[..., 0 : 2 * half : 2] = (approx + detail) * _SCALE
    out[..., 1 : 2 * half : 2] = (approx - detail) * _SCALE
    return np.moveaxis(out, -1, axis)


def _as_vector(data) -> np.ndarray:
    vector = np.array(data, dtype=np.float64)
    if vector.ndim != 1:
        raise ValueError("expected a one-dimensional signal")
    return vector


def _as_plane(plane) -> np.ndarray:
    grid = np.array(plane, dtype=np.float64)
    if grid.ndim != 2:
        raise ValueError("expected a two-dimensional plane")
    return grid


def haar_decompose_1d(data) -> np.ndarray:
    """One level of the Haar analysis step on a 1D signal."""
    return _decompose(_as_vector(data), 0)


def haar_reconstruct_1d(data) -> np.ndarray:
    """Undo :func:`haar_decompose_1d`."""
    return _reconstruct(_as_vector(data), 0)


def haar_transform_2d(plane, levels: int) -> np.ndarray:
    """Multi-level 2D Haar transform, rows first then columns at each level.

    Each level works on the top-left quarter left by the previous one and
    stops early once either side has shrunk to a single sample.
    """
    coefficients = _as_plane(plane)
    height, width = coefficients.shape
    for _ in range(levels):
        if width <= 1 or height <= 1:
            break
        block = coefficients[:height, :width]
        block = _decompose(block, 1)
        block = _decompose(block, 0)
        coefficients[:height, :width] = block
        width >>= 1
        height >>= 1
    return coefficients


def haar_inverse_transform_2d(coefficients, levels: int) -> np.ndarray:
    """Inverse of :func:`haar_transform_2d`, columns first then rows."""
    if levels < 1:
        raise ValueError("levels must be at least 1")
    plane = _as_plane(coefficients)
    width = plane.shape[1] >> (levels - 1)
    height = plane.shape[0] >> (levels - 1)
    for _ in range(levels):
        block = plane[:height, :width]
        block = _reconstruct(block, 0)
        block = _reconstruct(block, 1)
        plane[:height, :width] = block
        width <<= 1
        height <<= 1
    return plane


def threshold_coefficients(coefficients, threshold: float) -> np.ndarray:
    """Zero every coefficient whose magnitude is below ``threshold``."""
    result = np.array(coefficients, dtype=np.float64)
    result[np.abs(result) < threshold] = 0.0
    return result


def compress(plane, levels: int, threshold: float) -> np.ndarray:
    """Transform, drop small coefficients, and transform back."""
    coefficients = haar_transform_2d(plane, levels)
    coefficients = threshold_coefficients(coefficients, threshold)
    return haar_inverse_transform_2d(coefficients, levels)