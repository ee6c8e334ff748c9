"""Daubechies D4 wavelet transforms and threshold compression of 2D planes.

The analysis step convolves the signal with the four-tap D4 low- and
high-pass filters at every even offset, wrapping around the end of the
signal; approximations fill the first half and details the second.
Signals shorter than four samples are left as they are.
"""

from __future__ import annotations

import numpy as np

from chaoslab.haar import threshold_coefficients

D4_COEFFS = (
    0.4829629131445341,
    0.8365163037378079,
    0.2241438680420134,
    -0.1294095225512604,
)

_H0, _H1, _H2, _H3 = D4_COEFFS
LOW_DECOMPOSITION = np.array([_H0, _H1, _H2, _H3])
HIGH_DECOMPOSITION = np.array([_H3, -_H2, _H1, -_H0])
LOW_RECONSTRUCTION = np.array([_H2, _H1, _H0, _H3])
HIGH_RECONSTRUCTION = np.array([_H3, -_H0, _H1, -_H2])

_MIN_LENGTH = 4


def _decompose(block: np.ndarray, axis: int) -> np.ndarray:
    signal = np.moveaxis(block, axis, -1)
    length = signal.shape[-1]
    if length < _MIN_LENGTH:
        return np.moveaxis(signal.copy(), -1, axis)
    half = length >> 1
    starts = 2 * np.arange(half)
    out = signal.copy()
    approx = np.zeros(signal.shape[:-1] + (half,))
    detail = np.zeros_like(approx)
    for k in range(4):
        taps = signal[..., (starts + k) % length]
        approx += taps * LOW_DECOMPOSITION[k]
        detail += taps * HIGH_DECOMPOSITION[k]
    out[..., :half] = approx
    out[..., half : 2 * half] = detail
    return np.moveaxis(out, -1, axis)


def _reconstruct(block: np.ndarray, axis: int) -> np.ndarray:
    signal = np.moveaxis(block, axis, -1)
    length = signal.shape[-1]
    if length < _MIN_LENGTH:
        return np.moveaxis(signal.copy(), -1, axis)
    half = length >> 1
    approx = signal[..., :half]
    detail = signal[..., half : 2 * half]
    out = np.zeros_like(signal)
    starts = 2 * np.arange(half)
    for k in range(4):
        targets = starts + k
        targets = np.where(targets >= length, targets - length, targets)
        contribution = approx * LOW_RECONSTRUCTION[k] + detail * HIGH_RECONSTRUCTION[k]
        moved = np.moveaxis(out, -1, 0)
        np.add.at(moved, targets, np.moveaxis(contribution, -1, 0))
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


def decompose_1d(data) -> np.ndarray:
    """One level of the D4 analysis step on a 1D signal."""
    return _decompose(_as_vector(data), 0)


def reconstruct_1d(data) -> np.ndarray:
    """One level of the D4 synthesis step on a 1D signal."""
    return _reconstruct(_as_vector(data), 0)


def transform_2d(plane, levels: int) -> np.ndarray:
    """Multi-level 2D D4 transform, rows first then columns at each level.

    Each level works on the top-left quarter left by the previous one and
    stops once either side is four samples or fewer.
    """
    coefficients = _as_plane(plane)
    height, width = coefficients.shape
    for _ in range(levels):
        if width <= _MIN_LENGTH or height <= _MIN_LENGTH:
            break
        block = coefficients[:height, :width]
        block = _decompose(block, 1)
        block = _decompose(block, 0)
        coefficients[:height, :width] = block
        width >>= 1
        height >>= 1
    return coefficients


def inverse_transform_2d(coefficients, levels: int) -> np.ndarray:
    """Synthesis counterpart of :func:`transform_2d`, columns first then rows."""
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


def compress(plane, levels: int, threshold: float) -> np.ndarray:
    """Transform, drop small coefficients, and transform back."""
    coefficients = transform_2d(plane, levels)
    coefficients = threshold_coefficients(coefficients, threshold)
    return inverse_transform_2d(coefficients, levels)