"""Reading 24-bit BMP images and preparing coefficient planes for display."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import NamedTuple

import numpy as np

_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_SIGNATURE = 0x4D42


class BmpError(Exception):
    """Raised when a BMP file cannot be read or is in an unsupported format."""


class Rgb(NamedTuple):
    """One 8-bit-per-channel pixel."""

    r: int
    g: int
    b: int


def read_bmp(path: str | Path) -> list[list[Rgb]]:
    """Read an uncompressed 24-bit BMP file.

    Returns the pixel rows from top to bottom; each row holds ``width``
    pixels from left to right.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise BmpError(f"cannot open file {path}") from exc

    if len(data) < _FILE_HEADER.size:
        raise BmpError("failed to read BMP file header")
    signature, _file_size, _res1, _res2, data_offset = _FILE_HEADER.unpack_from(data, 0)
    if signature != _SIGNATURE:
        raise BmpError("not a valid BMP file")

    if len(data) < _FILE_HEADER.size + _INFO_HEADER.size:
        raise BmpError("failed to read BMP info header")
    info = _INFO_HEADER.unpack_from(data, _FILE_HEADER.size)
    width, height, bits_per_pixel, compression = info[1], info[2], info[4], info[5]
    if bits_per_pixel != 24 or compression != 0:
        raise BmpError("unsupported BMP format: only 24-bit uncompressed is supported")
    if width < 0 or height < 0:
        raise BmpError("negative image dimensions are not supported")

    padding = (4 - (width * 3) % 4) % 4
    row_size = width * 3 + padding
    rows: list[list[Rgb]] = [[] for _ in range(height)]
    offset = data_offset
    for y in reversed(range(height)):
        chunk = data[offset : offset + row_size]
        if len(chunk) != row_size:
            raise BmpError("failed to read pixel data")
        rows[y] = [
            Rgb(chunk[pos + 2], chunk[pos + 1], chunk[pos])
            for pos in range(0, width * 3, 3)
        ]
        offset += row_size
    return rows


def next_power_of_2(n: int) -> int:
    """The smallest power of two not below ``n`` (1 for ``n <= 1``)."""
    power = 1
    while power < n:
        power *= 2
    return power


def normalize_for_display(coefficients) -> np.ndarray:
    """Scale a 2D plane linearly onto 0..255 as unsigned bytes.

    The minimum maps to 0 and the maximum to 255; values are truncated.
    A constant plane maps to all zeros.
    """
    plane = np.asarray(coefficients, dtype=np.float64)
    if plane.size == 0:
        return plane.astype(np.uint8)
    low = plane.min()
    span = plane.max() - low
    if span == 0:
        span = 1.0
    return (255.0 * (plane - low) / span).astype(np.uint8)