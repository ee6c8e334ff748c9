import struct

import numpy as np
import pytest

from chaoslab.imaging import BmpError, Rgb, next_power_of_2, normalize_for_display, read_bmp


def _bmp_bytes(rows, bits=24, compression=0, signature=b"BM", truncate=0):
    height = len(rows)
    width = len(rows[0]) if rows else 0
    padding = (4 - (width * 3) % 4) % 4
    pixel_data = b""
    for row in reversed(rows):
        for r, g, b in row:
            pixel_data += bytes((b, g, r))
        pixel_data += b"\x00" * padding
    offset = 14 + 40
    file_header = signature + struct.pack("<IHHI", offset + len(pixel_data), 0, 0, offset)
    info_header = struct.pack(
        "<IiiHHIIiiII", 40, width, height, 1, bits, compression, len(pixel_data), 0, 0, 0, 0
    )
    data = file_header + info_header + pixel_data
    return data[: len(data) - truncate] if truncate else data


@pytest.fixture
def sample_rows():
    return [
        [(255, 0, 0), (0, 255, 0), (0, 0, 255)],
        [(10, 20, 30), (40, 50, 60), (70, 80, 90)],
    ]


def test_read_bmp_round_trip(tmp_path, sample_rows):
    path = tmp_path / "image.bmp"
    path.write_bytes(_bmp_bytes(sample_rows))
    pixels = read_bmp(path)
    assert pixels == [[Rgb(*p) for p in row] for row in sample_rows]


def test_read_bmp_fields_are_named(tmp_path, sample_rows):
    path = tmp_path / "image.bmp"
    path.write_bytes(_bmp_bytes(sample_rows))
    first = read_bmp(str(path))[0][0]
    assert (first.r, first.g, first.b) == sample_rows[0][0]


def test_read_bmp_width_multiple_of_four(tmp_path):
    rows = [[(i, i, i) for i in range(4)] for _ in range(3)]
    path = tmp_path / "square.bmp"
    path.write_bytes(_bmp_bytes(rows))
    assert read_bmp(path) == [[Rgb(*p) for p in row] for row in rows]


def test_missing_file(tmp_path):
    with pytest.raises(BmpError):
        read_bmp(tmp_path / "absent.bmp")


def test_bad_signature(tmp_path, sample_rows):
    path = tmp_path / "bad.bmp"
    path.write_bytes(_bmp_bytes(sample_rows, signature=b"XY"))
    with pytest.raises(BmpError):
        read_bmp(path)


def test_unsupported_depth(tmp_path, sample_rows):
    path = tmp_path / "deep.bmp"
    path.write_bytes(_bmp_bytes(sample_rows, bits=32))
    with pytest.raises(BmpError):
        read_bmp(path)


def test_compressed_rejected(tmp_path, sample_rows):
    path = tmp_path / "rle.bmp"
    path.write_bytes(_bmp_bytes(sample_rows, compression=1))
    with pytest.raises(BmpError):
        read_bmp(path)


def test_truncated_pixels(tmp_path, sample_rows):
    path = tmp_path / "short.bmp"
    path.write_bytes(_bmp_bytes(sample_rows, truncate=2))
    with pytest.raises(BmpError):
        read_bmp(path)


def test_truncated_header(tmp_path):
    path = tmp_path / "tiny.bmp"
    path.write_bytes(b"BM\x00")
    with pytest.raises(BmpError):
        read_bmp(path)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 5, 8, 9, 100, 1000])
def test_next_power_of_2_invariants(n):
    p = next_power_of_2(n)
    assert p >= n
    assert p & (p - 1) == 0
    assert p == 1 or p // 2 < n


def test_next_power_of_2_exact_power():
    assert next_power_of_2(64) == 64


def test_normalize_extremes():
    plane = np.array([[-3.0, 0.0], [1.5, 7.0]])
    out = normalize_for_display(plane)
    assert out.dtype == np.uint8
    assert out.min() == 0
    assert out.max() == 255
    assert out[0, 0] == 0 and out[1, 1] == 255


def test_normalize_preserves_order():
    plane = np.linspace(-10, 10, 20).reshape(4, 5)
    values = normalize_for_display(plane).ravel().tolist()
    assert values == sorted(values)
    assert values[0] == 0
    assert values[-1] == 255


def test_normalize_constant_plane():
    out = normalize_for_display([[4.0, 4.0], [4.0, 4.0]])
    assert np.array_equal(out, np.zeros((2, 2), dtype=np.uint8))