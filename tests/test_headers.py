from __future__ import annotations

import io
import struct

import pytest

from bmp_encoder.headers import (
    PIXEL_DATA_OFFSET,
    Compression,
    build_headers,
    padded_row_bytes,
    row_padding,
)
from bmp_encoder.writer import BinaryWriter


@pytest.mark.parametrize("width", range(0, 40))
def test_padded_row_bytes_is_aligned(width):
    stride = padded_row_bytes(width)
    assert stride % 4 == 0
    assert stride - width * 3 in {0, 1, 2, 3}
    assert stride - width * 3 == row_padding(width)


@pytest.mark.parametrize(
    "width, height, expected_size",
    [(1, 1, 58), (2, 2, 70), (4, 3, 90), (5, 1, 70)],
)
def test_sizes_share_row_stride(width, height, expected_size):
    file_header, info_header = build_headers(width, height)
    assert file_header.file_size == expected_size
    assert info_header.image_data_size == height * padded_row_bytes(width)
    assert file_header.file_size == PIXEL_DATA_OFFSET + info_header.image_data_size


def test_headers_serialize_to_54_bytes():
    file_header, info_header = build_headers(3, 2)
    buffer = io.BytesIO()
    writer = BinaryWriter(buffer)
    file_header.write(writer)
    info_header.write(writer)

    data = buffer.getvalue()
    assert len(data) == 54
    assert data[:2] == b"BM"
    fields = struct.unpack("<HIIIIiiHHIIiiII", data)
    assert fields == (
        0x4D42,
        54 + 2 * 12,
        0,
        54,
        40,
        3,
        2,
        1,
        24,
        Compression.RGB,
        2 * 12,
        0,
        0,
        0,
        0,
    )


def test_zero_dimensions_follow_formulas():
    file_header, info_header = build_headers(0, 0)
    assert file_header.file_size == 54
    assert info_header.image_data_size == 0
