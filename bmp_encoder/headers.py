"""File and info header records for 24-bit uncompressed bitmaps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .writer import BinaryWriter

BMP_SIGNATURE = 0x4D42  # "BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE
BITS_PER_PIXEL = 24
BYTES_PER_PIXEL = BITS_PER_PIXEL // 8


class Compression(IntEnum):
    RGB = 0
    RLE8 = 1
    RLE4 = 2
    BITFIELDS = 3


def padded_row_bytes(width: int) -> int:
    """Return the stored length of one pixel row, a multiple of four."""

    return (width * BYTES_PER_PIXEL + 3) // 4 * 4


def row_padding(width: int) -> int:
    """Return the number of zero bytes appended after each row."""

    return (4 - (width * BYTES_PER_PIXEL) % 4) % 4


@dataclass
class FileHeader:
    file_size: int
    signature: int = BMP_SIGNATURE
    reserved: int = 0
    pixel_data_offset: int = PIXEL_DATA_OFFSET

    def write(self, writer: BinaryWriter) -> None:
        writer.write_u16(self.signature)
        writer.write_u32(self.file_size)
        writer.write_u32(self.reserved)
        writer.write_u32(self.pixel_data_offset)


@dataclass
class InfoHeader:
    width: int
    height: int
    image_data_size: int
    header_size: int = INFO_HEADER_SIZE
    color_planes: int = 1
    bits_per_pixel: int = BITS_PER_PIXEL
    compression: Compression = Compression.RGB
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colors_used: int = 0
    important_colors: int = 0

    def write(self, writer: BinaryWriter) -> None:
        writer.write_u32(self.header_size)
        writer.write_i32(self.width)
        writer.write_i32(self.height)
        writer.write_u16(self.color_planes)
        writer.write_u16(self.bits_per_pixel)
        writer.write_u32(int(self.compression))
        writer.write_u32(self.image_data_size)
        writer.write_i32(self.x_pixels_per_meter)
        writer.write_i32(self.y_pixels_per_meter)
        writer.write_u32(self.colors_used)
        writer.write_u32(self.important_colors)


def build_headers(width: int, height: int) -> tuple[FileHeader, InfoHeader]:
    """Build both header records for an image of the given size.

    Dimensions are not validated; the container that owns the pixels is
    expected to reject empty or negative sizes.
    """

    image_data_size = height * padded_row_bytes(width)
    file_header = FileHeader(file_size=PIXEL_DATA_OFFSET + image_data_size)
    info_header = InfoHeader(width=width, height=height, image_data_size=image_data_size)
    return file_header, info_header
