"""Windows bitmap encoder writing 24-bit uncompressed RGB."""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

import numpy as np

from .color import to_output_colors
from .errors import require, require_text
from .headers import BYTES_PER_PIXEL, build_headers, row_padding
from .image import CHANNELS, PixelImage
from .writer import BinaryWriter

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 128
EXTENSION_ALIASES = ("dip",)


def clamp_threshold(value: int) -> int:
    return min(max(int(value), 0), 255)


class BmpEncoder:
    """Encode premultiplied RGBA images as 24-bit bitmaps.

    The output format carries no alpha channel. Pixels whose straight alpha
    falls below ``threshold`` are written black; every other pixel keeps its
    un-premultiplied color.
    """

    mime_type = "image/bmp"
    extension = "bmp"

    def __init__(self, threshold: int = DEFAULT_THRESHOLD, quality: int = 0) -> None:
        self.threshold = threshold
        # Bitmap is lossless; kept for parity with the other encoders.
        self.quality = quality

    @property
    def threshold(self) -> int:
        """Alpha cutoff, always within ``[0, 255]``."""

        return self._threshold

    @threshold.setter
    def threshold(self, value: int) -> None:
        self._threshold = clamp_threshold(value)

    def is_supported_file_extension(self, extension: str) -> bool:
        require_text(extension, "extension")
        if extension.startswith("."):
            extension = extension[1:]
        extension = extension.lower()
        return extension == self.extension or extension in EXTENSION_ALIASES

    def encode(self, image: PixelImage, stream: BinaryIO) -> None:
        """Write ``image`` to ``stream`` and flush it.

        ``image`` needs ``width``, ``height`` and a flat ``pixels`` buffer.
        Errors raised by the stream propagate and leave it partially
        written.
        """

        require(image, "image")
        require(stream, "stream")

        writer = BinaryWriter(stream)
        file_header, info_header = build_headers(image.width, image.height)
        file_header.write(writer)
        info_header.write(writer)
        self._write_image(writer, image)
        writer.flush()

        logger.debug(
            "Encoded %dx%d bitmap (threshold=%d, %d bytes)",
            image.width,
            image.height,
            self.threshold,
            writer.bytes_written,
        )

    def encode_bytes(self, image: PixelImage) -> bytes:
        buffer = io.BytesIO()
        self.encode(image, buffer)
        return buffer.getvalue()

    def _write_image(self, writer: BinaryWriter, image: PixelImage) -> None:
        width = image.width
        height = image.height
        if width <= 0 or height <= 0:
            return

        rows = np.asarray(image.pixels, dtype=np.float32).reshape(height, width, CHANNELS)
        line = np.zeros(width * BYTES_PER_PIXEL + row_padding(width), dtype=np.uint8)
        pixel_bytes = width * BYTES_PER_PIXEL

        # Bitmaps store the bottom row first.
        for y in range(height - 1, -1, -1):
            rgb = to_output_colors(rows[y], self.threshold)
            line[:pixel_bytes] = rgb[:, ::-1].reshape(-1)
            writer.write_bytes(line.tobytes())
