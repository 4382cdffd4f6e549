"""Minimal pixel container consumed by the encoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image

CHANNELS = 4


@dataclass
class PixelImage:
    """Premultiplied RGBA pixels as normalized floats.

    ``pixels`` is a flat ``float32`` array laid out row-major, top row first,
    with four channels per pixel.
    """

    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        self.pixels = np.asarray(self.pixels, dtype=np.float32).reshape(-1)
        expected = self.width * self.height * CHANNELS
        if self.pixels.size != expected:
            raise ValueError(
                f"Pixel buffer holds {self.pixels.size} values, expected {expected}"
            )

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelImage":
        return cls(width, height, np.zeros(width * height * CHANNELS, dtype=np.float32))

    @classmethod
    def from_rgba_bytes(
        cls,
        width: int,
        height: int,
        data: bytes | Sequence[int] | np.ndarray,
        *,
        premultiplied: bool = False,
    ) -> "PixelImage":
        """Build an image from 8-bit RGBA samples.

        Straight-alpha input is premultiplied on the way in.
        """

        if isinstance(data, (bytes, bytearray)):
            raw = np.frombuffer(data, dtype=np.uint8)
        else:
            raw = np.asarray(data)
        rgba = raw.astype(np.float32).reshape(-1, CHANNELS) / 255.0
        if not premultiplied:
            rgba[:, :3] *= rgba[:, 3:4]
        return cls(width, height, rgba.reshape(-1))

    @classmethod
    def from_pil(cls, image: "Image.Image") -> "PixelImage":
        rgba = image.convert("RGBA")
        return cls.from_rgba_bytes(rgba.width, rgba.height, rgba.tobytes())

    def rows(self) -> np.ndarray:
        """Return a ``(height, width, 4)`` view of the buffer."""

        return self.pixels.reshape(self.height, self.width, CHANNELS)

    def get_pixel(self, x: int, y: int) -> np.ndarray:
        offset = (y * self.width + x) * CHANNELS
        return self.pixels[offset : offset + CHANNELS].copy()

    def set_pixel(self, x: int, y: int, rgba: Sequence[float]) -> None:
        offset = (y * self.width + x) * CHANNELS
        self.pixels[offset : offset + CHANNELS] = rgba
