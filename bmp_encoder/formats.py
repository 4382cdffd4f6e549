"""Encoder capability interface and extension based lookup."""

from __future__ import annotations

from typing import BinaryIO, Callable, Iterable, Protocol, Sequence

from .encoder import BmpEncoder
from .errors import UnsupportedFormatError
from .image import PixelImage


class ImageEncoder(Protocol):
    mime_type: str
    extension: str

    def is_supported_file_extension(self, extension: str) -> bool:
        ...

    def encode(self, image: PixelImage, stream: BinaryIO) -> None:
        ...


# Factories; each lookup builds a new encoder.
DEFAULT_ENCODERS: Sequence[Callable[[], ImageEncoder]] = (BmpEncoder,)


def find_encoder(
    extension: str, encoders: Iterable[ImageEncoder] | None = None
) -> ImageEncoder:
    """Return the first encoder that accepts ``extension``.

    Without ``encoders`` a new instance of each default encoder is tried.
    """

    if encoders is None:
        encoders = (factory() for factory in DEFAULT_ENCODERS)
    for encoder in encoders:
        if encoder.is_supported_file_extension(extension):
            return encoder
    raise UnsupportedFormatError(f"No encoder registered for extension {extension!r}")
