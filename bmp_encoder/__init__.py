"""24-bit Windows bitmap encoder."""

from .encoder import BmpEncoder
from .errors import InvalidArgumentError, UnsupportedFormatError
from .formats import ImageEncoder, find_encoder
from .headers import FileHeader, InfoHeader, build_headers, padded_row_bytes
from .image import PixelImage
from .parameters import EncoderSettings, load_settings

__all__ = [
    "BmpEncoder",
    "InvalidArgumentError",
    "UnsupportedFormatError",
    "ImageEncoder",
    "find_encoder",
    "FileHeader",
    "InfoHeader",
    "build_headers",
    "padded_row_bytes",
    "PixelImage",
    "EncoderSettings",
    "load_settings",
]
