"""Little-endian fixed-width writes onto a binary stream."""

from __future__ import annotations

import struct
from typing import BinaryIO

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")


class BinaryWriter:
    """Sequence of forward-only writes to ``stream``.

    Every method writes immediately; nothing is buffered here, so the only
    buffering is whatever the stream itself does. Values outside a field's
    range raise :class:`struct.error`.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self.bytes_written = 0

    def write_u16(self, value: int) -> None:
        self.write_bytes(_U16.pack(value))

    def write_u32(self, value: int) -> None:
        self.write_bytes(_U32.pack(value))

    def write_i32(self, value: int) -> None:
        self.write_bytes(_I32.pack(value))

    def write_bytes(self, data: bytes) -> None:
        self.stream.write(data)
        self.bytes_written += len(data)

    def flush(self) -> None:
        """Push pending bytes through to the underlying destination."""

        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()
