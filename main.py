"""Convert an image file to a 24-bit BMP."""

from __future__ import annotations

from bmp_encoder.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
