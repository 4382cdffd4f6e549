"""Command line interface for the bitmap encoder."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

from PIL import Image

from .errors import InvalidArgumentError, UnsupportedFormatError
from .formats import find_encoder
from .image import PixelImage
from .parameters import load_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert an image to a 24-bit BMP")
    parser.add_argument("input", type=Path, help="Path to any image Pillow can read")
    parser.add_argument("output", type=Path, help="Destination .bmp or .dip file")
    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Alpha cutoff below which pixels are written black (default: 128)",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Optional JSON file overriding the default encoder settings",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.settings)
    if args.threshold is not None:
        settings = dataclasses.replace(settings, threshold=args.threshold)

    try:
        encoder = find_encoder(args.output.suffix, (settings.create_encoder(),))
    except (InvalidArgumentError, UnsupportedFormatError) as exc:
        parser.error(f"Cannot write {args.output}: {exc}")

    with Image.open(args.input) as source:
        image = PixelImage.from_pil(source)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("wb") as fh:
        encoder.encode(image, fh)
    logger.info("Wrote %s (%dx%d)", args.output, image.width, image.height)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
