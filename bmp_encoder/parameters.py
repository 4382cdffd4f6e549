"""Encoder settings."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from .encoder import DEFAULT_THRESHOLD, BmpEncoder, clamp_threshold


@dataclass(frozen=True)
class EncoderSettings:
    """Options shared by every encode call of one encoder.

    ``threshold`` is clamped to ``[0, 255]`` on construction.
    """

    threshold: int = DEFAULT_THRESHOLD
    quality: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "threshold", clamp_threshold(self.threshold))

    def create_encoder(self) -> BmpEncoder:
        return BmpEncoder(threshold=self.threshold, quality=self.quality)


DEFAULT_SETTINGS = EncoderSettings()


def load_settings(path: Path | None) -> EncoderSettings:
    if path is None:
        return DEFAULT_SETTINGS
    with Path(path).open("r", encoding="utf-8") as fp:
        data = json.load(fp)
    return EncoderSettings(**data)
