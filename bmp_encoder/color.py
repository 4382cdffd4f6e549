"""Channel conversions from premultiplied float RGBA to output bytes.

All helpers operate on numpy arrays whose last axis holds the four
channels ``(r, g, b, a)``.
"""

from __future__ import annotations

import numpy as np

EMPTY = np.zeros(4, dtype=np.uint8)


def clamp_unit(values: np.ndarray) -> np.ndarray:
    """Clamp ``values`` to ``[0, 1]``, mapping NaN to ``0``."""

    values = np.nan_to_num(np.asarray(values, dtype=np.float32), nan=0.0)
    return np.clip(values, 0.0, 1.0)


def to_non_premultiplied(rgba: np.ndarray) -> np.ndarray:
    """Divide the color channels by alpha.

    Alpha is clamped first. Pixels with zero alpha become the empty color.
    """

    rgba = np.nan_to_num(np.asarray(rgba, dtype=np.float32), nan=0.0)
    alpha = np.clip(rgba[..., 3:4], 0.0, 1.0)
    straight = np.zeros_like(rgba)
    visible = alpha[..., 0] > 0.0
    straight[visible, :3] = rgba[visible, :3] / alpha[visible]
    straight[..., 3:4] = alpha
    return straight


def to_bytes(values: np.ndarray) -> np.ndarray:
    """Scale unit floats to bytes, rounding half up."""

    return np.floor(clamp_unit(values) * 255.0 + 0.5).astype(np.uint8)


def to_output_colors(rgba: np.ndarray, threshold: int = 128) -> np.ndarray:
    """Return byte RGB for each pixel with the transparency cutoff applied.

    Pixels whose straight alpha byte is below ``threshold`` come back as
    ``(0, 0, 0)``.
    """

    colors = to_bytes(to_non_premultiplied(rgba))
    colors[colors[..., 3] < threshold] = EMPTY
    return colors[..., :3]
