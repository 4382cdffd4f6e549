from __future__ import annotations

import numpy as np
import pytest

from bmp_encoder.color import clamp_unit, to_bytes, to_non_premultiplied, to_output_colors


def test_color_channels_are_divided_by_alpha():
    straight = to_non_premultiplied(np.array([[0.25, 0.1, 0.0, 0.5]]))
    assert straight[0] == pytest.approx([0.5, 0.2, 0.0, 0.5])


def test_zero_alpha_becomes_empty():
    straight = to_non_premultiplied(np.array([[1.0, 1.0, 1.0, 0.0]]))
    assert straight[0].tolist() == [0.0, 0.0, 0.0, 0.0]


def test_alpha_is_clamped_before_division():
    straight = to_non_premultiplied(np.array([[0.5, 0.5, 0.5, 3.0], [0.2, 0.2, 0.2, -1.0]]))
    assert straight[0] == pytest.approx([0.5, 0.5, 0.5, 1.0])
    assert straight[1].tolist() == [0.0, 0.0, 0.0, 0.0]


def test_clamp_unit_maps_nan_to_zero():
    values = clamp_unit(np.array([np.nan, -0.5, 0.25, 7.0]))
    assert values.tolist() == [0.0, 0.0, 0.25, 1.0]


def test_to_bytes_rounds_half_up():
    assert to_bytes(np.array([0.0, 0.5, 1.0, 2.0])).tolist() == [0, 128, 255, 255]


def test_output_colors_apply_threshold():
    rgba = np.array(
        [
            [0.4, 0.4, 0.4, 0.4],  # alpha byte 102
            [0.5, 0.0, 0.0, 0.5],  # alpha byte 128
        ]
    )
    assert to_output_colors(rgba, 128).tolist() == [[0, 0, 0], [255, 0, 0]]
    assert to_output_colors(rgba, 100).tolist() == [[255, 255, 255], [255, 0, 0]]
