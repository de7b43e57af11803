"""Tests for RGB distance and WCAG contrast helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from capcolor.core.palette.color_math import (
    contrast_ratio,
    distance_matrix,
    hex_to_rgb,
    relative_luminance,
    rgb_distance,
)


class TestHexToRgb:
    def test_parses_with_and_without_hash(self) -> None:
        assert hex_to_rgb("#FF8000") == (255, 128, 0)
        assert hex_to_rgb("ff8000") == (255, 128, 0)

    def test_lowercase_digits(self) -> None:
        assert hex_to_rgb("#171718") == (23, 23, 24)

    @pytest.mark.parametrize("value", ["", "#FFF", "#GGGGGG", "CR", "#1234567"])
    def test_rejects_non_hex(self, value: str) -> None:
        assert hex_to_rgb(value) is None


class TestDistance:
    def test_euclidean(self) -> None:
        assert rgb_distance((0, 0, 0), (3, 4, 0)) == pytest.approx(5.0)

    def test_unknown_color_is_infinitely_far(self) -> None:
        assert rgb_distance(None, (0, 0, 0)) == math.inf
        assert rgb_distance((0, 0, 0), None) == math.inf

    def test_matrix_matches_pairwise(self) -> None:
        rows = [(0, 0, 0), (255, 255, 255)]
        cols = [(3, 4, 0), (255, 255, 255), None]
        m = distance_matrix(rows, cols)

        assert m.shape == (2, 3)
        assert m[0, 0] == pytest.approx(5.0)
        assert m[1, 1] == pytest.approx(0.0)
        assert np.isinf(m[0, 2])
        assert np.isinf(m[1, 2])

    def test_matrix_empty(self) -> None:
        assert distance_matrix([], [(0, 0, 0)]).shape == (0, 1)


class TestContrast:
    def test_black_on_white_is_maximum(self) -> None:
        assert contrast_ratio((0, 0, 0), (255, 255, 255)) == pytest.approx(21.0)

    def test_symmetric(self) -> None:
        a, b = (16, 16, 16), (238, 238, 238)
        assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))

    @pytest.mark.parametrize("rgb", [(0, 0, 0), (23, 23, 24), (128, 64, 200), (255, 255, 255)])
    def test_self_contrast_is_one(self, rgb: tuple[int, int, int]) -> None:
        assert contrast_ratio(rgb, rgb) == pytest.approx(1.0)

    def test_unknown_color_has_no_contrast(self) -> None:
        assert contrast_ratio(None, (255, 255, 255)) == 0.0

    def test_luminance_bounds(self) -> None:
        assert relative_luminance((0, 0, 0)) == pytest.approx(0.0)
        assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)

    def test_low_channel_uses_linear_segment(self) -> None:
        # 10/255 = 0.0392 <= 0.03928
        assert relative_luminance((10, 0, 0)) == pytest.approx(0.2126 * (10 / 255) / 12.92)
