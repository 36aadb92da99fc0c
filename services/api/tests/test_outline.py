"""
Tests for outline helpers (normalization, rescale, number formatting).

Run with: pytest tests/test_outline.py -v
"""
import math

import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.outline import (
    UNIT_SQUARE_PATH,
    format_number,
    format_view_box,
    normalize_point,
    rescale,
    rescale_and_swap,
    safe_ratio,
    svg_round,
)


class TestNormalizePoint:
    """Pointer pixels -> rotation-aware normalized space."""

    def test_unrotated(self):
        assert normalize_point(250, 100, 1000, 500, 0) == pytest.approx((0.25, 0.2))

    def test_rotated_90(self):
        assert normalize_point(200, 100, 1000, 500, 90) == pytest.approx((0.9, 0.4))

    def test_rotated_180(self):
        assert normalize_point(250, 100, 1000, 500, 180) == pytest.approx((0.75, 0.8))

    def test_rotated_270(self):
        assert normalize_point(200, 100, 1000, 500, 270) == pytest.approx((0.1, 0.6))

    def test_unknown_rotation_falls_back_to_zero(self):
        assert normalize_point(250, 100, 1000, 500, 45) == normalize_point(250, 100, 1000, 500, 0)


class TestRescale:
    """Affine point mapping used by serialization."""

    def test_rescale(self):
        out = rescale([0.25, 0.5, 1.0, 0.0], 10, 20, 100, -50)
        assert out == pytest.approx([35.0, -5.0, 110.0, 20.0])

    def test_rescale_and_swap(self):
        out = rescale_and_swap([0.25, 0.5], 10, 20, 100, 50)
        # (u, v) -> (tx + v*sx, ty + u*sy)
        assert out == pytest.approx([60.0, 32.5])

    def test_writes_into_given_buffer(self):
        buffer = [0.0, 0.0]
        out = rescale([0.5, 0.5], 0, 0, 2, 4, buffer)
        assert out is buffer
        assert buffer == [1.0, 2.0]

    def test_new_list_without_buffer(self):
        src = [0.5, 0.5]
        out = rescale(src, 0, 0, 2, 4)
        assert out is not src
        assert src == [0.5, 0.5]

    def test_nan_propagates(self):
        out = rescale([math.nan, math.nan], 1, 2, 3, 4)
        assert all(math.isnan(v) for v in out)


class TestSvgRound:
    """Display rounding for render descriptors."""

    def test_strips_trailing_zeros(self):
        assert svg_round(0.2) == "0.2"
        assert svg_round(150.0) == "150"
        assert svg_round(0) == "0"

    def test_four_decimals(self):
        assert svg_round(0.123456) == "0.1235"
        assert svg_round(1 / 3) == "0.3333"

    def test_no_negative_zero(self):
        assert svg_round(-0.00001) == "0"

    def test_negative(self):
        assert svg_round(-0.25) == "-0.25"

    def test_view_box(self):
        assert format_view_box([0.25, 0.25, 0.5, 0.125]) == "0.25 0.25 0.5 0.125"


class TestFormatNumber:
    """Unrounded scalar formatting (matrix ratios, scale factors)."""

    def test_integral(self):
        assert format_number(2.0) == "2"
        assert format_number(-1) == "-1"
        assert format_number(0) == "0"

    def test_fractional(self):
        assert format_number(0.5) == "0.5"

    def test_non_finite(self):
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"

    def test_safe_ratio(self):
        assert safe_ratio(1, 4) == 0.25
        assert safe_ratio(1, 0) == math.inf
        assert safe_ratio(-1, 0) == -math.inf
        assert math.isnan(safe_ratio(0, 0))


def test_unit_square_path():
    assert UNIT_SQUARE_PATH == "M0 0 H1 V1 H0 Z"
