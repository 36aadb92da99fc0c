"""
Tests for shape serialization to absolute surface coordinates.

Run with: pytest tests/test_serialize.py -v
"""
import math

import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.shape import Shape

SURFACE = [10, 20, 200, 100]
BOX = [0.1, 0.2, 0.3, 0.4]


def _bounds(points):
    xs, ys = points[0::2], points[1::2]
    return [min(xs), min(ys), max(xs), max(ys)]


class TestSerializeRect:
    """Absolute bounding rectangle per rotation."""

    def test_unrotated_reference(self):
        shape = Shape([0.25, 0.25, 0.5, 0.5])
        assert shape.serialize([0, 0, 200, 100])["rect"] == pytest.approx([50, 25, 150, 75])

    @pytest.mark.parametrize(
        "rotation, expected",
        [
            (0, [30, 60, 90, 100]),
            (90, [50, 30, 130, 60]),
            (180, [130, 40, 190, 80]),
            (270, [90, 80, 170, 110]),
        ],
    )
    def test_rect(self, rotation, expected):
        shape = Shape(BOX, rotation=rotation)
        assert shape.serialize(SURFACE)["rect"] == pytest.approx(expected)

    @pytest.mark.parametrize("rotation", [0, 90, 180, 270])
    def test_points_match_rect(self, rotation):
        """Mapped corners span exactly the serialized rect."""
        data = Shape(BOX, rotation=rotation).serialize(SURFACE)
        assert _bounds(data["points"][0]) == pytest.approx(data["rect"])

    def test_unknown_rotation_uses_zero_formulas(self):
        odd = Shape(BOX, rotation=45).serialize(SURFACE)
        zero = Shape(BOX, rotation=0).serialize(SURFACE)
        assert odd["rect"] == zero["rect"]
        assert odd["points"] == zero["points"]


class TestSerializePoints:
    """Corner list and highlight outline."""

    def test_points_clockwise_unrotated(self):
        data = Shape([0.25, 0.25, 0.5, 0.5]).serialize([0, 0, 200, 100])
        assert len(data["points"]) == 1
        assert data["points"][0] == pytest.approx([50, 75, 150, 75, 150, 25, 50, 25])

    def test_points_rotated_90_swap_axes(self):
        data = Shape(BOX, rotation=90).serialize(SURFACE)
        # top-left corner (u=0.1, v=0.2) -> (10 + 0.2*200, 20 + 0.1*100)
        assert data["points"][0][:2] == pytest.approx([50, 30])

    def test_outline_has_move_to_markers(self):
        data = Shape(BOX, rotation=180).serialize(SURFACE)
        outline = data["outline"]
        points = data["points"][0]
        assert len(outline) == 24
        for corner in range(4):
            chunk = outline[corner * 6:(corner + 1) * 6]
            assert all(math.isnan(v) for v in chunk[:4])
            assert chunk[4:] == pytest.approx(points[corner * 2:corner * 2 + 2])

    def test_lines_wrap_outline(self):
        data = Shape(BOX).serialize(SURFACE)
        assert data["lines"] == [data["outline"]]
        assert data["lines"][0] is data["outline"]

    def test_for_copy_returns_fresh_buffers(self):
        shape = Shape(BOX)
        first = shape.serialize(SURFACE, for_copy=True)
        second = shape.serialize(SURFACE, for_copy=True)
        assert first["points"][0] == pytest.approx(second["points"][0])
        assert first["points"][0] is not second["points"][0]

    def test_serialize_follows_rotation_changes(self):
        shape = Shape(BOX)
        shape.set_rotation(270)
        assert shape.serialize(SURFACE)["rect"] == pytest.approx([90, 80, 170, 110])
