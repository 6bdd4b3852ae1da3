"""Tests for annular-sector path geometry."""

import math

import pytest

from sunburst.geometry import (
    annular_sector,
    arc_segment,
    format_number,
    large_arc_flag,
    polar_to_cartesian,
    view_box,
)


class TestPolarToCartesian:
    def test_zero_angle_on_x_axis(self):
        assert polar_to_cartesian(10, 0) == (10, 0)

    def test_quarter_turn_on_y_axis(self):
        x, y = polar_to_cartesian(10, math.pi / 2)
        assert x == pytest.approx(0, abs=1e-12)
        assert y == pytest.approx(10)


class TestFormatNumber:
    def test_strips_trailing_zeros(self):
        assert format_number(1.0) == "1"
        assert format_number(2.5) == "2.5"

    def test_rounds_to_precision(self):
        assert format_number(0.12345) == "0.123"
        assert format_number(0.12345, precision=1) == "0.1"

    def test_integers_keep_their_zeros(self):
        assert format_number(100, precision=0) == "100"

    def test_negative_zero_collapses(self):
        assert format_number(-0.0001) == "0"
        assert format_number(-1e-14) == "0"


class TestLargeArcFlag:
    def test_half_turn_is_small(self):
        assert large_arc_flag(0, math.pi) == 0

    def test_beyond_half_turn_is_large(self):
        assert large_arc_flag(0, math.pi + 0.1) == 1

    def test_uses_absolute_delta(self):
        assert large_arc_flag(math.pi + 0.1, 0) == 1


class TestArcSegment:
    def test_quarter_arc(self):
        seg = arc_segment(100, 0, math.pi / 2)
        assert seg.d == "M 100 0 A 100 100 0 0 1 0 100"

    def test_reverse_sweep(self):
        seg = arc_segment(110, math.pi / 2, 0, sweep=0)
        assert seg.arc == "A 110 110 0 0 0 110 0"
        assert seg.start[1] == pytest.approx(110)


class TestAnnularSector:
    def test_quarter_sector_path(self):
        d = annular_sector(100, 10, 0, math.pi / 2)
        assert d == (
            "M 100 0 A 100 100 0 0 1 0 100 "
            "L 0 110 A 110 110 0 0 0 110 0 "
            "L 100 0 Z"
        )

    def test_single_closed_subpath(self):
        d = annular_sector(50, 5, 0.3, 2.1)
        assert d.startswith("M ")
        assert d.endswith(" Z")
        assert d.count("M") == 1
        assert d.count("A") == 2

    def test_large_sector_flags_both_arcs(self):
        d = annular_sector(100, 10, 0, 1.5 * math.pi)
        assert "A 100 100 0 1 1" in d
        assert "A 110 110 0 1 0" in d

    def test_half_turn_flags_small(self):
        d = annular_sector(100, 10, 0, math.pi)
        assert "A 100 100 0 0 1" in d


class TestViewBox:
    def test_square_centered_on_origin(self):
        assert view_box(120) == "-120 -120 240 240"
