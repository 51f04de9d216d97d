"""Unit tests for segment crossing detection.

Covers:
    - orientation pair reported for each argument order
    - crossing point independent of argument order
    - parallel and collinear pairs never cross
    - zero-length segments never cross
    - inclusive bounds
"""

import pytest

from detectors.intersection_detector import check_intersect, crossing_point
from models.direction import Orientation
from models.point import Point

VERT = Orientation.VERTICAL
HOR = Orientation.HORIZONTAL


class TestCheckIntersect:

    def test_a_horizontal_b_vertical(self, line):
        a = line(4, 2, 2, 2)
        b = line(3, 1, 3, 3)
        assert check_intersect(a, b) == (HOR, VERT)

    def test_a_vertical_b_horizontal(self, line):
        a = line(4, 2, 2, 2)
        b = line(3, 1, 3, 3)
        assert check_intersect(b, a) == (VERT, HOR)

    def test_reversed_endpoints(self, line):
        a = line(2, 2, 4, 2)
        b = line(3, 3, 3, 1)
        assert check_intersect(a, b) == (HOR, VERT)
        assert check_intersect(b, a) == (VERT, HOR)

    def test_out_of_horizontal_range(self, line):
        assert check_intersect(line(0, 0, 2, 0), line(3, -1, 3, 1)) is None

    def test_out_of_vertical_range(self, line):
        assert check_intersect(line(0, 5, 6, 5), line(3, -1, 3, 1)) is None

    def test_touching_endpoints_count(self, line):
        assert check_intersect(line(0, 0, 3, 0), line(3, 0, 3, 5)) == (HOR, VERT)

    @pytest.mark.parametrize("a, b", [
        ((0, 0, 5, 0), (3, 0, 8, 0)),      # collinear overlap, horizontal
        ((0, 0, 0, 5), (0, 2, 0, 9)),      # collinear overlap, vertical
        ((0, 0, 5, 0), (0, 1, 5, 1)),      # parallel horizontal
        ((1, 0, 1, 5), (2, 0, 2, 5)),      # parallel vertical
        ((0, 0, 5, 0), (0, 0, 5, 0)),      # identical
    ])
    def test_same_orientation_never_crosses(self, line, a, b):
        assert check_intersect(line(*a), line(*b)) is None
        assert check_intersect(line(*b), line(*a)) is None

    @pytest.mark.parametrize("other", [
        (3, 1, 3, 3),
        (0, 2, 5, 2),
        (3, 2, 3, 2),
    ])
    def test_degenerate_segment_never_crosses(self, line, other):
        point = line(3, 2, 3, 2)
        assert check_intersect(point, line(*other)) is None
        assert check_intersect(line(*other), point) is None


class TestCrossingPoint:

    @pytest.mark.parametrize("h, v, expected", [
        ((4, 2, 2, 2), (3, 1, 3, 3), (3, 2)),
        ((-5, -1, 5, -1), (0, -10, 0, 10), (0, -1)),
        ((0, 7, 10, 7), (10, 0, 10, 7), (10, 7)),
    ])
    def test_order_independent(self, line, h, v, expected):
        horizontal = line(*h)
        vertical = line(*v)
        assert crossing_point(horizontal, vertical) == Point(*expected)
        assert crossing_point(vertical, horizontal) == Point(*expected)

    def test_none_when_no_crossing(self, line):
        assert crossing_point(line(0, 0, 2, 0), line(3, -1, 3, 1)) is None
        assert crossing_point(line(0, 0, 5, 0), line(1, 0, 4, 0)) is None
