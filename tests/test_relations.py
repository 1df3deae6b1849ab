"""
Tests for overlap and containment between any two shapes.
"""

import itertools

import pytest

from common.errors import InvalidShapeError
from geoshape.predicates import contains, overlaps

SHAPES = {
    "origin": [0, 0],
    "far_point": [50, 50],
    "unit_box": [-1, -1, 1, 1],
    "far_box": [10, 10, 11, 11],
    "wide_box": [-5, -5, 5, 5],
    "diamond": [-2, 0, 0, -2, 2, 0, 0, 2],
    "square": [0, 0, 0, 4, 4, 4, 4, 0],
    "big_square": [-10, -10, -10, 10, 10, 10, 10, -10],
    "triangle": [20, 20, 20, 25, 25, 20],
}


class TestOverlaps:

    def test_box_and_point_either_order(self):
        assert overlaps([-1, -1, 1, 1], [0, 0]) is True
        assert overlaps([0, 0], [-1, -1, 1, 1]) is True

    def test_point_overlaps_itself(self):
        assert overlaps([12.5, -3.0], [12.5, -3.0]) is True

    def test_distinct_points(self):
        assert overlaps([0, 0], [0, 1e-9]) is False

    def test_point_on_box_edge(self):
        assert overlaps([-1, -1, 1, 1], [1, 0]) is True

    @pytest.mark.parametrize("a, b, expected", [
        ([0, 0, 2, 2], [0.5, 0.5, 3, 3], True),
        ([0, 0, 1, 1], [2, 2, 3, 3], False),
        ([0, 0, 1, 1], [1, 1, 2, 2], True),
        ([0, 0, 1, 1], [0, 2, 1, 3], False),
        ([-5, -5, 5, 5], [-1, -1, 1, 1], True),
    ])
    def test_boxes(self, a, b, expected):
        assert overlaps(a, b) is expected

    def test_polygon_and_point(self, diamond):
        assert overlaps(diamond, [0, 0]) is True
        assert overlaps([0, 0], diamond) is True
        assert overlaps(diamond, [5, 5]) is False

    def test_box_inside_polygon(self, diamond):
        assert overlaps(diamond, [-0.5, -0.5, 0.5, 0.5]) is True

    def test_polygon_inside_box(self, diamond):
        assert overlaps([-5, -5, 5, 5], diamond) is True

    def test_box_crossing_polygon(self, diamond):
        assert overlaps(diamond, [0.5, 0.5, 3, 3]) is True

    def test_box_away_from_polygon(self, diamond):
        assert overlaps(diamond, [10, 10, 11, 11]) is False

    def test_crossing_polygons(self, square):
        shifted = [v + 2 for v in square]
        assert overlaps(square, shifted) is True

    def test_nested_polygons(self, diamond, big_square):
        assert overlaps(big_square, diamond) is True
        assert overlaps(diamond, big_square) is True

    def test_disjoint_polygons(self, square):
        assert overlaps(square, SHAPES["triangle"]) is False

    @pytest.mark.parametrize("a, b", list(itertools.product(SHAPES, repeat=2)))
    def test_commutative(self, a, b):
        assert overlaps(SHAPES[a], SHAPES[b]) == overlaps(SHAPES[b], SHAPES[a])

    @pytest.mark.parametrize("a, b", [
        ([], [0, 0]),
        ([0, 0], [0, 0, 0]),
        ([0, 0], [1, 1, 0, 0]),
        ([0, 0], [0, 190]),
    ])
    def test_invalid_operand(self, a, b):
        with pytest.raises(InvalidShapeError):
            overlaps(a, b)


class TestContains:

    def test_point_contains_collapsed_box(self):
        assert contains([0, 0], [0, 0, 0, 0]) is True

    def test_point_does_not_contain_box(self):
        assert contains([0, 0], [-1, -1, 1, 1]) is False

    def test_point_contains_equal_point(self):
        assert contains([3, 4], [3, 4]) is True
        assert contains([3, 4], [4, 3]) is False

    def test_point_contains_collapsed_polygon(self):
        assert contains([1, 1], [1, 1, 1, 1, 1, 1]) is True
        assert contains([1, 1], [1, 1, 1, 1, 1, 2]) is False

    def test_box_contains_point(self):
        assert contains([-1, -1, 1, 1], [0, 0]) is True
        assert contains([-1, -1, 1, 1], [2, 0]) is False

    def test_box_contains_box(self):
        assert contains([-5, -5, 5, 5], [-1, -1, 1, 1]) is True
        assert contains([-1, -1, 1, 1], [-5, -5, 5, 5]) is False
        assert contains([-1, -1, 1, 1], [-1, -1, 1, 1]) is True

    def test_box_contains_polygon(self, diamond):
        assert contains([-5, -5, 5, 5], diamond) is True
        assert contains([-1, -1, 1, 1], diamond) is False

    def test_polygon_contains_point(self, diamond):
        assert contains(diamond, [0, 0]) is True
        assert contains(diamond, [5, 5]) is False
        assert contains([0, 0], diamond) is False

    def test_polygon_contains_box(self, diamond):
        assert contains(diamond, [-0.5, -0.5, 0.5, 0.5]) is True
        assert contains(diamond, [-5, -5, 5, 5]) is False
        assert contains(diamond, [0.5, 0.5, 3, 3]) is False

    def test_polygon_contains_polygon(self, diamond, big_square):
        assert contains(big_square, diamond) is True
        assert contains(diamond, big_square) is False

    def test_crossing_polygons_do_not_contain(self, square):
        shifted = [v + 2 for v in square]
        assert contains(square, shifted) is False
        assert contains(shifted, square) is False

    def test_not_commutative(self):
        assert contains([-1, -1, 1, 1], [0, 0]) != contains([0, 0], [-1, -1, 1, 1])

    @pytest.mark.parametrize("a, b", [
        (None, [0, 0]),
        ([0, 0], "0,0"),
        ([1, 1, 0, 0], [0, 0]),
    ])
    def test_invalid_operand(self, a, b):
        with pytest.raises(InvalidShapeError):
            contains(a, b)


class TestDocumentedApproximations:
    """Cases where the vertex-based polygon relations are knowingly inexact."""

    def test_star_centre_is_not_contained(self, star):
        assert contains(star, [0, 0]) is False

    def test_star_arm_is_contained(self, star):
        assert contains(star, [1.2, 0]) is True

    def test_box_in_star_hollow_reports_no_overlap(self, star):
        # The box sits inside the star's outline, but every box corner lies
        # in the even-odd hollow and no edges cross.
        assert overlaps(star, [-0.3, -0.3, 0.3, 0.3]) is False
        assert contains(star, [-0.3, -0.3, 0.3, 0.3]) is False

