"""
Tests for ray-casting point-in-polygon.
"""

import numpy as np
import pytest

from geoshape.containment import (
    polygon_contains_any,
    polygon_contains_point,
    polygon_contains_points,
)


def _ring(coords):
    return np.array(coords, dtype=np.float64).reshape(-1, 2)


class TestPolygonContainsPoint:

    def test_centre_of_diamond(self, diamond):
        assert polygon_contains_point(_ring(diamond), np.array([0.0, 0.0])) is True

    def test_outside_diamond(self, diamond):
        assert polygon_contains_point(_ring(diamond), np.array([3.0, 3.0])) is False

    def test_centre_of_square(self, square):
        assert polygon_contains_point(_ring(square), np.array([2.0, 2.0])) is True

    @pytest.mark.parametrize("lat, expected", [
        (-3.0, False),
        (-1.0, True),
        (1.0, True),
        (3.0, False),
    ])
    def test_ray_through_shared_vertex_counted_once(self, diamond, lat, expected):
        # Longitude 0 passes through the vertices (-2, 0) and (2, 0)
        assert polygon_contains_point(_ring(diamond), np.array([lat, 0.0])) is expected

    def test_concave_notch_is_outside(self):
        # A "U" opening north: the notch between the arms is outside
        u_shape = _ring([0, 0, 3, 0, 3, 1, 1, 1, 1, 2, 3, 2, 3, 3, 0, 3])
        assert polygon_contains_point(u_shape, np.array([2.0, 1.5])) is False
        assert polygon_contains_point(u_shape, np.array([2.0, 0.5])) is True
        assert polygon_contains_point(u_shape, np.array([0.5, 1.5])) is True


class TestManyPoints:

    def test_vectorized_matches_scalar(self, diamond):
        ring = _ring(diamond)
        points = np.array([[0.0, 0.0], [3.0, 3.0], [1.0, 0.5], [-1.5, -1.0]])
        expected = [polygon_contains_point(ring, p) for p in points]
        assert polygon_contains_points(ring, points).tolist() == expected

    def test_any(self, diamond):
        ring = _ring(diamond)
        assert polygon_contains_any(ring, np.array([[5.0, 5.0], [0.5, 0.5]])) is True
        assert polygon_contains_any(ring, np.array([[5.0, 5.0], [-5.0, 0.0]])) is False


class TestSelfIntersecting:

    def test_star_arm_is_inside(self, star):
        assert polygon_contains_point(_ring(star), np.array([1.2, 0.0])) is True

    def test_star_centre_is_outside_under_even_odd_rule(self, star):
        assert polygon_contains_point(_ring(star), np.array([0.0, 0.0])) is False
