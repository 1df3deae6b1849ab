"""
Shared shape fixtures.

All shapes are flat [lat, lon, ...] lists in degrees.
"""

import pytest


@pytest.fixture
def diamond():
    """Convex polygon with vertices on the axes, centred on the origin."""
    return [-2, 0, 0, -2, 2, 0, 0, 2]


@pytest.fixture
def square():
    """Axis-aligned square polygon from (0, 0) to (4, 4)."""
    return [0, 0, 0, 4, 4, 4, 4, 0]


@pytest.fixture
def big_square():
    """Square polygon from (-10, -10) to (10, 10), enclosing the diamond."""
    return [-10, -10, -10, 10, 10, 10, 10, -10]


@pytest.fixture
def star():
    """Self-intersecting pentagram of radius 2 centred on the origin.

    Under the even-odd rule the inner pentagon is outside the shape.
    """
    return [
        2.0, 0.0,
        -1.618, -1.1756,
        0.618, 1.902,
        0.618, -1.902,
        -1.618, 1.1756,
    ]


@pytest.fixture
def wyoming_box():
    """Wyoming's state boundary, as a box."""
    return [41.0, -111.05, 45.0, -104.05]


@pytest.fixture
def wyoming_polygon(wyoming_box):
    """Wyoming's state boundary, as a four-corner polygon."""
    south, west, north, east = wyoming_box
    return [south, west, north, west, north, east, south, east]
