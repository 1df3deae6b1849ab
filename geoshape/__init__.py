"""
Geographic Shape Predicate Engine.

Shapes are flat sequences of (latitude, longitude) pairs in degrees:

- [lat, lon]                          a Point
- [south, west, north, east]          a Box
- [lat0, lon0, lat1, lon1, lat2, ...] a Polygon (implicitly closed)

This package provides:
- Shape classification and parsing
- Kind-based dispatch for one and two shapes
- Spherical area and bounding boxes
- Segment intersection and point-in-polygon tests
- Overlap and containment between any two shapes
"""

from geoshape.classifier import classify, parse_shape

from geoshape.dispatch import apply1, apply2, apply2_ordered

from geoshape.segments import (
    segments_intersect,
    polygon_intersects_segment,
    polygons_intersect,
)

from geoshape.containment import (
    polygon_contains_point,
    polygon_contains_points,
    polygon_contains_any,
)

from geoshape.predicates import (
    area,
    bounds,
    overlaps,
    contains,
    surface_area,
)

__all__ = [
    # Classification
    "classify",
    "parse_shape",
    # Dispatch
    "apply1",
    "apply2",
    "apply2_ordered",
    # Segment engine
    "segments_intersect",
    "polygon_intersects_segment",
    "polygons_intersect",
    # Point-in-polygon engine
    "polygon_contains_point",
    "polygon_contains_points",
    "polygon_contains_any",
    # Predicates
    "area",
    "bounds",
    "overlaps",
    "contains",
    "surface_area",
]
