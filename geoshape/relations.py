"""
Spatial Relations Between Pairs of Shapes.

Handlers for the `overlaps` and `contains` dispatch tables. Each handler
receives parsed shapes in the order its name gives. Boxes are lowered to
their four-corner ring whenever they meet a polygon, so every polygon
relation runs through the same two engines: segment intersection and
point-in-polygon.

Approximations
--------------
The polygon relations are not a full polygon-set algebra:

- Overlap is "some edges cross, or one polygon contains a vertex of the
  other". Edge crossing uses strict cross-product tests, so shapes that
  only touch along a boundary may be reported as not overlapping.
- Containment is "a contains the first vertex of b, and no edges cross".
  A polygon whose ring loops around another without crossing it (a
  self-intersecting star, or a concave ring wrapped around a hole) can be
  reported as containing or contained when it is not.
"""

import numpy as np

from common.types import Shape
from geoshape.containment import polygon_contains_any, polygon_contains_point
from geoshape.segments import polygons_intersect


# =============================================================================
# Polygon Engine
# =============================================================================

def polygons_overlap(a: Shape, b: Shape) -> bool:
    """Two polygons overlap if their edges cross or either holds a vertex of the other."""
    ring_a = a.as_polygon()
    ring_b = b.as_polygon()
    return (
        polygons_intersect(ring_a, ring_b)
        or polygon_contains_any(ring_a, ring_b)
        or polygon_contains_any(ring_b, ring_a)
    )


def polygon_contains_polygon(a: Shape, b: Shape) -> bool:
    """A polygon contains another if it holds b's first vertex and no edges cross."""
    ring_a = a.as_polygon()
    ring_b = b.as_polygon()
    return (
        polygon_contains_point(ring_a, ring_b[0])
        and not polygons_intersect(ring_a, ring_b)
    )


# =============================================================================
# Overlaps (commutative; higher-complexity kind first)
# =============================================================================

def point_overlaps_point(a: Shape, b: Shape) -> bool:
    """Two points overlap if they are exactly equal."""
    return bool(np.array_equal(a.vertices, b.vertices))


def box_overlaps_point(box: Shape, point: Shape) -> bool:
    """A point and a box overlap if the point is within the box, edges included."""
    (south, west), (north, east) = box.vertices
    lat, lon = point.vertices[0]
    return bool(south <= lat <= north and west <= lon <= east)


def box_overlaps_box(a: Shape, b: Shape) -> bool:
    """Two boxes overlap if their latitude and longitude intervals both meet."""
    (a_south, a_west), (a_north, a_east) = a.vertices
    (b_south, b_west), (b_north, b_east) = b.vertices
    return bool(
        a_south <= b_north and a_west <= b_east
        and a_north >= b_south and a_east >= b_west
    )


def polygon_overlaps_point(polygon: Shape, point: Shape) -> bool:
    """A point and a polygon overlap if the point is within the polygon."""
    return polygon_contains_point(polygon.vertices, point.vertices[0])


def polygon_overlaps_box(polygon: Shape, box: Shape) -> bool:
    return polygons_overlap(polygon, box)


def polygon_overlaps_polygon(a: Shape, b: Shape) -> bool:
    return polygons_overlap(a, b)


# =============================================================================
# Contains (ordered; first argument is the container)
# =============================================================================

def point_contains_point(a: Shape, b: Shape) -> bool:
    return point_overlaps_point(a, b)


def point_contains_box(point: Shape, box: Shape) -> bool:
    """A point contains only a box collapsed onto it."""
    return bool(np.all(box.vertices == point.vertices[0]))


def point_contains_polygon(point: Shape, polygon: Shape) -> bool:
    """A point contains only a polygon whose every vertex is the point."""
    return bool(np.all(polygon.vertices == point.vertices[0]))


def box_contains_point(box: Shape, point: Shape) -> bool:
    return box_overlaps_point(box, point)


def box_contains_box(a: Shape, b: Shape) -> bool:
    """A box contains another if both of the other's corners lie inside it."""
    (a_south, a_west), (a_north, a_east) = a.vertices
    (b_south, b_west), (b_north, b_east) = b.vertices
    return bool(
        a_south <= b_south and a_west <= b_west
        and a_north >= b_north and a_east >= b_east
    )


def box_contains_polygon(box: Shape, polygon: Shape) -> bool:
    """A box contains a polygon if every vertex lies inside it.

    Boxes are convex in flattened latitude/longitude space, so straight
    edges between inside vertices stay inside.
    """
    (south, west), (north, east) = box.vertices
    lat = polygon.latitudes
    lon = polygon.longitudes
    return bool(np.all((south <= lat) & (lat <= north) & (west <= lon) & (lon <= east)))


def polygon_contains_point_shape(polygon: Shape, point: Shape) -> bool:
    return polygon_contains_point(polygon.vertices, point.vertices[0])


def polygon_contains_box(polygon: Shape, box: Shape) -> bool:
    return polygon_contains_polygon(polygon, box)
