"""
Segment Intersection in Flattened Latitude/Longitude Space.

Two segments cross when the endpoints of each lie on opposite sides of the
line through the other. The side of a point is the sign of a 2-D cross
product, computed with latitude and longitude treated as plane coordinates.

Limitations
-----------
This is a planar approximation. It ignores great-circle curvature and
does not handle segments that cross the antimeridian.

Tie-Break
---------
Sides are compared with a strict ``>``, so a zero cross product falls on
the clockwise side:

- Exactly collinear segments never intersect, even when they overlap.
- Segments that touch only at an endpoint intersect only if that endpoint
  is counted on the opposite side from its companion, which happens when
  the companion lies strictly on the counter-clockwise side.

Callers needing exact boundary-touching semantics must not rely on this
test.
"""

import numpy as np
from numpy.typing import NDArray

from common.types import Segment


def polygon_edges(vertices: NDArray[np.float64]) -> NDArray[np.float64]:
    """Build the closed ring of edges of a polygon.

    Parameters
    ----------
    vertices : ndarray
        (n, 2) array of (latitude, longitude) rows.

    Returns
    -------
    ndarray
        (n, 4) array; row i is (lat_i, lon_i, lat_i+1, lon_i+1), with the
        last row joining the final vertex back to the first.
    """
    return np.hstack([vertices, np.roll(vertices, -1, axis=0)])


def _crosses(a: NDArray[np.float64], b: NDArray[np.float64]) -> NDArray[np.bool_]:
    """Winding test on broadcastable arrays of segments (last axis of 4)."""
    a0, a1, a2, a3 = a[..., 0], a[..., 1], a[..., 2], a[..., 3]
    b0, b1, b2, b3 = b[..., 0], b[..., 1], b[..., 2], b[..., 3]

    alat = a2 - a0
    alon = a3 - a1
    blat = b2 - b0
    blon = b3 - b1

    # Sides of b's endpoints relative to a, then a's relative to b
    b_straddles_a = ((b1 - a1) * alat > (b0 - a0) * alon) != ((b3 - a1) * alat > (b2 - a0) * alon)
    a_straddles_b = ((a1 - b1) * blat > (a0 - b0) * blon) != ((a3 - b1) * blat > (a2 - b0) * blon)

    return b_straddles_a & a_straddles_b


def segments_intersect(a: Segment, b: Segment) -> bool:
    """Decide whether two segments cross.

    Parameters
    ----------
    a, b : sequence of float
        Segments as (lat1, lon1, lat2, lon2) in degrees.

    Returns
    -------
    bool
        True if each segment's endpoints straddle the other's line.
    """
    return bool(_crosses(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)))


def polygon_intersects_segment(
    vertices: NDArray[np.float64],
    segment: Segment
) -> bool:
    """A segment intersects a polygon if it crosses any of the ring's edges."""
    edges = polygon_edges(vertices)
    return bool(np.any(_crosses(edges, np.asarray(segment, dtype=np.float64))))


def polygons_intersect(
    a: NDArray[np.float64],
    b: NDArray[np.float64]
) -> bool:
    """Decide whether any edge of one polygon crosses any edge of another.

    Parameters
    ----------
    a, b : ndarray
        (n, 2) and (m, 2) vertex arrays.

    Returns
    -------
    bool
        True if at least one of the n * m edge pairs crosses.
    """
    edges_a = polygon_edges(a)[:, np.newaxis, :]
    edges_b = polygon_edges(b)[np.newaxis, :, :]
    return bool(np.any(_crosses(edges_a, edges_b)))
