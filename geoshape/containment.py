"""
Point-in-Polygon by Ray Casting.

A ray is cast from the test point towards increasing latitude. Each ring
edge whose longitude span covers the point and whose latitude, at the
point's longitude, lies beyond the point counts as one crossing. An odd
number of crossings means the point is inside (even-odd rule).

The longitude span of an edge is half-open: an edge from lon1 to lon2 covers
lon when ``lon1 <= lon < lon2`` (or the mirrored case). A ray through a
shared vertex is therefore attributed to exactly one of its two edges.

All functions take vertex arrays in degrees, latitude first, and work in
flattened latitude/longitude space.

References
----------
- Bourke, P. (1987). Determining if a point lies on the interior of a polygon.
  http://paulbourke.net/geometry/polygonmesh/#insidepoly
"""

import numpy as np
from numpy.typing import NDArray


def _crossing_counts(
    vertices: NDArray[np.float64],
    points: NDArray[np.float64]
) -> NDArray[np.int64]:
    """Number of ring edges crossed by the ray from each point.

    Parameters
    ----------
    vertices : ndarray
        (n, 2) polygon ring.
    points : ndarray
        (m, 2) test points.

    Returns
    -------
    ndarray
        (m,) crossing counts.
    """
    # (n, 1) edge columns against (1, m) point rows
    lat1 = vertices[:, 0, np.newaxis]
    lon1 = vertices[:, 1, np.newaxis]
    lat2 = np.roll(vertices[:, 0], -1)[:, np.newaxis]
    lon2 = np.roll(vertices[:, 1], -1)[:, np.newaxis]
    lat = points[np.newaxis, :, 0]
    lon = points[np.newaxis, :, 1]

    spans = ((lon1 <= lon) & (lon < lon2)) | ((lon2 <= lon) & (lon < lon1))

    # Spanning edges never have lon1 == lon2; the others get a dummy divisor
    dlon = np.where(lon1 == lon2, 1.0, lon2 - lon1)
    edge_lat = (lat2 - lat1) * (lon - lon1) / dlon + lat1

    crosses = spans & (lat < edge_lat)
    return np.count_nonzero(crosses, axis=0)


def polygon_contains_points(
    vertices: NDArray[np.float64],
    points: NDArray[np.float64]
) -> NDArray[np.bool_]:
    """Ray-cast many points against one polygon.

    Parameters
    ----------
    vertices : ndarray
        (n, 2) polygon ring.
    points : ndarray
        (m, 2) test points.

    Returns
    -------
    ndarray
        (m,) booleans, True where the point is inside.
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return _crossing_counts(vertices, points) % 2 == 1


def polygon_contains_point(
    vertices: NDArray[np.float64],
    point: NDArray[np.float64]
) -> bool:
    """Decide whether a polygon contains a single point.

    Examples
    --------
    >>> import numpy as np
    >>> diamond = np.array([[-2, 0], [0, -2], [2, 0], [0, 2]], dtype=float)
    >>> polygon_contains_point(diamond, np.array([0.0, 0.0]))
    True
    """
    return bool(polygon_contains_points(vertices, point)[0])


def polygon_contains_any(
    vertices: NDArray[np.float64],
    points: NDArray[np.float64]
) -> bool:
    """Decide whether a polygon contains at least one of the given points."""
    return bool(np.any(polygon_contains_points(vertices, points)))
