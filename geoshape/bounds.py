"""
Bounding Boxes of Shapes.

Every bounding box is returned in the Box layout [south, west, north, east].
Boxes never wrap the antimeridian, so a polygon's box is simply the
componentwise extremes of its vertices.
"""

from typing import Any, List
import numpy as np

from common.types import Shape


def point_bounds(point: Shape) -> List[float]:
    """A point has a very small bounding box: itself, twice."""
    lat, lon = point.vertices[0]
    return [float(lat), float(lon), float(lat), float(lon)]


def box_bounds(box: Shape) -> Any:
    """A box is its own bounding box.

    The caller's sequence is handed back as-is, so ``bounds(box) is box``
    holds for raw sequences.
    """
    return box.source if box.source is not None else box.coordinates()


def polygon_bounds(polygon: Shape) -> List[float]:
    """Compute the componentwise min/max of a polygon's vertices.

    Parameters
    ----------
    polygon : Shape
        Polygon with three or more vertices.

    Returns
    -------
    list of float
        [min_lat, min_lon, max_lat, max_lon].
    """
    south, west = np.min(polygon.vertices, axis=0)
    north, east = np.max(polygon.vertices, axis=0)
    return [float(south), float(west), float(north), float(east)]
