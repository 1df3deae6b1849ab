"""
Spherical Area of Shapes.

Areas are fractions of the whole sphere, independent of the sphere's
radius. Points, Boxes and simple Polygon rings give a result in [0, 1].
Multiply by a surface area (see `geoshape.predicates.surface_area`) to get
a physical quantity.

Scientific Context
------------------
Domain: Spherical trigonometry
Model: Unit sphere; edges of polygons are great-circle arcs.

- A Box is the intersection of a lune (bounded by two meridians) and a
  zone (bounded by two parallels), which has a closed-form area.
- A Polygon is summed edge by edge from the spherical excess of the
  triangle each edge forms with the north pole.

References
----------
- Miller, R.D. (1994). Computing the Area of a Spherical Polygon.
  Graphics Gems IV, 132-137.
- Weisstein, E.W. "Zone." MathWorld.
"""

import numpy as np

from common.constants import GeometryConstants
from common.logging_config import get_logger
from common.types import Shape

logger = get_logger(__name__)

RADIANS = GeometryConstants.RADIANS
INV_720 = GeometryConstants.INV_720
QUARTER_PI = 0.25 * np.pi


def point_area(point: Shape) -> float:
    """A point has no area. Euclid's Elements, Book 1, Definition 1."""
    return 0.0


def box_area(box: Shape) -> float:
    """Compute the area of a Box as the intersection of a lune and a zone.

    Parameters
    ----------
    box : Shape
        Box (south, west, north, east) in degrees.

    Returns
    -------
    float
        Fraction of the sphere covered.

    Notes
    -----
    The lune contributes (east - west) / 360 of the sphere, and the zone
    (sin(north) - sin(south)) / 2 of it. Their product is exact for an
    axis-aligned spherical rectangle:

        A = (east - west) * (sin(north) - sin(south)) / 720
    """
    (south, west), (north, east) = box.vertices
    return float(
        INV_720 * (east - west) * (np.sin(RADIANS * north) - np.sin(RADIANS * south))
    )


def polygon_area(polygon: Shape) -> float:
    """Compute the area of a spherical polygon from its spherical excess.

    Parameters
    ----------
    polygon : Shape
        Polygon with three or more vertices in degrees.

    Returns
    -------
    float
        Fraction of the sphere covered. Always finite and non-negative;
        in [0, 1] for simple rings.

    Notes
    -----
    For each edge (lat1, lon1) -> (lat2, lon2), the edge and the north pole
    form a spherical triangle with sides a (the edge), b = π/2 - lat2 and
    c = π/2 - lat1. L'Huilier's theorem gives a quarter of its excess E:

        tan(E/4) = sqrt(tan(s/2) tan((s-a)/2) tan((s-b)/2) tan((s-c)/2))

    The halved sides are used directly below. Each term is signed by the
    direction the edge runs in longitude and the sum is divided by π,
    which turns E/4 into a fraction of the sphere's 4π steradians.

    Edges along a meridian (equal longitudes) enclose no area with the pole
    and are skipped.

    Limitations
    -----------
    The signed sum assumes a simple ring. A self-intersecting ring, or one
    that sweeps the full circle of longitude more than once, can report
    more than the whole sphere.
    """
    lat1 = RADIANS * polygon.latitudes
    lon1 = RADIANS * polygon.longitudes
    lat2 = np.roll(lat1, -1)
    lon2 = np.roll(lon1, -1)

    moving = lon1 != lon2
    if not np.any(moving):
        return 0.0

    lat1, lon1, lat2, lon2 = lat1[moving], lon1[moving], lat2[moving], lon2[moving]
    cos1 = np.cos(lat1)
    cos2 = np.cos(lat2)

    # Half the great-circle length of each edge (haversine form)
    haversine = np.sqrt(0.5) * np.sqrt(
        (1.0 - np.cos(lat2 - lat1)) + cos1 * cos2 * (1.0 - np.cos(lon2 - lon1))
    )
    if np.any(haversine > 1.0):
        # Antipodal endpoints round just past 1
        logger.debug(f"Clipping {np.count_nonzero(haversine > 1.0)} antipodal edge(s) to a half circle")
    a = np.arcsin(np.clip(haversine, 0.0, 1.0))
    b = QUARTER_PI - 0.5 * lat2
    c = QUARTER_PI - 0.5 * lat1
    s = 0.5 * (a + b + c)

    excess = np.abs(np.arctan(np.sqrt(np.abs(
        np.tan(s) * np.tan(s - a) * np.tan(s - b) * np.tan(s - c)
    ))))
    excess = np.where(lon2 < lon1, -excess, excess)

    return float(np.abs(np.sum(excess)) / np.pi)
