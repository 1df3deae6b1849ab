"""
Public Shape Predicates.

The four questions the engine answers about shapes, plus a physical-area
convenience:

- `area`: fraction of the sphere a shape covers
- `bounds`: minimal [south, west, north, east] box around a shape
- `overlaps`: whether two shapes share any point (commutative)
- `contains`: whether the first shape holds the second (not commutative)
- `surface_area`: `area` scaled onto a sphere of given radius, with units

Every operand is classified on each call; an invalid one raises
`InvalidShapeError`. All functions are pure and safe to call from any
number of threads.

Examples
--------
>>> area([-90, -180, 0, 180])
0.5
>>> bounds([0, 0, 0, 3, 2, 0])
[0.0, 0.0, 2.0, 3.0]
>>> overlaps([0, 0], [-1, -1, 1, 1])
True
>>> contains([0, 0], [-1, -1, 1, 1])
False
"""

from typing import Any, Optional, Union

import pint

from common.constants import GeometryConstants
from common.types import ShapeKind, ShapeLike
from common.units import Q_, ensure_quantity, validate_units
from geoshape.area import box_area, point_area, polygon_area
from geoshape.bounds import box_bounds, point_bounds, polygon_bounds
from geoshape import relations
from geoshape.dispatch import apply1, apply2, apply2_ordered


def area(shape: ShapeLike) -> float:
    """Return the area of a shape as a fraction of the entire globe's area.

    Parameters
    ----------
    shape : sequence of float or Shape
        Point, Box or Polygon in degrees.

    Returns
    -------
    float
        Covered fraction of the sphere, in [0, 1] for every Point, Box and
        simple Polygon ring. Self-intersecting rings may exceed 1.

    Raises
    ------
    InvalidShapeError
        If `shape` is not a valid shape.
    """
    return apply1(shape, point_area, box_area, polygon_area)


def bounds(shape: ShapeLike) -> Any:
    """Return the minimal bounding box of a shape.

    Parameters
    ----------
    shape : sequence of float or Shape
        Point, Box or Polygon in degrees.

    Returns
    -------
    list of float
        [south, west, north, east]. A Box is returned unchanged.

    Raises
    ------
    InvalidShapeError
        If `shape` is not a valid shape.
    """
    return apply1(shape, point_bounds, box_bounds, polygon_bounds)


def overlaps(a: ShapeLike, b: ShapeLike) -> bool:
    """Decide whether two shapes overlap.

    ``overlaps(a, b) == overlaps(b, a)`` for every pair of valid shapes.

    Raises
    ------
    InvalidShapeError
        If either operand is not a valid shape.
    """
    return apply2(
        a,
        b,
        relations.point_overlaps_point,
        relations.box_overlaps_point,
        relations.box_overlaps_box,
        relations.polygon_overlaps_point,
        relations.polygon_overlaps_box,
        relations.polygon_overlaps_polygon,
    )


_CONTAINS = {
    (ShapeKind.POINT, ShapeKind.POINT): relations.point_contains_point,
    (ShapeKind.POINT, ShapeKind.BOX): relations.point_contains_box,
    (ShapeKind.POINT, ShapeKind.POLYGON): relations.point_contains_polygon,
    (ShapeKind.BOX, ShapeKind.POINT): relations.box_contains_point,
    (ShapeKind.BOX, ShapeKind.BOX): relations.box_contains_box,
    (ShapeKind.BOX, ShapeKind.POLYGON): relations.box_contains_polygon,
    (ShapeKind.POLYGON, ShapeKind.POINT): relations.polygon_contains_point_shape,
    (ShapeKind.POLYGON, ShapeKind.BOX): relations.polygon_contains_box,
    (ShapeKind.POLYGON, ShapeKind.POLYGON): relations.polygon_contains_polygon,
}


def contains(a: ShapeLike, b: ShapeLike) -> bool:
    """Decide whether shape `a` contains shape `b`.

    Polygon containers use an approximation: `a` must hold the first
    vertex of `b`, and no edges of the two may cross.

    Raises
    ------
    InvalidShapeError
        If either operand is not a valid shape.
    """
    return apply2_ordered(a, b, _CONTAINS)


@validate_units({'radius': 'm', 'return': 'm**2'})
def surface_area(
    shape: ShapeLike,
    radius: Optional[Union[float, pint.Quantity]] = None,
    unit: str = "km**2"
) -> pint.Quantity:
    """Scale a shape's area fraction onto a sphere.

    Parameters
    ----------
    shape : sequence of float or Shape
        Point, Box or Polygon in degrees.
    radius : float or pint.Quantity, optional
        Sphere radius. Bare numbers are taken as meters (with a warning).
        Defaults to Earth's mean radius.
    unit : str
        Unit of the returned area.

    Returns
    -------
    pint.Quantity
        Covered surface area.

    Examples
    --------
    >>> round(surface_area([41.0, -111.05, 45.0, -104.05]).magnitude, -3)
    253000.0
    """
    fraction = area(shape)

    if radius is None:
        earth = GeometryConstants.EARTH_MEAN_RADIUS
        radius = Q_(earth.value, earth.unit)
    else:
        radius = ensure_quantity(radius, "m")

    total = GeometryConstants.sphere_surface_area(radius)
    return (fraction * total).to(unit)
