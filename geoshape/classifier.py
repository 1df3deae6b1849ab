"""
Shape Classification.

A shape is nothing more than a flat sequence of numbers. Its kind is a
pure function of the sequence length and its values:

- 2 numbers   -> Point
- 4 numbers   -> Box (south-west corner must not exceed north-east corner)
- 6 or more   -> Polygon (any even count)

Everything else is invalid. `classify` answers the question without raising;
`parse_shape` turns a valid sequence into the `Shape` variant that every
engine consumes, and raises `InvalidShapeError` otherwise.
"""

from collections.abc import Sequence
from numbers import Real
from typing import Any, Optional, Tuple
import numpy as np

from common.constants import GeometryConstants
from common.errors import InvalidShapeError
from common.logging_config import get_logger
from common.types import Shape, ShapeKind

logger = get_logger(__name__)


def _is_coordinate(value: Any) -> bool:
    # bool is a Real subclass but never a coordinate
    return isinstance(value, Real) and not isinstance(value, (bool, np.bool_))


def _inspect(shape: Any) -> Tuple[ShapeKind, Optional[str]]:
    """Classify `shape`, returning the kind and, if invalid, the reason."""
    if isinstance(shape, Shape):
        # A built Shape is rechecked; its kind must match its coordinates.
        kind, reason = _inspect(shape.coordinates())
        if kind == ShapeKind.INVALID:
            return kind, reason
        if kind != shape.kind:
            return ShapeKind.INVALID, (
                f"{shape.kind.name} shape has {len(shape)} vertices, "
                f"which classify as {kind.name}"
            )
        return kind, None

    # A shape must be an ordered sequence of numbers.
    if isinstance(shape, np.ndarray):
        if shape.ndim != 1:
            return ShapeKind.INVALID, f"expected a flat array, got {shape.ndim} dimensions"
    elif isinstance(shape, (str, bytes, bytearray)) or not isinstance(shape, Sequence):
        return ShapeKind.INVALID, f"expected a sequence of numbers, got {type(shape).__name__}"

    # A shape must have a nonzero, even length.
    n = len(shape)
    if n == 0:
        return ShapeKind.INVALID, "empty coordinate sequence"
    if n % 2 == 1:
        return ShapeKind.INVALID, f"odd coordinate count {n}"

    # A shape must consist of correctly-bounded latitudes and longitudes.
    for i in range(0, n, 2):
        lat, lon = shape[i], shape[i + 1]
        if not _is_coordinate(lat):
            return ShapeKind.INVALID, f"latitude at index {i} is not a number: {lat!r}"
        if not _is_coordinate(lon):
            return ShapeKind.INVALID, f"longitude at index {i + 1} is not a number: {lon!r}"
        if not GeometryConstants.MIN_LATITUDE <= lat <= GeometryConstants.MAX_LATITUDE:
            return ShapeKind.INVALID, f"latitude {lat} out of range [-90, 90]"
        if not GeometryConstants.MIN_LONGITUDE <= lon <= GeometryConstants.MAX_LONGITUDE:
            return ShapeKind.INVALID, f"longitude {lon} out of range [-180, 180]"

    if n == 2:
        return ShapeKind.POINT, None

    if n == 4:
        # A box's first vertex must be smaller than its second vertex.
        if not (shape[0] <= shape[2] and shape[1] <= shape[3]):
            return ShapeKind.INVALID, (
                f"box corners inverted: ({shape[0]}, {shape[1]}) "
                f"is not south-west of ({shape[2]}, {shape[3]})"
            )
        return ShapeKind.BOX, None

    return ShapeKind.POLYGON, None


def classify(shape: Any) -> ShapeKind:
    """Determine the kind of a coordinate sequence.

    Parameters
    ----------
    shape : Any
        Candidate shape: a flat sequence of (latitude, longitude) pairs in
        degrees, or an already-parsed `Shape`.

    Returns
    -------
    ShapeKind
        POINT, BOX, POLYGON, or INVALID. Never raises.
    """
    kind, _ = _inspect(shape)
    return kind


def parse_shape(shape: Any) -> Shape:
    """Validate a coordinate sequence and build its `Shape` variant.

    Parameters
    ----------
    shape : Any
        Candidate shape. A `Shape` is revalidated and returned unchanged.

    Returns
    -------
    Shape
        The classified shape, with vertices as a read-only (n, 2) array.

    Raises
    ------
    InvalidShapeError
        If the sequence is not a Point, Box or Polygon.
    """
    kind, reason = _inspect(shape)
    if kind == ShapeKind.INVALID:
        logger.debug(f"Rejected shape: {reason}")
        raise InvalidShapeError(shape, reason)

    if isinstance(shape, Shape):
        return shape

    vertices = np.array(shape, dtype=np.float64).reshape(-1, 2)
    return Shape(kind=kind, vertices=vertices, source=shape)
