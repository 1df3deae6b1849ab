"""
Shape-Kind Dispatch.

Every public operation is defined as a small table of handlers, one per
shape kind (or pair of kinds). The functions here parse the operands,
reject invalid ones, and route each call to the handler for its kinds.

Two-Shape Dispatch
------------------
Three kinds give nine ordered pairs. A commutative relation needs only six
handler bodies: the operand of higher complexity (POLYGON > BOX > POINT) is
always passed first, and the three mixed pairs that arrive in the other
order are swapped before the call.

A non-commutative relation (containment) supplies a handler for each of the
nine ordered pairs and is dispatched without swapping.
"""

from typing import Any, Callable, Mapping, Tuple, TypeVar

from common.logging_config import get_logger
from common.types import Shape, ShapeKind
from geoshape.classifier import parse_shape

logger = get_logger(__name__)

R = TypeVar("R")

UnaryHandler = Callable[[Shape], R]
BinaryHandler = Callable[[Shape, Shape], R]
OrderedTable = Mapping[Tuple[ShapeKind, ShapeKind], BinaryHandler]


def apply1(
    shape: Any,
    point: UnaryHandler,
    box: UnaryHandler,
    polygon: UnaryHandler,
) -> R:
    """Route a single shape to the handler for its kind.

    Parameters
    ----------
    shape : Any
        Coordinate sequence or parsed `Shape`.
    point, box, polygon : callable
        Handlers taking the parsed `Shape`.

    Returns
    -------
    Any
        Whatever the selected handler returns, unchanged.

    Raises
    ------
    InvalidShapeError
        If `shape` does not classify.
    """
    parsed = parse_shape(shape)
    handlers = {
        ShapeKind.POINT: point,
        ShapeKind.BOX: box,
        ShapeKind.POLYGON: polygon,
    }
    return handlers[parsed.kind](parsed)


def apply2(
    a: Any,
    b: Any,
    point_point: BinaryHandler,
    box_point: BinaryHandler,
    box_box: BinaryHandler,
    polygon_point: BinaryHandler,
    polygon_box: BinaryHandler,
    polygon_polygon: BinaryHandler,
) -> R:
    """Route a pair of shapes to a commutative handler.

    Each handler is named after the kinds of its arguments, in order. When
    the operands arrive with the simpler kind first they are swapped, so
    `apply2(point, box, ...)` calls `box_point(box, point)`.

    Raises
    ------
    InvalidShapeError
        If either operand does not classify.
    """
    first = parse_shape(a)
    second = parse_shape(b)

    if first.kind < second.kind:
        logger.debug(f"Swapping operands: {first.kind.name} x {second.kind.name}")
        first, second = second, first

    handlers = {
        (ShapeKind.POINT, ShapeKind.POINT): point_point,
        (ShapeKind.BOX, ShapeKind.POINT): box_point,
        (ShapeKind.BOX, ShapeKind.BOX): box_box,
        (ShapeKind.POLYGON, ShapeKind.POINT): polygon_point,
        (ShapeKind.POLYGON, ShapeKind.BOX): polygon_box,
        (ShapeKind.POLYGON, ShapeKind.POLYGON): polygon_polygon,
    }
    return handlers[(first.kind, second.kind)](first, second)


def apply2_ordered(a: Any, b: Any, table: OrderedTable) -> R:
    """Route a pair of shapes to a handler for their exact ordered kinds.

    Parameters
    ----------
    a, b : Any
        Coordinate sequences or parsed shapes.
    table : mapping
        Handler for every (kind of a, kind of b) pair.

    Raises
    ------
    InvalidShapeError
        If either operand does not classify.
    KeyError
        If `table` lacks the pair; every table in this package is complete.
    """
    first = parse_shape(a)
    second = parse_shape(b)
    return table[(first.kind, second.kind)](first, second)
