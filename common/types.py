"""
Type Definitions for Geographic Shapes.

This module defines the tagged shape variant that flows between the
classifier and the geometric engines. A caller hands the engine a flat
sequence of latitude/longitude pairs; the classifier parses it once into a
`Shape` whose `kind` tells every engine how to read the vertices.

Coordinate Convention
---------------------
- Degrees, not radians.
- Pairs are (latitude, longitude), latitude first.
- A Box is (south, west, north, east).
- A Polygon ring is closed implicitly; the first vertex is never repeated.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, List, Sequence, Tuple, Union
import numpy as np
from numpy.typing import NDArray


class ShapeKind(IntEnum):
    """Kind of a coordinate sequence.

    The integer order is the complexity order used by the two-shape
    dispatcher: POLYGON > BOX > POINT.
    """
    INVALID = 0
    POINT = 1
    BOX = 2
    POLYGON = 3


@dataclass(frozen=True, eq=False)
class Shape:
    """A classified, validated shape.

    Attributes
    ----------
    kind : ShapeKind
        POINT, BOX or POLYGON. Never INVALID.
    vertices : ndarray
        Read-only (n, 2) float64 array of (latitude, longitude) rows.
    source : Any
        The sequence the shape was parsed from, returned verbatim where an
        operation is the identity (the bounds of a Box).

    Notes
    -----
    Shapes are immutable value data. Build them with
    `geoshape.classifier.parse_shape` rather than directly; a Shape built
    by hand is revalidated by every public operation it is passed to.
    """
    kind: ShapeKind
    vertices: NDArray[np.float64]
    source: Any = None

    def __post_init__(self):
        """Copy the vertices into a frozen float64 buffer.

        Only the array layout is checked here. Coordinate ranges, Box
        corner order and the vertex count for the kind are checked by
        `geoshape.classifier`, which rechecks every Shape it is handed.
        """
        if self.kind == ShapeKind.INVALID:
            raise ValueError("A Shape cannot be INVALID; use classify() to test sequences")
        object.__setattr__(self, "vertices", np.array(self.vertices, dtype=np.float64))
        if self.vertices.ndim != 2 or self.vertices.shape[1] != 2:
            raise ValueError(f"vertices must be Nx2 array, got shape {self.vertices.shape}")
        self.vertices.flags.writeable = False

    @property
    def latitudes(self) -> NDArray[np.float64]:
        """Latitude column in degrees."""
        return self.vertices[:, 0]

    @property
    def longitudes(self) -> NDArray[np.float64]:
        """Longitude column in degrees."""
        return self.vertices[:, 1]

    def coordinates(self) -> List[float]:
        """Flatten back to the [lat, lon, lat, lon, ...] form."""
        return [float(v) for v in self.vertices.ravel()]

    def as_polygon(self) -> NDArray[np.float64]:
        """Vertices of this shape read as a polygon ring.

        A Box becomes its four corners, walked south-west, north-west,
        north-east, south-east. Points and Polygons return their own
        vertices.
        """
        if self.kind != ShapeKind.BOX:
            return self.vertices
        (south, west), (north, east) = self.vertices
        return np.array(
            [
                [south, west],
                [north, west],
                [north, east],
                [south, east],
            ],
            dtype=np.float64,
        )

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self) -> str:
        return f"Shape({self.kind.name}, {self.coordinates()})"


# Anything the public operations accept as an operand
ShapeLike = Union[Shape, Sequence[float], NDArray[np.float64]]

# Internal segment form (lat1, lon1, lat2, lon2)
Segment = Tuple[float, float, float, float]
