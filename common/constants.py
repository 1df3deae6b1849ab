"""
Geometric Constants for Spherical Shape Predicates.

This module provides the numeric constants shared by the predicate engine.
Each constant carries its unit and provenance so that downstream code never
hard-codes a magic number.

References
----------
- Earth mean radius: IUGG, Moritz (2000), "Geodetic Reference System 1980"
- Spherical polygon area: Miller, R.D., "Computing the Area of a Spherical
  Polygon", Graphics Gems IV (1994)
"""

from dataclasses import dataclass
from typing import Final
import numpy as np


@dataclass(frozen=True)
class Constant:
    """A constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant, as understood by the pint registry.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeometryConstants:
    """Registry of constants used throughout the predicate engine.

    Coordinate Limits
    -----------------
    Latitudes and longitudes are plain degrees. A shape whose coordinates
    fall outside these limits is rejected during classification.

    Sphere
    ------
    Areas are computed on the unit sphere as a fraction of its surface.
    The Earth constants only scale that fraction into physical units.
    """

    # =========================================================================
    # Coordinate Limits
    # =========================================================================

    MIN_LATITUDE: Final[float] = -90.0
    MAX_LATITUDE: Final[float] = +90.0
    MIN_LONGITUDE: Final[float] = -180.0
    MAX_LONGITUDE: Final[float] = +180.0

    # Degrees to radians
    RADIANS: Final[float] = np.pi / 180.0

    # 360 degrees of longitude times the pole-to-pole sine difference of 2
    INV_720: Final[float] = 1.0 / 720.0

    # =========================================================================
    # Earth Sphere
    # =========================================================================

    EARTH_MEAN_RADIUS: Final[Constant] = Constant(
        value=6_371_008.8,
        uncertainty=0.1,
        unit="m",
        source="IUGG mean radius",
        description="Mean radius of Earth, used to scale unit-sphere area fractions"
    )

    EARTH_SURFACE_AREA: Final[Constant] = Constant(
        value=510_072_000.0,
        uncertainty=1_000.0,
        unit="km**2",
        source="NASA Earth Fact Sheet",
        description="Total surface area of Earth"
    )

    @staticmethod
    def sphere_surface_area(radius: float) -> float:
        """Compute the surface area of a sphere.

        Parameters
        ----------
        radius : float
            Sphere radius in any length unit.

        Returns
        -------
        float
            Surface area 4πr² in the square of that unit.
        """
        return 4.0 * np.pi * radius * radius
