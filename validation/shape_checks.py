"""
Consistency Checks for Shape Predicates.

This module verifies that predicate results obey the invariants every
shape must satisfy, whatever its coordinates. It is meant for fixture
suites and for auditing shapes that arrive from outside (decoded files,
user input) before they are trusted.

Check Categories
----------------
1. Range (area lies in [0, 1])
2. Idempotence (the bounds of a bounding box are itself)
3. Enclosure (a shape's bounding box contains it)
4. Symmetry (overlap does not depend on operand order)
5. Implication (containment implies overlap)
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from common.config import CheckerConfig
from common.logging_config import get_logger
from common.types import ShapeKind, ShapeLike
from geoshape.classifier import parse_shape
from geoshape.predicates import area, bounds, contains, overlaps


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the check.
    passed : bool
        Whether the check passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class ShapeConsistencyChecker:
    """Checker for consistency of predicate results.

    Examples
    --------
    >>> checker = ShapeConsistencyChecker()
    >>> results = checker.check_all([-1, -1, 1, 1], [0, 0])
    >>> all(r.passed for r in results)
    True
    """

    def __init__(self, config: Optional[CheckerConfig] = None):
        """Initialize shape checker.

        Parameters
        ----------
        config : CheckerConfig, optional
            Tolerance and reporting options. Defaults to `CheckerConfig()`.
        """
        self.config = config or CheckerConfig()
        self._logger = get_logger("ShapeConsistencyChecker")

    def check_all(
        self,
        a: ShapeLike,
        b: ShapeLike
    ) -> List[ValidationResult]:
        """Run every single-shape check on both shapes and every pair check.

        Parameters
        ----------
        a, b : sequence of float or Shape
            Valid shapes. Invalid ones raise `InvalidShapeError`.

        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        """
        a = parse_shape(a)
        b = parse_shape(b)

        results = []
        for shape in (a, b):
            results.append(self.check_area_range(shape))
            results.append(self.check_bounds_idempotent(shape))
            results.append(self.check_bounds_encloses(shape))

        results.append(self.check_overlaps_commutative(a, b))
        results.append(self.check_contains_implies_overlaps(a, b))
        results.append(self.check_contains_implies_overlaps(b, a))

        return results

    def check_area_range(self, shape: ShapeLike) -> ValidationResult:
        """Check that area is a fraction of the sphere. Self-intersecting rings may fail."""
        value = area(shape)
        tol = self.config.area_tolerance
        passed = -tol <= value <= 1.0 + tol

        return self._report(ValidationResult(
            test_name="area_range",
            passed=passed,
            message=f"Area {value:.6e} {'within' if passed else 'outside'} [0, 1]",
            details={'area': value, 'tolerance': tol},
        ))

    def check_bounds_idempotent(self, shape: ShapeLike) -> ValidationResult:
        """Check that bounding a bounding box changes nothing."""
        box = [float(v) for v in bounds(shape)]
        again = [float(v) for v in bounds(box)]

        return self._report(ValidationResult(
            test_name="bounds_idempotent",
            passed=box == again,
            message=f"Bounds {box} -> {again}",
            details={'bounds': box, 'rebounded': again},
        ))

    def check_bounds_encloses(self, shape: ShapeLike) -> ValidationResult:
        """Check that a shape's bounding box contains every vertex of it."""
        shape = parse_shape(shape)
        box = bounds(shape)
        outside = []
        for lat, lon in shape.vertices:
            vertex = [float(lat), float(lon)]
            if not contains(box, vertex):
                outside.append(vertex)

        return self._report(ValidationResult(
            test_name="bounds_encloses",
            passed=not outside,
            message=f"Bounding box check: {len(outside)} vertices outside",
            details={'bounds': list(box), 'outside': outside},
        ))

    def check_overlaps_commutative(self, a: ShapeLike, b: ShapeLike) -> ValidationResult:
        """Check that overlap does not depend on operand order."""
        forward = overlaps(a, b)
        backward = overlaps(b, a)

        return self._report(ValidationResult(
            test_name="overlaps_commutative",
            passed=forward == backward,
            message=f"overlaps(a, b)={forward}, overlaps(b, a)={backward}",
            details={'forward': forward, 'backward': backward},
        ))

    def check_contains_implies_overlaps(self, a: ShapeLike, b: ShapeLike) -> ValidationResult:
        """Check that a containing shape also overlaps what it contains.

        A Polygon collapsed onto a single point is exempt: the point contains
        it, yet ray casting sees no interior to overlap.
        """
        a = parse_shape(a)
        b = parse_shape(b)
        holds = contains(a, b)
        meets = overlaps(a, b)
        degenerate = a.kind == ShapeKind.POINT and b.kind == ShapeKind.POLYGON

        return self._report(ValidationResult(
            test_name="contains_implies_overlaps",
            passed=degenerate or not holds or meets,
            message=f"contains={holds}, overlaps={meets}",
            details={'contains': holds, 'overlaps': meets, 'degenerate': degenerate},
        ))

    def _report(self, result: ValidationResult) -> ValidationResult:
        if result.passed:
            self._logger.debug(f"PASS | {result.test_name} | {result.message}")
            return result

        if self.config.log_violations:
            self._logger.warning(f"FAIL | {result.test_name} | {result.message}")
        if self.config.strict_mode:
            raise AssertionError(f"{result.test_name} failed: {result.message}")
        return result
