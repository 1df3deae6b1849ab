"""
Tests for the shape consistency checker.
"""

import logging

import pytest

from common.config import CheckerConfig
from common.errors import InvalidShapeError
from validation import shape_checks
from validation.shape_checks import ShapeConsistencyChecker, ValidationResult


@pytest.fixture
def checker():
    return ShapeConsistencyChecker()


class TestCheckAll:

    @pytest.mark.parametrize("a, b", [
        ([-1, -1, 1, 1], [0, 0]),
        ([0, 0], [0, 0, 0, 0]),
        ([-2, 0, 0, -2, 2, 0, 0, 2], [-0.5, -0.5, 0.5, 0.5]),
        ([0, 0, 0, 4, 4, 4, 4, 0], [2, 2, 2, 6, 6, 6, 6, 2]),
        ([-90, -180, 90, 180], [10, 20]),
    ])
    def test_valid_shapes_pass(self, checker, a, b):
        results = checker.check_all(a, b)
        assert len(results) == 9
        assert all(isinstance(r, ValidationResult) for r in results)
        assert [r.test_name for r in results if not r.passed] == []

    def test_invalid_shape_raises(self, checker):
        with pytest.raises(InvalidShapeError):
            checker.check_all([0, 0], [0, 0, 0])


class TestIndividualChecks:

    def test_area_range_details(self, checker):
        result = checker.check_area_range([-90, -180, 0, 180])
        assert result.passed
        assert result.details['area'] == pytest.approx(0.5)

    def test_bounds_encloses_polygon(self, checker, star):
        result = checker.check_bounds_encloses(star)
        assert result.passed
        assert result.details['outside'] == []

    def test_bounds_idempotent_on_point(self, checker):
        result = checker.check_bounds_idempotent([3, 4])
        assert result.details['bounds'] == [3.0, 4.0, 3.0, 4.0]
        assert result.passed

    def test_collapsed_polygon_exempt_from_implication(self, checker):
        result = checker.check_contains_implies_overlaps([1, 1], [1, 1, 1, 1, 1, 1])
        assert result.passed
        assert result.details == {'contains': True, 'overlaps': False, 'degenerate': True}


class TestFailures:

    @pytest.fixture
    def lopsided(self, monkeypatch):
        monkeypatch.setattr(shape_checks, "overlaps", lambda a, b: a is not b and len(a) > len(b))

    def test_failure_is_reported(self, lopsided, checker, caplog):
        with caplog.at_level(logging.WARNING, logger="ShapeConsistencyChecker"):
            result = checker.check_overlaps_commutative([0, 0, 1, 1], [0, 0])
        assert not result.passed
        assert "FAIL | overlaps_commutative" in caplog.text

    def test_strict_mode_raises(self, lopsided):
        strict = ShapeConsistencyChecker(CheckerConfig(strict_mode=True))
        with pytest.raises(AssertionError, match="overlaps_commutative"):
            strict.check_overlaps_commutative([0, 0, 1, 1], [0, 0])

    def test_quiet_mode_does_not_log(self, lopsided, caplog):
        quiet = ShapeConsistencyChecker(CheckerConfig(log_violations=False))
        with caplog.at_level(logging.WARNING, logger="ShapeConsistencyChecker"):
            result = quiet.check_overlaps_commutative([0, 0, 1, 1], [0, 0])
        assert not result.passed
        assert "FAIL" not in caplog.text


class TestCheckerConfig:

    def test_defaults(self):
        config = CheckerConfig()
        assert config.area_tolerance == 1e-9
        assert config.strict_mode is False
        assert config.log_violations is True

    @pytest.mark.parametrize("tolerance", [-1e-3, float('nan')])
    def test_bad_tolerance(self, tolerance):
        with pytest.raises(ValueError):
            CheckerConfig(area_tolerance=tolerance)
