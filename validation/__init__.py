"""
Validation Framework for the Shape Predicate Engine.

This module provides consistency checks over predicate results.
"""

from validation.shape_checks import (
    ShapeConsistencyChecker,
    ValidationResult,
)

__all__ = [
    "ShapeConsistencyChecker",
    "ValidationResult",
]
