"""
Common utilities and infrastructure for the geographic shape predicate engine.

This package provides foundational components used across all modules:
- Geometric constants with provenance
- Unit registry for scaling areas onto a physical sphere
- The tagged shape type and its kinds
- The engine's error type
- Configuration dataclasses
- Logging infrastructure
"""

from common.constants import Constant, GeometryConstants
from common.units import ureg, Q_, validate_units, ensure_quantity
from common.types import ShapeKind, Shape
from common.errors import InvalidShapeError
from common.config import CheckerConfig
from common.logging_config import get_logger

__all__ = [
    "Constant",
    "GeometryConstants",
    "ureg",
    "Q_",
    "validate_units",
    "ensure_quantity",
    "ShapeKind",
    "Shape",
    "InvalidShapeError",
    "CheckerConfig",
    "get_logger",
]
