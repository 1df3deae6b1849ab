"""
Error types raised by the predicate engine.
"""

from typing import Any


class InvalidShapeError(ValueError):
    """Raised when a coordinate sequence is not a Point, Box or Polygon.

    Attributes
    ----------
    shape : Any
        The rejected value, exactly as the caller passed it.
    reason : str
        Why classification failed.
    """

    def __init__(self, shape: Any, reason: str):
        self.shape = shape
        self.reason = reason
        super().__init__(f"invalid shape: {reason}")
