"""
Configuration dataclasses.
"""

from dataclasses import dataclass


@dataclass
class CheckerConfig:
    """Configuration for shape consistency checking.

    Attributes
    ----------
    area_tolerance : float
        Absolute slack allowed when an area must lie in [0, 1] or two
        areas must agree.
    strict_mode : bool
        If True, a failed check raises AssertionError instead of only
        being reported.
    log_violations : bool
        Whether failed checks are logged at WARNING.
    """
    area_tolerance: float = 1e-9
    strict_mode: bool = False
    log_violations: bool = True

    def __post_init__(self):
        """Validate tolerance."""
        if not self.area_tolerance >= 0.0:
            raise ValueError(
                f"area_tolerance must be non-negative, got {self.area_tolerance}"
            )
