"""Numeric tolerance shared by every approximate comparison."""

import math

STANDARD_TOLERANCE = 1e-6


def validate_tolerance(tolerance: float) -> float:
    """Return tolerance unchanged, or raise ValueError if it is unusable.

    A tolerance must be a finite, non-negative number.
    """
    if math.isnan(tolerance):
        raise ValueError("tolerance must be a valid number, got nan")
    if math.isinf(tolerance):
        raise ValueError(f"tolerance must be finite, got {tolerance!r}")
    if tolerance < 0.0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance!r}")
    return tolerance
