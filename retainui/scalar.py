"""Scalar constants and helpers shared by the geometry types."""

from __future__ import annotations

import math

PI = math.pi
HALF_PI = PI * 0.5
TWO_PI = PI * 2.0

RADIANS_TO_DEGREES = 180.0 / PI
DEGREES_TO_RADIANS = PI / 180.0

ZERO_TOLERANCE = 1e-6


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEGREES_TO_RADIANS


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * RADIANS_TO_DEGREES


def clamp(value, minimum, maximum):
    """Limit ``value`` to the range ``[minimum, maximum]``."""
    if value < minimum:
        return minimum
    return value if value < maximum else maximum


def floats_equal(a: float, b: float) -> bool:
    """Whether two floats differ by no more than ``ZERO_TOLERANCE``."""
    return abs(a - b) <= ZERO_TOLERANCE