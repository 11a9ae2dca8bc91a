"""Angle and vector primitives.

Angles inside Cameraman are turn fractions (1.0 is a full revolution), the
convention used by the authoring tool. The host engine uses 32-bit binary
angles. Conversions keep 65536 steps per turn so that both sides agree
exactly on every value the path evaluators produce.
"""

from __future__ import annotations

import math

from cameraman.constants import ANGLE_MASK, ANGLE_RESOLUTION, FRACBITS, FRACUNIT


def to_turn_fraction(angle: int) -> float:
    """Convert a binary angle to a turn fraction in [0, 1)."""
    return ((angle & ANGLE_MASK) >> FRACBITS) / ANGLE_RESOLUTION


def from_turn_fraction(a: float) -> int:
    """Convert a turn fraction to a binary angle.

    Only the fractional part of `a` is used, so unwrapped values such as
    1.25 or -0.75 map to the same angle as 0.25.
    """
    fraction = a - math.floor(a)
    return (math.floor(fraction * ANGLE_RESOLUTION) << FRACBITS) & ANGLE_MASK


def quantize_turn_fraction(a: float) -> float:
    """Truncate a turn fraction to the engine's angular resolution."""
    return to_turn_fraction(from_turn_fraction(a))


def vector_length(dx: float, dy: float) -> float:
    """Length of the <dx, dy> vector."""
    return math.hypot(dx, dy)


def vector_bearing(dx: float, dy: float) -> float:
    """Angle of the <dx, dy> vector relative to the origin, as a turn fraction.

    East is 0.0 and angles grow counter-clockwise. A zero vector has bearing
    0.0, and so does a vector with a non-finite component (an extreme profile
    can overflow a finite difference).
    """
    if (dx == 0 and dy == 0) or not (math.isfinite(dx) and math.isfinite(dy)):
        return 0.0
    return quantize_turn_fraction(math.atan2(dy, dx) / math.tau)


def unwrap_angle(angle: float, prev_angle: float) -> float:
    """Move `angle` by a whole turn when it crossed east relative to `prev_angle`.

    Examples:
        unwrap_angle(0.01, 0.99) == 1.01
        unwrap_angle(0.99, 0.01) == -0.01 (approximately)
    """
    if angle - prev_angle < -0.5:
        # crossed 1.0 moving counter-clockwise
        return angle + 1.0
    if angle - prev_angle > 0.5:
        # crossed 0.0 moving clockwise
        return angle - 1.0
    return angle


def to_fixed(value: float) -> int:
    """Convert a float to 16.16 fixed point, truncating toward zero."""
    return int(value * FRACUNIT)
