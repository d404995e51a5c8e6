"""Angle normalization helpers and degree/radian conversion factors."""

from __future__ import annotations

import math

from subsolar.errors import Reason, invalid_argument

DEGREES_TO_RADIANS = math.pi / 180.0
RADIANS_TO_DEGREES = 180.0 / math.pi


def normalize_angle(angle: float) -> float:
    """Normalize an angle in degrees to [0, 360).

    Uses floor-based modulo so negative angles wrap correctly. NaN is not
    rejected and propagates.
    """
    if angle is None:
        raise invalid_argument("normalize_angle", Reason.MISSING_ANGLE)
    if not math.isfinite(angle):
        # math.floor rejects NaN and infinities
        return math.nan
    turns = angle / 360.0
    result = 360.0 * (turns - math.floor(turns))
    # Tiny negative angles round up to a full turn
    return 0.0 if result >= 360.0 else result


def normalize_longitude(angle: float) -> float:
    """Wrap an angle in degrees to the longitude range (-180, 180]."""
    if angle is None:
        raise invalid_argument("normalize_longitude", Reason.MISSING_ANGLE)
    lon = angle % 360.0
    if lon > 180.0:
        lon -= 360.0
    return lon
