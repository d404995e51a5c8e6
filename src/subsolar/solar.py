"""Low-precision solar ephemeris: Julian date to the sun's equatorial coordinates."""

from __future__ import annotations

import logging
import math

from subsolar.angles import DEGREES_TO_RADIANS, RADIANS_TO_DEGREES, normalize_angle
from subsolar.errors import Reason, invalid_argument
from subsolar.julian import J2000
from subsolar.schemas import CelestialLocation

logger = logging.getLogger(__name__)


def compute_sun_celestial_location(julian_date: float) -> CelestialLocation:
    """Compute the sun's declination and right ascension for a Julian date.

    Accurate to about 0.01 degree for a few centuries around J2000.0.
    The range is not enforced.

    Raises:
        InvalidArgumentError: if ``julian_date`` is None.
    """
    if julian_date is None:
        raise invalid_argument("compute_sun_celestial_location", Reason.MISSING_JULIAN_DATE)

    # Days since J2000.0, positive or negative
    num_days = julian_date - J2000

    mean_longitude = normalize_angle(280.460 + 0.9856474 * num_days)
    mean_anomaly = normalize_angle(357.528 + 0.9856003 * num_days) * DEGREES_TO_RADIANS

    ecliptic_longitude = mean_longitude + 1.915 * math.sin(mean_anomaly) + 0.02 * math.sin(2 * mean_anomaly)
    ecliptic_longitude_rad = ecliptic_longitude * DEGREES_TO_RADIANS

    obliquity = (23.439 - 0.0000004 * num_days) * DEGREES_TO_RADIANS

    declination = math.asin(math.sin(obliquity) * math.sin(ecliptic_longitude_rad)) * RADIANS_TO_DEGREES
    right_ascension = math.atan(math.cos(obliquity) * math.tan(ecliptic_longitude_rad)) * RADIANS_TO_DEGREES

    # atan loses the quadrant; compare against the un-normalized longitude
    if 90.0 <= ecliptic_longitude < 270.0:
        right_ascension += 180.0
    right_ascension = normalize_angle(right_ascension)

    logger.debug(
        "Sun at JD %.5f: dec=%.4f ra=%.4f (lambda=%.4f)",
        julian_date,
        declination,
        right_ascension,
        ecliptic_longitude,
    )
    return CelestialLocation(declination=declination, right_ascension=right_ascension)
