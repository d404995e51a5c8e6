"""Celestial to geographic projection and the sub-solar point."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime

from pydantic import ValidationError

from subsolar.angles import normalize_angle, normalize_longitude
from subsolar.errors import Reason, invalid_argument
from subsolar.julian import J2000, compute_julian_date
from subsolar.schemas import CelestialLocation, GeographicLocation
from subsolar.solar import compute_sun_celestial_location

logger = logging.getLogger(__name__)


def greenwich_mean_sidereal_time(julian_date: float) -> float:
    """Greenwich Mean Sidereal Time in degrees, [0, 360)."""
    return normalize_angle(280.46061837 + 360.98564736629 * (julian_date - J2000))


def celestial_to_geographic(
    celestial_location: CelestialLocation | Mapping[str, float] | object,
    julian_date: float,
) -> GeographicLocation:
    """Project equatorial coordinates onto the Earth at a given Julian date.

    The result is the point where the body is at the zenith: latitude equals
    declination, longitude is the negated Greenwich hour angle.

    Args:
        celestial_location: A CelestialLocation, a mapping with
            ``declination`` and ``right_ascension`` (or ``rightAscension``),
            or any object exposing those two attributes.
        julian_date: Instant of the projection.

    Raises:
        InvalidArgumentError: if either argument is None, or the location
            lacks a numeric declination or right ascension.
    """
    if celestial_location is None:
        raise invalid_argument("celestial_to_geographic", Reason.MISSING_CELESTIAL_LOCATION)
    if not isinstance(celestial_location, CelestialLocation):
        try:
            celestial_location = CelestialLocation.model_validate(celestial_location, from_attributes=True)
        except ValidationError as exc:
            raise invalid_argument("celestial_to_geographic", Reason.MISSING_CELESTIAL_LOCATION) from exc
    if julian_date is None:
        raise invalid_argument("celestial_to_geographic", Reason.MISSING_JULIAN_DATE)

    gmst = greenwich_mean_sidereal_time(julian_date)
    # Greenwich hour angle, measured westward
    gha = normalize_angle(gmst - celestial_location.right_ascension)

    return GeographicLocation(
        latitude=celestial_location.declination,
        longitude=normalize_longitude(-gha),
    )


def compute_sun_geographic_location(date_time: datetime) -> GeographicLocation:
    """Compute the sub-solar point for a UTC date-time.

    Raises:
        InvalidArgumentError: if ``date_time`` is not a ``datetime``.
    """
    if not isinstance(date_time, datetime):
        raise invalid_argument("compute_sun_geographic_location", Reason.MISSING_DATE)

    julian_date = compute_julian_date(date_time)
    celestial = compute_sun_celestial_location(julian_date)
    location = celestial_to_geographic(celestial, julian_date)
    logger.debug("Sub-solar point at %s: %s", date_time.isoformat(), location)
    return location
