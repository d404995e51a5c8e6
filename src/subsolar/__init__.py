"""
subsolar - Locate the point on Earth directly beneath the sun.

Converts a UTC date-time to a Julian date, computes the sun's declination and
right ascension with a low-precision solar ephemeris, and projects them onto
geographic latitude/longitude through Greenwich sidereal time.

Example:
    from datetime import datetime
    from subsolar import compute_sun_geographic_location

    point = compute_sun_geographic_location(datetime(2000, 6, 21, 12, 0))
    print(point.latitude, point.longitude)
"""

from .angles import normalize_angle, normalize_longitude
from .errors import InvalidArgumentError, Reason
from .geographic import celestial_to_geographic, compute_sun_geographic_location
from .julian import J2000, compute_julian_date
from .schemas import CelestialLocation, GeographicLocation
from .solar import compute_sun_celestial_location

__version__ = "0.1.0"

__all__ = [
    "J2000",
    "CelestialLocation",
    "GeographicLocation",
    "InvalidArgumentError",
    "Reason",
    "__version__",
    "celestial_to_geographic",
    "compute_julian_date",
    "compute_sun_celestial_location",
    "compute_sun_geographic_location",
    "normalize_angle",
    "normalize_longitude",
]
