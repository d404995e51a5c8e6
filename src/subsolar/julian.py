"""Calendar date-time to Julian date conversion."""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime

from subsolar.errors import Reason, invalid_argument

logger = logging.getLogger(__name__)

# Julian date of 2000-01-01 12:00 UTC
J2000 = 2451545.0


def _as_utc(dt: datetime) -> datetime:
    # Naive datetimes are already UTC
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(UTC)


def compute_julian_date(date_time: datetime) -> float:
    """Convert a UTC calendar date-time to a Julian date.

    Gregorian calendar, fractional day from the time of day (microseconds
    included). Naive datetimes are read as UTC; aware ones are converted.

    Raises:
        InvalidArgumentError: if ``date_time`` is not a ``datetime``.
    """
    if not isinstance(date_time, datetime):
        raise invalid_argument("compute_julian_date", Reason.MISSING_DATE)

    utc = _as_utc(date_time)
    year = utc.year
    month = utc.month
    day = utc.day
    second = utc.second + utc.microsecond / 1_000_000.0

    day_fraction = (utc.hour + utc.minute / 60.0 + second / 3600.0) / 24.0

    if month <= 2:
        year -= 1
        month += 12

    a_term = math.floor(year / 100)
    b_term = 2 - a_term + math.floor(a_term / 4)
    jd0h = math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b_term - 1524.5

    return jd0h + day_fraction
