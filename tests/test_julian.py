"""Tests for Julian date conversion."""

from datetime import date, datetime, timedelta, timezone

import pytest

from subsolar.errors import InvalidArgumentError, Reason
from subsolar.julian import J2000, compute_julian_date


def test_j2000_epoch():
    """2000-01-01 12:00 UTC is the J2000.0 epoch."""
    assert compute_julian_date(datetime(2000, 1, 1, 12, 0, 0)) == J2000 == 2451545.0


@pytest.mark.parametrize(
    ("dt", "expected"),
    [
        (datetime(1957, 10, 4, 19, 26, 24), 2436116.31),
        (datetime(1999, 1, 1), 2451179.5),
        (datetime(1988, 1, 27), 2447187.5),
        (datetime(2000, 6, 21), 2451716.5),
        (datetime(2000, 2, 29), 2451603.5),
    ],
)
def test_reference_values(dt, expected):
    """Known Julian dates, including January/February year rollover."""
    assert compute_julian_date(dt) == pytest.approx(expected, abs=1e-6)


def test_midnight_and_noon_differ_by_half_day():
    """Test that noon is half a day after midnight."""
    midnight = compute_julian_date(datetime(2024, 3, 15, 0, 0))
    noon = compute_julian_date(datetime(2024, 3, 15, 12, 0))
    assert noon - midnight == 0.5


def test_leap_day_is_one_day_before_march():
    """Test that 29 February is one day before 1 March."""
    feb29 = compute_julian_date(datetime(2000, 2, 29))
    mar1 = compute_julian_date(datetime(2000, 3, 1))
    assert mar1 - feb29 == 1.0


def test_fractional_seconds_count():
    """Microseconds contribute to the day fraction."""
    jd = compute_julian_date(datetime(2000, 1, 1, 12, 0, 0, 500_000))
    assert jd - J2000 == pytest.approx(0.5 / 86400.0, abs=1e-9)


def test_aware_datetime_is_converted_to_utc():
    """Test that aware datetimes are read in UTC."""
    plus_one = timezone(timedelta(hours=1))
    aware = datetime(2000, 1, 1, 13, 0, tzinfo=plus_one)
    assert compute_julian_date(aware) == pytest.approx(J2000, abs=1e-9)


def test_monotonic_in_calendar_time():
    """Later instants always map to larger Julian dates."""
    instants = [
        datetime(1899, 12, 31, 23, 59, 59),
        datetime(1900, 1, 1),
        datetime(1999, 12, 31, 23, 0),
        datetime(2000, 1, 1),
        datetime(2000, 2, 28, 23, 59),
        datetime(2000, 2, 29),
        datetime(2000, 3, 1),
        datetime(2023, 12, 31, 23, 59, 59),
        datetime(2024, 1, 1),
    ]
    jds = [compute_julian_date(dt) for dt in instants]
    assert all(a < b for a, b in zip(jds, jds[1:]))


@pytest.mark.parametrize("value", [None, date(2000, 1, 1), "2000-01-01T12:00:00", 2451545.0])
def test_rejects_non_datetime(value):
    """Test that non-datetime input is rejected."""
    with pytest.raises(InvalidArgumentError) as excinfo:
        compute_julian_date(value)
    assert excinfo.value.reason == Reason.MISSING_DATE
    assert excinfo.value.operation == "compute_julian_date"


def test_invalid_argument_is_value_error():
    """Test that argument errors are ValueErrors with a readable message."""
    with pytest.raises(ValueError, match="compute_julian_date: missingDate"):
        compute_julian_date(None)


def test_reason_codes_are_string_enum():
    """Test that reason codes form a closed set of plain string values."""
    assert {r.value for r in Reason} == {
        "missingDate",
        "missingJulianDate",
        "missingCelestialLocation",
        "missingAngle",
    }
    with pytest.raises(InvalidArgumentError) as excinfo:
        compute_julian_date(None)
    assert excinfo.value.reason is Reason.MISSING_DATE
    assert excinfo.value.reason == "missingDate"
