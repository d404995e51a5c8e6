"""Command line entry point: python -m subsolar [WHEN]."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import UTC, datetime

from subsolar.config import configure_logging, get_settings
from subsolar.geographic import celestial_to_geographic
from subsolar.julian import compute_julian_date
from subsolar.solar import compute_sun_celestial_location

logger = logging.getLogger("subsolar")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="subsolar", description="Print the sub-solar point for a UTC instant.")
    p.add_argument(
        "when",
        nargs="?",
        default=None,
        help="ISO-8601 date-time (naive values are UTC). Defaults to now.",
    )
    return p


def _parse_when(value: str | None) -> datetime:
    if value is None:
        return datetime.now(UTC)
    return datetime.fromisoformat(value)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    try:
        when = _parse_when(args.when)
    except ValueError:
        print(f"subsolar: invalid date-time '{args.when}'", file=sys.stderr)
        return 2

    julian_date = compute_julian_date(when)
    celestial = compute_sun_celestial_location(julian_date)
    location = celestial_to_geographic(celestial, julian_date)
    logger.info("Computed sub-solar point for JD %.5f", julian_date)

    digits = settings.decimals
    payload = {
        "when": when.isoformat(),
        "julian_date": round(julian_date, digits + 2),
        "declination": round(celestial.declination, digits),
        "right_ascension": round(celestial.right_ascension, digits),
        **{k: round(v, digits) for k, v in location.model_dump().items()},
    }
    print(json.dumps(payload))
    return 0


if __name__ == "__main__":
    sys.exit(main())
