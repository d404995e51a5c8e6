"""Argument errors raised by the projection functions."""

from __future__ import annotations

import logging
from enum import StrEnum

logger = logging.getLogger(__name__)


class Reason(StrEnum):
    """Machine-readable reason codes carried by InvalidArgumentError."""

    MISSING_DATE = "missingDate"
    MISSING_JULIAN_DATE = "missingJulianDate"
    MISSING_CELESTIAL_LOCATION = "missingCelestialLocation"
    MISSING_ANGLE = "missingAngle"


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing or malformed."""

    def __init__(self, operation: str, reason: Reason) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}: {reason}")


def invalid_argument(operation: str, reason: Reason) -> InvalidArgumentError:
    """Log a rejected argument and build the error for the caller to raise."""
    logger.warning("Rejected argument in %s: %s", operation, reason)
    return InvalidArgumentError(operation, reason)
