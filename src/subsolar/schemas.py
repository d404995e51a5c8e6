"""Pydantic schemas for solar and geographic coordinates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CelestialLocation(BaseModel):
    """Equatorial coordinates of a body, in degrees."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    declination: float
    right_ascension: float = Field(alias="rightAscension")


class GeographicLocation(BaseModel):
    """Point on the Earth's surface, in degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
