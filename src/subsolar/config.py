"""Package configuration from environment variables."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    log_level: str = Field(default="INFO", alias="SUBSOLAR_LOG_LEVEL")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, alias="SUBSOLAR_LOG_FORMAT")

    # Output rounding for the command line entry point
    decimals: int = Field(default=4, ge=0, alias="SUBSOLAR_DECIMALS")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings. Library code never calls this."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format,
        stream=sys.stdout,
    )
