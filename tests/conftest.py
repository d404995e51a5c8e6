"""Shared test configuration."""

import pytest

from subsolar.config import reset_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate each test from ambient SUBSOLAR_* environment and cached settings."""
    for name in ("SUBSOLAR_LOG_LEVEL", "SUBSOLAR_LOG_FORMAT", "SUBSOLAR_DECIMALS"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()

