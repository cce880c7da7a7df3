"""Root conftest — shared test configuration."""

import os

import pytest

from layered_add.config import get_settings

# Tests must not pick up a developer's timeout or log settings
os.environ.pop("FETCH_TIMEOUT_SECONDS", None)
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached Settings so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
