import os

import pytest

from passkeeper.config import get_settings
from passkeeper.hashing import Parameters


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Drop PASSKEEPER_* overrides and the cached settings around each test."""
    for key in list(os.environ):
        if key.upper().startswith("PASSKEEPER_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fast_params():
    """Cheapest parameters the bounds allow, for tests that only need a valid hash."""
    return Parameters(time=1, memory=8, parallelism=1, key_length=32)

