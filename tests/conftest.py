import os

import pytest

from passmeter.config import get_settings


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    """Run every test against the built-in settings."""
    for key in list(os.environ):
        if key.upper().startswith("PASSMETER_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
