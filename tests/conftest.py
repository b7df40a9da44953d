"""Shared test fixtures."""

import pytest

from mega.config.loader import ENV_KEYS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test with none of the loader's variables set."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
