"""Test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from hello_world.core.config import get_settings
from hello_world.main import create_app


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop server env vars and the cached settings around every test."""
    for name in ("PORT", "HOST", "LOG_LEVEL", "APP_NAME"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(create_app())
