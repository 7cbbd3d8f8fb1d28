"""Shared pytest fixtures."""

import pytest

from simple_query.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate each test from cached settings and ambient configuration."""
    for name in (
        "SIMPLE_QUERY_OFFSET_FETCH_DRIVER",
        "SIMPLE_QUERY_DEFAULT_PRIMARY_KEY",
        "SIMPLE_QUERY_TIMESTAMP_FORMAT",
        "SIMPLE_QUERY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
