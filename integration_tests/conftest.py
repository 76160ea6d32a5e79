"""Shared fixtures for integration tests.

These tests call the live Hacker News API and only run when
``HN_LIVE_TESTS=1`` is set.
"""

import os

import pytest

from hackernews_top.utils.config import reset_settings
from hackernews_top.utils.logging_config import reset_logging


def pytest_collection_modifyitems(config, items):
    if os.environ.get("HN_LIVE_TESTS") == "1":
        return
    skip_live = pytest.mark.skip(reason="set HN_LIVE_TESTS=1 to call the live Hacker News API")
    for item in items:
        item.add_marker(skip_live)


@pytest.fixture(scope="session", autouse=True)
def setup_integration_env():
    """Ensure sensible environment defaults for live calls."""
    os.environ.setdefault("ENVIRONMENT", "development")
    os.environ.setdefault("LOG_LEVEL", "INFO")
    os.environ.setdefault("API_TIMEOUT", "15")

    yield


@pytest.fixture(autouse=True)
def setup_test_env():
    """Reset cached settings and logging around every test."""
    reset_settings()
    reset_logging()

    yield

    reset_logging()
    reset_settings()
