"""Shared pytest fixtures."""

import json
import shutil
from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest

from hackernews_top.scraper.fetcher import TOP_STORIES_URL, item_url
from hackernews_top.utils.config import reset_settings
from hackernews_top.utils.logging_config import reset_logging


@pytest.fixture(scope="session", autouse=True)
def backup_env_file():
    """Backup .env file during test session to prevent pollution."""
    env_file = Path(".env")
    backup_file = Path(".env.test_backup")

    if env_file.exists():
        shutil.copy(env_file, backup_file)
        env_file.unlink()

    yield

    if backup_file.exists():
        shutil.move(backup_file, env_file)


@pytest.fixture(autouse=True)
def clean_state():
    """Reset cached settings and logging around every test."""
    reset_settings()
    reset_logging()
    yield
    reset_settings()
    reset_logging()


def make_post(post_id: int, **overrides: Any) -> dict:
    """Build a valid item payload, with fields overridden as needed."""
    post = {
        "id": post_id,
        "title": f"Story {post_id}",
        "by": f"user{post_id}",
        "url": f"https://example.com/{post_id}",
        "score": 100 + post_id,
        "descendants": post_id,
        "type": "story",
    }
    post.update(overrides)
    return post


@pytest.fixture
def mock_http() -> Callable[..., AsyncMock]:
    """Build a TextFetcher mock from ``ids`` and per-ID item responses.

    ``items`` maps an ID to a dict (sent as JSON), a str (sent verbatim),
    ``None`` (sent as ``null``) or an exception instance (raised).
    ``ids`` may be a list (sent as JSON), a str, or an exception.
    """

    def _build(ids: Any, items: dict[int, Any] | None = None) -> AsyncMock:
        responses: dict[str, Any] = {TOP_STORIES_URL: ids}
        for post_id, item in (items or {}).items():
            responses[item_url(post_id)] = item

        async def fetch_text(url: str) -> str:
            value = responses[url]
            if isinstance(value, Exception):
                raise value
            if isinstance(value, str):
                return value
            return json.dumps(value)

        http = AsyncMock()
        http.fetch_text = AsyncMock(side_effect=fetch_text)
        return http

    return _build


@pytest.fixture
def post_factory() -> Callable[..., dict]:
    """Expose ``make_post`` to tests."""
    return make_post
