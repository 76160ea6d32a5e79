"""Top-posts pipeline: models, validation and errors.

The fetcher lives in ``hackernews_top.scraper.fetcher``.
"""

from hackernews_top.scraper.errors import (
    HackerNewsError,
    ItemFetchError,
    ParseError,
    TopIDFetchError,
    TransportError,
)
from hackernews_top.scraper.models import (
    FetchStatus,
    RawPost,
    TopPostsResult,
    ValidatedPost,
)
from hackernews_top.scraper.validation import is_valid_post

__all__ = [
    "FetchStatus",
    "HackerNewsError",
    "ItemFetchError",
    "ParseError",
    "RawPost",
    "TopIDFetchError",
    "TopPostsResult",
    "TransportError",
    "ValidatedPost",
    "is_valid_post",
]
