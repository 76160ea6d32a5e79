"""Exceptions raised while fetching Hacker News top posts.

Two layers:
- ``TransportError`` / ``ParseError`` describe what went wrong with a single
  request and are raised by the transport and the per-endpoint helpers.
- ``TopIDFetchError`` / ``ItemFetchError`` describe which pipeline stage
  failed. They wrap the lower-level error as ``__cause__`` and abort the
  whole run.

Skipped posts (null bodies, validation rejects) are not errors and never
surface here.
"""

import time
from typing import Optional


class HackerNewsError(Exception):
    """Base exception for the top-posts fetcher."""

    def __init__(self, message: str, **context):
        """Initialize error with context.

        Args:
            message: Error message
            **context: Additional context information
        """
        super().__init__(message)
        self.context = context
        self.timestamp = time.time()


class TransportError(HackerNewsError):
    """The HTTP GET itself failed (network error, timeout, non-2xx status)."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None, **context):
        super().__init__(message, **context)
        self.url = url
        self.status_code = status_code


class ParseError(HackerNewsError):
    """A response body did not have the expected JSON shape."""

    def __init__(self, message: str, url: str, **context):
        super().__init__(message, **context)
        self.url = url


class TopIDFetchError(HackerNewsError):
    """The top-stories ID list could not be fetched or parsed."""

    stage = "top_ids"

    def __init__(self, cause: Exception):
        super().__init__(f"Exception when trying to get top posts: {cause}", stage=self.stage)


class ItemFetchError(HackerNewsError):
    """A single item could not be fetched or parsed."""

    stage = "item"

    def __init__(self, post_id: int, cause: Exception):
        super().__init__(
            f"Exception when trying to get post with id={post_id}: {cause}",
            stage=self.stage,
            post_id=post_id,
        )
        self.post_id = post_id
