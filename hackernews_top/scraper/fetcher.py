"""Top-posts fetcher.

Fetches the Hacker News top-stories ID list, then each item in list order,
keeping the first ``n`` items that pass validation. Requests are issued one
at a time; nothing is cached between runs.

Failure policy:
- top-ID list unreachable or malformed -> ``TopIDFetchError``
- any item unreachable or malformed -> ``ItemFetchError``, posts gathered so
  far are discarded
- item body is ``null``/empty -> skipped
- item fails validation -> skipped
"""

import json
from typing import Final, Optional

from pydantic import TypeAdapter, ValidationError

from hackernews_top.integrations.http_client import TextFetcher
from hackernews_top.scraper.errors import (
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
from hackernews_top.utils.logging_config import get_logger

TOP_STORIES_URL: Final[str] = "https://hacker-news.firebaseio.com/v0/topstories.json"
ITEM_URL_TEMPLATE: Final[str] = "https://hacker-news.firebaseio.com/v0/item/{id}.json?print=pretty"
NO_POSTS_MESSAGE: Final[str] = "Unable to find any posts."

_id_list = TypeAdapter(list[int])


def item_url(post_id: int) -> str:
    """Build the item endpoint URL for ``post_id``."""
    return ITEM_URL_TEMPLATE.format(id=post_id)


def render_posts_json(posts: list[ValidatedPost]) -> str:
    """Render posts as an indented JSON array.

    Records keep the field order title, author, uri, points, comments, rank.
    """
    return json.dumps(
        [post.model_dump() for post in posts],
        indent=2,
        ensure_ascii=False,
    )


class TopPostsFetcher:
    """Fetch, validate and rank the current Hacker News top posts.

    Args:
        http: Transport used for every GET
    """

    def __init__(self, http: TextFetcher):
        self._http = http
        self._logger = get_logger(__name__)

    async def fetch_top_ids(self) -> list[int]:
        """Fetch the ordered top-stories ID list.

        Returns:
            Post IDs, most "top" first

        Raises:
            TransportError: If the request fails
            ParseError: If the body is not a JSON array of integers
        """
        body = await self._http.fetch_text(TOP_STORIES_URL)
        try:
            return _id_list.validate_json(body)
        except ValidationError as e:
            raise ParseError(
                f"Top stories response is not a JSON array of integers: {e}",
                url=TOP_STORIES_URL,
            ) from e

    async def fetch_post_by_id(self, post_id: int) -> Optional[RawPost]:
        """Fetch one item.

        Args:
            post_id: Hacker News item ID

        Returns:
            Parsed item, or None if the API has no data for it (empty or
            ``null`` body, e.g. a deleted item)

        Raises:
            TransportError: If the request fails
            ParseError: If the body is not ``null`` or a JSON object of the
                expected shape
        """
        url = item_url(post_id)
        body = await self._http.fetch_text(url)
        if not body.strip():
            return None

        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise ParseError(f"Item {post_id} response is not valid JSON: {e}", url=url) from e

        if payload is None:
            return None
        if not isinstance(payload, dict):
            raise ParseError(
                f"Item {post_id} response is a JSON {type(payload).__name__}, expected an object",
                url=url,
            )

        try:
            return RawPost.model_validate(payload)
        except ValidationError as e:
            raise ParseError(f"Item {post_id} has malformed fields: {e}", url=url) from e

    async def get_top_posts(self, n: int) -> TopPostsResult:
        """Return up to ``n`` valid top posts, ranked by acceptance order.

        Args:
            n: Number of posts wanted. ``n <= 0`` returns an empty result
                without calling the API.

        Returns:
            Result with status OK and 0..n posts, or status NO_POSTS_FOUND
            when the ID list is empty

        Raises:
            TopIDFetchError: If the ID list could not be fetched or parsed
            ItemFetchError: If any item could not be fetched or parsed
        """
        if n <= 0:
            return TopPostsResult()

        self._logger.info("Fetching top %d posts", n, extra={"count": n})

        try:
            ids = await self.fetch_top_ids()
        except (TransportError, ParseError) as e:
            self._logger.error("Top stories fetch failed: %s", e, extra={"stage": TopIDFetchError.stage})
            raise TopIDFetchError(e) from e

        if not ids:
            self._logger.warning("Top stories list is empty")
            return TopPostsResult(status=FetchStatus.NO_POSTS_FOUND)

        posts: list[ValidatedPost] = []
        for post_id in ids:
            try:
                raw = await self.fetch_post_by_id(post_id)
            except (TransportError, ParseError) as e:
                self._logger.error(
                    "Item %d fetch failed after %d accepted posts: %s",
                    post_id,
                    len(posts),
                    e,
                    extra={"stage": ItemFetchError.stage, "post_id": post_id},
                )
                raise ItemFetchError(post_id, e) from e

            if raw is None:
                self._logger.debug("Skipping item %d: no data", post_id, extra={"post_id": post_id})
                continue
            if not is_valid_post(raw):
                self._logger.debug("Skipping item %d: failed validation", post_id, extra={"post_id": post_id})
                continue

            # Rank follows acceptance order, not position in the ID list
            posts.append(ValidatedPost.from_raw(raw, rank=len(posts) + 1))
            if len(posts) == n:
                break

        self._logger.info(
            "Collected %d of %d requested posts",
            len(posts),
            n,
            extra={"count": n, "accepted": len(posts)},
        )
        return TopPostsResult(posts=posts)

    async def get_posts_json(self, n: int) -> str:
        """Fetch up to ``n`` posts and render them as indented JSON.

        Returns ``NO_POSTS_MESSAGE`` instead of a JSON array when the
        top-stories list is empty.
        """
        result = await self.get_top_posts(n)
        if result.no_posts_found:
            return NO_POSTS_MESSAGE
        return render_posts_json(result.posts)
