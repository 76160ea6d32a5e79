"""Command-line entry point.

Prints the top posts as indented JSON on stdout. Logs go to stderr.

Exit codes:
    0: success, including the "no posts found" case
    1: the top-ID list or an item could not be fetched
    2: invalid arguments (argparse)
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from hackernews_top.integrations.http_client import HttpxTextFetcher
from hackernews_top.scraper.errors import ItemFetchError, TopIDFetchError
from hackernews_top.scraper.fetcher import NO_POSTS_MESSAGE, TopPostsFetcher, render_posts_json
from hackernews_top.scraper.models import TopPostsResult
from hackernews_top.utils.config import get_settings
from hackernews_top.utils.logging_config import get_logger, setup_logging


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"count must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="hackernews-top",
        description="Print the current top Hacker News posts as JSON.",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=_non_negative_int,
        default=settings.DEFAULT_POST_COUNT,
        help=f"number of posts to return (default: {settings.DEFAULT_POST_COUNT})",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="emit logs as JSON lines on stderr",
    )
    return parser


async def fetch_top_posts(n: int) -> TopPostsResult:
    """Run the fetcher against the live API."""
    async with HttpxTextFetcher() as http:
        return await TopPostsFetcher(http).get_top_posts(n)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(use_json=args.json_logs)
    logger = get_logger(__name__)

    try:
        result = asyncio.run(fetch_top_posts(args.count))
    except (TopIDFetchError, ItemFetchError) as e:
        logger.debug("Run aborted", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1

    if result.no_posts_found:
        print(NO_POSTS_MESSAGE)
        return 0

    print(render_posts_json(result.posts))
    return 0
