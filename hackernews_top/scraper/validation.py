"""Post validation rules.

A post is rejected if any one of these holds:
- title empty or longer than MAX_TEXT_LENGTH
- author empty or longer than MAX_TEXT_LENGTH
- url missing or not an absolute URI
- score negative
- comment count negative
"""

from typing import Final

from pydantic import AnyUrl, TypeAdapter, ValidationError

from hackernews_top.scraper.models import RawPost

MAX_TEXT_LENGTH: Final[int] = 256

_absolute_url = TypeAdapter(AnyUrl)


def is_absolute_uri(value: str) -> bool:
    """Return True if ``value`` parses as an absolute URI (scheme required)."""
    if not value:
        return False
    try:
        _absolute_url.validate_python(value)
    except ValidationError:
        return False
    return True


def _is_valid_text(value: str) -> bool:
    return bool(value) and len(value) <= MAX_TEXT_LENGTH


def is_valid_post(post: RawPost) -> bool:
    """Check whether a raw post can be included in the output.

    Args:
        post: Parsed item payload

    Returns:
        True if every rule passes
    """
    return (
        _is_valid_text(post.title)
        and _is_valid_text(post.by)
        and is_absolute_uri(post.url)
        and post.score >= 0
        and post.descendants >= 0
    )
