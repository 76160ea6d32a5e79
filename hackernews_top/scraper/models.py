"""Data models for the top-posts pipeline.

``RawPost`` mirrors the item endpoint payload and is deliberately lenient:
absent or ``null`` fields fall back to empty/zero so that incomplete items
reach validation instead of failing to parse. ``ValidatedPost`` is the
immutable output record.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FetchStatus(str, Enum):
    """Outcome of a successful run.

    Attributes:
        OK: The ID list had entries; ``posts`` holds 0..n accepted posts
        NO_POSTS_FOUND: The top-stories endpoint returned an empty list
    """

    OK = "ok"
    NO_POSTS_FOUND = "no_posts_found"


class RawPost(BaseModel):
    """Item as returned by ``/v0/item/{id}.json``."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    title: str = ""
    by: str = ""
    url: str = ""
    score: int = 0
    descendants: int = 0

    @field_validator("title", "by", "url", mode="before")
    @classmethod
    def null_to_empty_string(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("score", "descendants", mode="before")
    @classmethod
    def null_to_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class ValidatedPost(BaseModel):
    """A post that passed validation, ranked by acceptance order.

    Field order is the serialized order.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    author: str
    uri: str
    points: int
    comments: int
    rank: int = Field(ge=1)

    @classmethod
    def from_raw(cls, post: RawPost, rank: int) -> "ValidatedPost":
        """Map API field names onto output field names."""
        return cls(
            title=post.title,
            author=post.by,
            uri=post.url,
            points=post.score,
            comments=post.descendants,
            rank=rank,
        )


class TopPostsResult(BaseModel):
    """Result of one ``get_top_posts`` run."""

    status: FetchStatus = FetchStatus.OK
    posts: list[ValidatedPost] = Field(default_factory=list)

    @property
    def no_posts_found(self) -> bool:
        return self.status is FetchStatus.NO_POSTS_FOUND
