"""Pydantic schemas for post endpoints."""

from enum import StrEnum
from uuid import UUID

from pydantic import ConfigDict, Field

from socialhub.shared.schemas import CamelSchema, PaginationParams


class PostVisibility(StrEnum):
    PUBLIC = "public"
    FRIENDS = "friends"
    PRIVATE = "private"


class CreatePostRequest(CamelSchema):
    """New post payload."""

    model_config = ConfigDict(extra="forbid")

    content: str = Field(..., min_length=1, max_length=5000)
    visibility: PostVisibility = PostVisibility.PUBLIC
    tags: list[str] = Field(default_factory=list, max_length=10)
    location: str | None = Field(default=None, max_length=100)


class UpdatePostRequest(CamelSchema):
    """Partial post update."""

    model_config = ConfigDict(extra="forbid")

    content: str | None = Field(default=None, min_length=1, max_length=5000)
    visibility: PostVisibility | None = None


class PostIdParams(CamelSchema):
    """Path parameters of post endpoints."""

    post_id: UUID


class ListPostsQuery(PaginationParams):
    """Query string of the post listing."""

    visibility: PostVisibility | None = None
    tag: str | None = Field(default=None, max_length=50)
