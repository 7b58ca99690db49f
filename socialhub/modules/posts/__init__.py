"""Posts module - post request schemas."""

from .schemas import CreatePostRequest, ListPostsQuery, PostIdParams, PostVisibility, UpdatePostRequest

__all__ = [
    "CreatePostRequest",
    "ListPostsQuery",
    "PostIdParams",
    "PostVisibility",
    "UpdatePostRequest",
]
