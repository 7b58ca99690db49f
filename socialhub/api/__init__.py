"""API routers package."""

from socialhub.api import posts, system, users

__all__ = [
    "posts",
    "system",
    "users",
]
