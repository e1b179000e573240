# src/inkpost/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    bookmarks_router,
    comments_router,
    posts_router,
    profiles_router,
)

__all__ = [
    "bookmarks_router",
    "comments_router",
    "posts_router",
    "profiles_router",
]
