# src/inkpost/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .bookmarks import router as bookmarks_router
from .comments import router as comments_router
from .posts import router as posts_router
from .profiles import router as profiles_router

__all__ = [
    "bookmarks_router",
    "comments_router",
    "posts_router",
    "profiles_router",
]
