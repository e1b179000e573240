# src/inkpost/models/__init__.py
"""SQLAlchemy models for the Inkpost application."""

from .comment import Comment
from .engagement import Bookmark, PostLike
from .post import Post
from .profile import Profile

__all__ = [
    "Bookmark",
    "Comment",
    "Post",
    "PostLike",
    "Profile",
]
