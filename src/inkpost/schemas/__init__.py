# src/inkpost/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import (
    CommentCreate,
    CommentDeleteResponse,
    CommentResponse,
    CommentThreadResponse,
    CommentUpdate,
)
from .common import MessageResponse, Pagination
from .engagement import BookmarkListResponse, BookmarkOut, BookmarkResponse, LikeResponse
from .post import FeedResponse, PostCreate, PostResponse, PostUpdate
from .profile import AuthorSummary, ProfileResponse, ProfileUpdate

__all__ = [
    "AuthorSummary",
    "BookmarkListResponse", "BookmarkOut", "BookmarkResponse", "LikeResponse",
    "CommentCreate", "CommentDeleteResponse", "CommentResponse",
    "CommentThreadResponse", "CommentUpdate",
    "FeedResponse", "PostCreate", "PostResponse", "PostUpdate",
    "MessageResponse", "Pagination",
    "ProfileResponse", "ProfileUpdate",
]
