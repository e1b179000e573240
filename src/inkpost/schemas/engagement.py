"""Schemas for likes and bookmarks."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class LikeResponse(BaseModel):
    """Result of toggling a like."""

    liked: bool
    likes_count: int


class BookmarkOut(BaseModel):
    """A stored bookmark row."""

    post_id: int
    user_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BookmarkResponse(BaseModel):
    """Result of adding or removing a bookmark."""

    bookmarked: bool
    bookmark: BookmarkOut | None = None


class BookmarkListResponse(BaseModel):
    """Bookmarks of a user, newest first."""

    bookmarks: list[BookmarkOut]
