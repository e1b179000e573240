"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import Pagination
from .profile import AuthorSummary


def normalize_tags(tags: list[str] | None) -> list[str] | None:
    """Strip tags and drop blanks and duplicates while keeping their order."""
    if tags is None:
        return None
    cleaned: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return cleaned


class PostCreate(BaseModel):
    """Schema for publishing a new post."""

    title: str = Field(..., min_length=1, max_length=300, description="Post title")
    content: str = Field(..., min_length=1, description="Rich text body")
    excerpt: str | None = Field(None, max_length=1000, description="Short summary")
    tags: list[str] = Field(default_factory=list, description="Ordered tag list")
    image_url: str | None = Field(None, description="Cover image URL")

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: list[str]) -> list[str]:
        return normalize_tags(value) or []


class PostUpdate(BaseModel):
    """Schema for a partial post update."""

    title: str | None = Field(None, min_length=1, max_length=300)
    content: str | None = Field(None, min_length=1)
    excerpt: str | None = Field(None, max_length=1000)
    tags: list[str] | None = None
    image_url: str | None = None

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: list[str] | None) -> list[str] | None:
        return normalize_tags(value)


class PostResponse(BaseModel):
    """Schema for post information returned by the API.

    ``is_liked`` and ``is_bookmarked`` are computed for the requesting
    viewer and are always False for anonymous requests.
    """

    id: int
    title: str
    content: str
    excerpt: str | None
    tags: list[str]
    image_url: str | None
    author_id: str
    author: AuthorSummary | None = None
    created_at: datetime
    updated_at: datetime
    likes_count: int
    comments_count: int
    is_liked: bool = False
    is_bookmarked: bool = False

    model_config = ConfigDict(from_attributes=True)


class FeedResponse(BaseModel):
    """A single page of the post feed."""

    posts: list[PostResponse]
    pagination: Pagination
