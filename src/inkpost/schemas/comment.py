"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .profile import AuthorSummary


class CommentCreate(BaseModel):
    """Schema for creating a comment or a reply."""

    content: str = Field(..., min_length=1, max_length=10000, description="Comment body")
    post_id: int = Field(..., description="Post being discussed")
    parent_id: int | None = Field(None, description="Top-level comment being replied to")


class CommentUpdate(BaseModel):
    """Schema for editing a comment body."""

    content: str = Field(..., min_length=1, max_length=10000)


class CommentResponse(BaseModel):
    """Schema for a single comment."""

    id: int
    content: str
    post_id: int
    user_id: str
    parent_id: int | None
    author: AuthorSummary | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentThreadResponse(CommentResponse):
    """Top-level comment with its replies in chronological order."""

    replies: list[CommentResponse] = Field(default_factory=list)


class CommentDeleteResponse(BaseModel):
    """Acknowledgement for a cascade delete."""

    message: str
    deleted: int = Field(..., description="Rows removed, replies included")
