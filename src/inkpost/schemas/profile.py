"""Profile-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AuthorSummary(BaseModel):
    """Compact author block embedded in posts and comments."""

    id: str
    name: str
    avatar_url: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ProfileResponse(BaseModel):
    """Schema for profile information returned by the API."""

    id: str
    name: str
    bio: str | None = None
    avatar_url: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    """Schema for updating a profile; omitted or empty fields are left unchanged."""

    name: str | None = Field(None, max_length=120, description="Display name")
    bio: str | None = Field(None, max_length=2000, description="Short biography")
    avatar_url: str | None = Field(None, description="Avatar image URL")
