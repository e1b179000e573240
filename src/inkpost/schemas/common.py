"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Pagination(BaseModel):
    """Page cursor metadata returned alongside feed pages."""

    page: int = Field(..., ge=0, description="Zero-based page index that was served.")
    limit: int = Field(..., ge=1, description="Requested page size.")
    has_more: bool = Field(
        ...,
        serialization_alias="hasMore",
        description="True when the page was full, so another page may exist.",
    )

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement payload."""

    message: str
