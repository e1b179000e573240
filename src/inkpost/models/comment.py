# src/inkpost/models/comment.py
"""SQLAlchemy models for post comments."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkpost.db.session import Base
from inkpost.db.time import UTCDateTime, utcnow
from inkpost.models.profile import Profile


class Comment(Base):
    """Comment on a post.

    Top-level comments have ``parent_id = NULL``. Replies point at a
    top-level comment; nesting never goes deeper than one level.
    """

    __tablename__ = "comment"
    __table_args__ = (
        Index("ix_comment_post_id_parent_id", "post_id", "parent_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("profile.id", ondelete="CASCADE"),
        nullable=False,
    )
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("comment.id", ondelete="CASCADE"),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow
    )

    author: Mapped[Profile] = relationship("Profile", lazy="joined")

    @property
    def is_reply(self) -> bool:
        """Return True when the comment is attached to a parent comment."""
        return self.parent_id is not None
