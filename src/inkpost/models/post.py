# src/inkpost/models/post.py
"""SQLAlchemy models for posts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkpost.db.session import Base
from inkpost.db.time import UTCDateTime, utcnow
from inkpost.models.profile import Profile


class Post(Base):
    """A published blog post.

    ``likes_count`` and ``comments_count`` are denormalized counters kept in
    step with the ``post_like`` and ``comment`` tables by the services that
    write those rows.
    """

    __tablename__ = "post"
    __table_args__ = (
        Index("ix_post_created_at", "created_at"),
        Index("ix_post_author_id", "author_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    author_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("profile.id", ondelete="CASCADE"),
        nullable=False,
    )

    likes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comments_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow
    )

    author: Mapped[Profile] = relationship("Profile", lazy="joined")
