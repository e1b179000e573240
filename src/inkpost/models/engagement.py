# src/inkpost/models/engagement.py
"""Models capturing likes and bookmarks on posts."""

from datetime import datetime

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from inkpost.db.session import Base
from inkpost.db.time import UTCDateTime, utcnow


class PostLike(Base):
    """Per-user like on a post.

    Row existence is the "liked" state.
    """

    __tablename__ = "post_like"
    __table_args__ = (Index("ix_post_like_user_id", "user_id"),)

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("profile.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # Composite primary key prevents duplicate likes from the same user.

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow
    )


class Bookmark(Base):
    """Per-user bookmark of a post."""

    __tablename__ = "bookmark"
    __table_args__ = (Index("ix_bookmark_user_id", "user_id"),)

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("profile.id", ondelete="CASCADE"),
        primary_key=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow
    )
