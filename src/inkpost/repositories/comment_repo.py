"""Data access helpers for working with comments."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from inkpost.models import Comment

__all__ = ["CommentRepository"]


class CommentRepository:
    """Thin wrapper around database access for comment entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, comment_id: int) -> Comment | None:
        """Return a comment by identifier."""
        return self.session.get(Comment, comment_id)

    def list_top_level(self, post_id: int) -> list[Comment]:
        """Return top-level comments of a post, newest first."""
        stmt = (
            select(Comment)
            .where(Comment.post_id == post_id, Comment.parent_id.is_(None))
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        return list(self.session.execute(stmt).unique().scalars())

    def list_replies(self, parent_ids: Sequence[int]) -> list[Comment]:
        """Return replies to the given parents, oldest first."""
        if not parent_ids:
            return []
        stmt = (
            select(Comment)
            .where(Comment.parent_id.in_(list(parent_ids)))
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        return list(self.session.execute(stmt).unique().scalars())

    def add(self, comment: Comment) -> Comment:
        """Stage a new comment and flush it to obtain an identifier."""
        self.session.add(comment)
        self.session.flush()
        return comment

    def delete_replies(self, parent_id: int) -> int:
        """Delete every reply to ``parent_id`` and return how many were removed."""
        result = self.session.execute(
            delete(Comment)
            .where(Comment.parent_id == parent_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0

    def delete(self, comment: Comment) -> None:
        """Delete a single comment row."""
        self.session.delete(comment)
        self.session.flush()
