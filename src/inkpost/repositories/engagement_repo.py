"""Data access helpers for likes and bookmarks."""
from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from inkpost.models import Bookmark, PostLike

__all__ = ["EngagementRepository", "MarkModel"]

MarkModel = type[PostLike] | type[Bookmark]


class EngagementRepository:
    """Reads and writes engagement rows keyed by ``(post_id, user_id)``."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, model: MarkModel, post_id: int, user_id: str) -> PostLike | Bookmark | None:
        """Return the mark row for the pair, if present."""
        return self.session.get(model, (post_id, user_id))

    def insert(self, model: MarkModel, post_id: int, user_id: str) -> PostLike | Bookmark:
        """Insert a mark inside a savepoint.

        Raises:
            sqlalchemy.exc.IntegrityError: If the pair already exists. Only the
                savepoint is rolled back, so the caller's transaction stays usable.
        """
        mark = model(post_id=post_id, user_id=user_id)
        with self.session.begin_nested():
            self.session.add(mark)
            self.session.flush()
        return mark

    def remove(self, model: MarkModel, post_id: int, user_id: str) -> bool:
        """Delete the mark for the pair and report whether a row was removed."""
        result = self.session.execute(
            delete(model)
            .where(model.post_id == post_id, model.user_id == user_id)
            .execution_options(synchronize_session="fetch")
        )
        return bool(result.rowcount)

    def list_bookmarks(self, user_id: str) -> list[Bookmark]:
        """Return a user's bookmarks, newest first."""
        stmt = (
            select(Bookmark)
            .where(Bookmark.user_id == user_id)
            .order_by(Bookmark.created_at.desc(), Bookmark.post_id.desc())
        )
        return list(self.session.execute(stmt).scalars())
