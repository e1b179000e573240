"""Likes and bookmarks.

A mark is the row keyed by ``(post_id, user_id)`` in the table for its kind;
its existence is the "on" state. Kinds that carry a denormalized counter on
the post have the counter moved in the same transaction as the mark row.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from inkpost.core.errors import NotFoundError, StoreError
from inkpost.models import Bookmark, PostLike
from inkpost.repositories.engagement_repo import EngagementRepository, MarkModel
from inkpost.repositories.post_repo import PostRepository

logger = logging.getLogger(__name__)

__all__ = ["EngagementKind", "EngagementToggle", "MarkResult"]


class EngagementKind(str, Enum):
    """Kinds of engagement a user can place on a post."""

    LIKE = "like"
    BOOKMARK = "bookmark"

    @property
    def model(self) -> MarkModel:
        return PostLike if self is EngagementKind.LIKE else Bookmark

    @property
    def counter(self) -> str | None:
        """Name of the post column counting marks of this kind, if any."""
        return "likes_count" if self is EngagementKind.LIKE else None


@dataclass(frozen=True)
class MarkResult:
    """Outcome of a mark operation.

    Attributes:
        active: Whether the mark exists after the operation.
        changed: Whether this call wrote or removed a row.
        count: Counter value on the post after the operation, for kinds with a counter.
    """

    active: bool
    changed: bool
    count: int | None = None


class EngagementToggle:
    """Sets, clears and toggles engagement marks."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.marks = EngagementRepository(session)
        self.posts = PostRepository(session)

    def is_active(self, post_id: int, user_id: str, kind: EngagementKind) -> bool:
        return self.marks.get(kind.model, post_id, user_id) is not None

    def toggle(self, post_id: int, user_id: str, kind: EngagementKind) -> MarkResult:
        """Invert the mark: remove it when present, create it when absent."""
        self._require_post(post_id)
        if self.is_active(post_id, user_id, kind):
            return self._clear(post_id, user_id, kind)
        return self._set(post_id, user_id, kind)

    def mark(self, post_id: int, user_id: str, kind: EngagementKind) -> MarkResult:
        """Ensure the mark exists."""
        self._require_post(post_id)
        if self.is_active(post_id, user_id, kind):
            return MarkResult(active=True, changed=False, count=self._count(post_id, kind))
        return self._set(post_id, user_id, kind)

    def unmark(self, post_id: int, user_id: str, kind: EngagementKind) -> MarkResult:
        """Ensure the mark does not exist. Missing posts are not an error."""
        return self._clear(post_id, user_id, kind)

    def _set(self, post_id: int, user_id: str, kind: EngagementKind) -> MarkResult:
        try:
            self.marks.insert(kind.model, post_id, user_id)
        except IntegrityError:
            # A concurrent request won the insert; the mark is on either way.
            logger.info("Duplicate %s by %s on post %s ignored", kind.value, user_id, post_id)
            return MarkResult(active=True, changed=False, count=self._count(post_id, kind))

        if kind.counter:
            self.posts.adjust_counter(post_id, kind.counter, 1)
        self._commit(kind, post_id, user_id)
        logger.debug("%s set by %s on post %s", kind.value, user_id, post_id)
        return MarkResult(active=True, changed=True, count=self._count(post_id, kind))

    def _clear(self, post_id: int, user_id: str, kind: EngagementKind) -> MarkResult:
        removed = self.marks.remove(kind.model, post_id, user_id)
        if removed and kind.counter:
            self.posts.adjust_counter(post_id, kind.counter, -1)
        self._commit(kind, post_id, user_id)
        if removed:
            logger.debug("%s cleared by %s on post %s", kind.value, user_id, post_id)
        return MarkResult(active=False, changed=removed, count=self._count(post_id, kind))

    def _commit(self, kind: EngagementKind, post_id: int, user_id: str) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(
                "Failed to store %s by %s on post %s", kind.value, user_id, post_id,
                exc_info=True,
            )
            raise StoreError(f"Failed to update {kind.value}") from exc

    def _require_post(self, post_id: int) -> None:
        if not self.posts.exists(post_id):
            raise NotFoundError("Post not found")

    def _count(self, post_id: int, kind: EngagementKind) -> int | None:
        if not kind.counter:
            return None
        post = self.posts.get_by_id(post_id)
        if post is None:
            return None
        self.session.refresh(post, attribute_names=[kind.counter])
        return getattr(post, kind.counter)

    def list_bookmarks(self, user_id: str) -> list[Bookmark]:
        """Return a user's bookmarks, newest first."""
        return self.marks.list_bookmarks(user_id)
