"""Data access helpers for working with posts."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, or_, select, update
from sqlalchemy.orm import Session

from inkpost.models import Bookmark, Comment, Post, PostLike

__all__ = ["PostRepository", "escape_like"]


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so a search term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def exists(self, post_id: int) -> bool:
        """Return True when a post with the identifier is stored."""
        found = self.session.execute(select(Post.id).where(Post.id == post_id)).first()
        return found is not None

    def list_page(
        self,
        *,
        offset: int,
        limit: int,
        search: str | None = None,
        author_id: str | None = None,
    ) -> list[Post]:
        """Return one slice of posts, newest first.

        Args:
            offset: Number of matching rows to skip.
            limit: Maximum number of rows to return.
            search: Case-insensitive substring matched against title and content.
            author_id: Exact author scope.
        """
        stmt = select(Post)
        if search:
            pattern = f"%{escape_like(search)}%"
            stmt = stmt.where(
                or_(
                    Post.title.ilike(pattern, escape="\\"),
                    Post.content.ilike(pattern, escape="\\"),
                )
            )
        if author_id:
            stmt = stmt.where(Post.author_id == author_id)
        # id breaks ties between rows sharing a timestamp so slices stay stable.
        stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc()).offset(offset).limit(limit)
        return list(self.session.execute(stmt).unique().scalars())

    def add(self, post: Post) -> Post:
        """Stage a new post and flush it to obtain an identifier."""
        self.session.add(post)
        self.session.flush()
        return post

    def adjust_counter(self, post_id: int, column: str, delta: int) -> None:
        """Atomically add ``delta`` to a denormalized counter column."""
        counter = getattr(Post, column)
        self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values({column: counter + delta})
        )

    def delete_with_dependents(self, post: Post) -> dict[str, int]:
        """Delete a post along with its comments, likes and bookmarks.

        Returns:
            Number of removed rows per table.
        """
        removed = {
            "replies": self.session.execute(
                delete(Comment).where(Comment.post_id == post.id, Comment.parent_id.is_not(None))
            ).rowcount,
            "comments": self.session.execute(
                delete(Comment).where(Comment.post_id == post.id)
            ).rowcount,
            "likes": self.session.execute(
                delete(PostLike).where(PostLike.post_id == post.id)
            ).rowcount,
            "bookmarks": self.session.execute(
                delete(Bookmark).where(Bookmark.post_id == post.id)
            ).rowcount,
        }
        self.session.delete(post)
        self.session.flush()
        return removed

    def liked_ids(self, user_id: str, post_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``post_ids`` the user has liked."""
        ids = list(post_ids)
        if not ids:
            return set()
        stmt = select(PostLike.post_id).where(
            PostLike.user_id == user_id, PostLike.post_id.in_(ids)
        )
        return set(self.session.execute(stmt).scalars())

    def bookmarked_ids(self, user_id: str, post_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``post_ids`` the user has bookmarked."""
        ids = list(post_ids)
        if not ids:
            return set()
        stmt = select(Bookmark.post_id).where(
            Bookmark.user_id == user_id, Bookmark.post_id.in_(ids)
        )
        return set(self.session.execute(stmt).scalars())
