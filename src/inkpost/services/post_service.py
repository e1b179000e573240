"""Service-level helpers for authoring posts."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inkpost.core.errors import ForbiddenError, NotFoundError, StoreError, ValidationError
from inkpost.db.time import utcnow
from inkpost.models import Post
from inkpost.repositories.post_repo import PostRepository
from inkpost.schemas.post import PostCreate, PostResponse, PostUpdate

logger = logging.getLogger(__name__)

__all__ = ["PostService", "to_post_responses"]


class PostService:
    """Create, read, update and delete posts with author ownership checks."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.posts = PostRepository(session)

    def get_post(self, post_id: int) -> Post:
        post = self.posts.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def create_post(self, author_id: str, data: PostCreate) -> Post:
        """Publish a post.

        Raises:
            ValidationError: If the title or content is blank.
        """
        title = data.title.strip()
        if not title or not data.content.strip():
            raise ValidationError("Title and content are required")

        now = utcnow()
        post = Post(
            title=title,
            content=data.content,
            excerpt=data.excerpt or None,
            tags=list(data.tags),
            image_url=data.image_url or None,
            author_id=author_id,
            created_at=now,
            updated_at=now,
        )
        self.posts.add(post)
        self.session.commit()
        self.session.refresh(post)
        logger.info("Post %s published by %s", post.id, author_id)
        return post

    def update_post(self, post_id: int, requester_id: str, data: PostUpdate) -> Post:
        """Apply a partial update to a post owned by the requester."""
        post = self._get_owned(post_id, requester_id, action="update")
        changes = data.model_dump(exclude_unset=True)
        for key in ("title", "content"):
            if key in changes and (changes[key] is None or not changes[key].strip()):
                raise ValidationError(f"{key.capitalize()} cannot be empty")
        if "title" in changes:
            changes["title"] = changes["title"].strip()
        if "tags" in changes and changes["tags"] is None:
            changes["tags"] = []

        for key, value in changes.items():
            setattr(post, key, value)
        post.updated_at = utcnow()
        self.session.commit()
        self.session.refresh(post)
        return post

    def delete_post(self, post_id: int, requester_id: str) -> None:
        """Delete a post owned by the requester together with its dependents."""
        post = self._get_owned(post_id, requester_id, action="delete")
        try:
            removed = self.posts.delete_with_dependents(post)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Cascade delete of post %s failed", post_id, exc_info=True)
            raise StoreError("Failed to delete post") from exc
        logger.info("Deleted post %s (%s)", post_id, removed)

    def _get_owned(self, post_id: int, requester_id: str, *, action: str) -> Post:
        post = self.get_post(post_id)
        if post.author_id != requester_id:
            raise ForbiddenError(f"Not authorized to {action} this post")
        return post


def to_post_responses(
    session: Session,
    posts: Sequence[Post],
    viewer_id: str | None = None,
) -> list[PostResponse]:
    """Convert posts to API schemas carrying the viewer's like/bookmark flags."""
    liked: set[int] = set()
    bookmarked: set[int] = set()
    if viewer_id is not None and posts:
        repo = PostRepository(session)
        ids = [post.id for post in posts]
        liked = repo.liked_ids(viewer_id, ids)
        bookmarked = repo.bookmarked_ids(viewer_id, ids)

    return [
        PostResponse.model_validate(post).model_copy(
            update={"is_liked": post.id in liked, "is_bookmarked": post.id in bookmarked}
        )
        for post in posts
    ]
