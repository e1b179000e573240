"""Threaded comments: two-level trees per post.

Top-level comments are listed newest first so new discussion surfaces
quickly, while the replies under each of them read oldest first like a
conversation. Replies may only target top-level comments.

``CommentTreeManager`` talks to the store. ``CommentThread`` is the
in-memory view of one post's thread; its ``apply_*`` methods return a new
thread and never mutate the receiver, so a presentation layer can keep the
previous state around.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inkpost.core.errors import (
    ForbiddenError,
    InvalidParentError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from inkpost.db.time import utcnow
from inkpost.models import Comment
from inkpost.repositories.comment_repo import CommentRepository
from inkpost.repositories.post_repo import PostRepository

logger = logging.getLogger(__name__)

__all__ = [
    "CommentNode",
    "CommentThread",
    "CommentTreeManager",
    "Placement",
    "Reply",
    "TopLevel",
    "placement_of",
]


@dataclass(frozen=True)
class TopLevel:
    """Placement of a comment that starts a discussion."""


@dataclass(frozen=True)
class Reply:
    """Placement of a comment answering a top-level comment."""

    parent_id: int


Placement = TopLevel | Reply


def placement_of(parent_id: int | None) -> Placement:
    """Return the placement described by an optional parent reference."""
    if parent_id is None:
        return TopLevel()
    return Reply(parent_id)


@dataclass(frozen=True)
class CommentNode:
    """A top-level comment and its replies in chronological order."""

    comment: Comment
    replies: tuple[Comment, ...] = ()


@dataclass(frozen=True)
class CommentThread:
    """Immutable view of a post's comment tree."""

    post_id: int
    roots: tuple[CommentNode, ...] = ()

    def __len__(self) -> int:
        return sum(1 + len(node.replies) for node in self.roots)

    def find(self, comment_id: int) -> Comment | None:
        """Return a comment anywhere in the thread."""
        for node in self.roots:
            if node.comment.id == comment_id:
                return node.comment
            for reply in node.replies:
                if reply.id == comment_id:
                    return reply
        return None

    def apply_added(self, comment: Comment) -> CommentThread:
        """Return a thread that includes a freshly created comment.

        Roots are prepended. Replies are appended to their parent, which
        keeps them in ascending creation order. A reply whose parent is not
        in the thread is ignored; the next full reload will pick it up.
        """
        placement = placement_of(comment.parent_id)
        if isinstance(placement, TopLevel):
            return replace(self, roots=(CommentNode(comment),) + self.roots)

        roots = tuple(
            replace(node, replies=node.replies + (comment,))
            if node.comment.id == placement.parent_id
            else node
            for node in self.roots
        )
        return replace(self, roots=roots)

    def apply_updated(self, comment: Comment) -> CommentThread:
        """Return a thread where the comment with the same id is swapped in."""
        roots = []
        for node in self.roots:
            if node.comment.id == comment.id:
                node = replace(node, comment=comment)
            else:
                node = replace(
                    node,
                    replies=tuple(comment if r.id == comment.id else r for r in node.replies),
                )
            roots.append(node)
        return replace(self, roots=tuple(roots))

    def apply_deleted(self, comment_id: int) -> CommentThread:
        """Return a thread without the comment; a removed root takes its replies along."""
        roots = tuple(
            replace(node, replies=tuple(r for r in node.replies if r.id != comment_id))
            for node in self.roots
            if node.comment.id != comment_id
        )
        return replace(self, roots=roots)


class CommentTreeManager:
    """Reads and mutates comment threads in the store.

    Ownership is checked on every mutation against the requester id; nothing
    is cached between calls.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.comments = CommentRepository(session)
        self.posts = PostRepository(session)

    def list_thread(self, post_id: int) -> list[CommentNode]:
        """Return the thread of a post.

        A missing post yields an empty list rather than an error, since the
        post may have been deleted between page load and this request.
        """
        roots = self.comments.list_top_level(post_id)
        if not roots:
            return []

        replies_by_parent: dict[int, list[Comment]] = {root.id: [] for root in roots}
        for reply in self.comments.list_replies([root.id for root in roots]):
            replies_by_parent[reply.parent_id].append(reply)

        return [CommentNode(root, tuple(replies_by_parent[root.id])) for root in roots]

    def load_thread(self, post_id: int) -> CommentThread:
        """Return the thread of a post as an immutable view."""
        return CommentThread(post_id=post_id, roots=tuple(self.list_thread(post_id)))

    def add_comment(
        self,
        post_id: int,
        author_id: str,
        body: str,
        parent_id: int | None = None,
    ) -> Comment:
        """Create a comment or a reply.

        Raises:
            ValidationError: If the body is blank.
            NotFoundError: If the post does not exist.
            InvalidParentError: If the parent is missing, belongs to another
                post or is itself a reply.
        """
        body = _require_body(body)
        if not self.posts.exists(post_id):
            raise NotFoundError("Post not found")

        placement = placement_of(parent_id)
        if isinstance(placement, Reply):
            self._check_parent(post_id, placement)

        now = utcnow()
        comment = Comment(
            content=body,
            post_id=post_id,
            user_id=author_id,
            parent_id=parent_id,
            created_at=now,
            updated_at=now,
        )
        self.comments.add(comment)
        self.posts.adjust_counter(post_id, "comments_count", 1)
        self.session.commit()
        self.session.refresh(comment)
        logger.debug("Comment %s added to post %s by %s", comment.id, post_id, author_id)
        return comment

    def update_comment(self, comment_id: int, requester_id: str, body: str) -> Comment:
        """Replace the body of a comment owned by the requester."""
        comment = self._get_owned(comment_id, requester_id, action="update")
        comment.content = _require_body(body)
        comment.updated_at = utcnow()
        self.session.commit()
        self.session.refresh(comment)
        return comment

    def delete_comment(self, comment_id: int, requester_id: str) -> int:
        """Delete a comment owned by the requester, replies first.

        Both deletes and the counter update share one transaction.

        Returns:
            Number of removed rows, the comment itself included.
        """
        comment = self._get_owned(comment_id, requester_id, action="delete")
        post_id = comment.post_id
        try:
            removed_replies = self.comments.delete_replies(comment.id)
            self.comments.delete(comment)
            removed = removed_replies + 1
            self.posts.adjust_counter(post_id, "comments_count", -removed)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(
                "Cascade delete of comment %s on post %s failed", comment_id, post_id,
                exc_info=True,
            )
            raise StoreError("Failed to delete comment") from exc

        logger.info(
            "Deleted comment %s on post %s with %d replies", comment_id, post_id, removed_replies
        )
        return removed

    def _check_parent(self, post_id: int, placement: Reply) -> None:
        parent = self.comments.get_by_id(placement.parent_id)
        if parent is None or parent.post_id != post_id:
            raise InvalidParentError("Parent comment not found on this post")
        if parent.is_reply:
            raise InvalidParentError("Replies cannot be nested more than one level")

    def _get_owned(self, comment_id: int, requester_id: str, *, action: str) -> Comment:
        comment = self.comments.get_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")
        if comment.user_id != requester_id:
            raise ForbiddenError(f"Not authorized to {action} this comment")
        return comment


def _require_body(body: str | None) -> str:
    if body is None or not body.strip():
        raise ValidationError("Content is required")
    return body.strip()
