# src/inkpost/services/__init__.py
"""Business logic services for the Inkpost application."""

from .comment_tree import CommentThread, CommentTreeManager
from .engagement import EngagementKind, EngagementToggle
from .feed import FeedFilter, FeedPaginator, FeedState
from .post_service import PostService

__all__ = [
    "CommentThread",
    "CommentTreeManager",
    "EngagementKind",
    "EngagementToggle",
    "FeedFilter",
    "FeedPaginator",
    "FeedState",
    "PostService",
]
