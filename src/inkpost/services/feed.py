"""Cursor-paginated post feed.

Pages are offset slices of the posts ordered newest first. The server side
is stateless: ``FeedPaginator.fetch_page`` runs one bounded query. Clients
that accumulate pages for infinite scrolling keep a ``FeedState`` and feed
each fetched page through ``FeedPaginator.apply``.

Posts created between two page fetches shift the offsets, so consecutive
pages may overlap or skip items. No watermark is kept to prevent that.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from sqlalchemy.orm import Session

from inkpost.core.errors import ValidationError
from inkpost.core.settings import settings
from inkpost.models import Post
from inkpost.repositories.post_repo import PostRepository

logger = logging.getLogger(__name__)

__all__ = ["FeedFilter", "FeedPage", "FeedPaginator", "FeedState"]


@dataclass(frozen=True)
class FeedFilter:
    """Restricts the feed to a search term and/or an author."""

    search: str | None = None
    author_id: str | None = None

    def __post_init__(self) -> None:
        # Blank strings mean "no filter" so that ?search= behaves like no param.
        object.__setattr__(self, "search", (self.search or "").strip() or None)
        object.__setattr__(self, "author_id", (self.author_id or "").strip() or None)


@dataclass(frozen=True)
class FeedPage:
    """One fetched slice of the feed."""

    items: tuple[Post, ...]
    page: int
    limit: int

    @property
    def more(self) -> bool:
        """A full page is taken to mean another page may follow."""
        return len(self.items) == self.limit


@dataclass(frozen=True)
class FeedState:
    """Accumulated feed as seen by an infinite-scroll view."""

    items: tuple[Post, ...] = ()
    cursor: int = 0
    more: bool = True
    filter: FeedFilter = field(default_factory=FeedFilter)


class FeedPaginator:
    """Fetches feed pages and folds them into a ``FeedState``."""

    def __init__(self, session: Session, page_size: int | None = None) -> None:
        self.posts = PostRepository(session)
        self.page_size = page_size or settings.feed_page_size

    @staticmethod
    def reset() -> FeedState:
        """Return the initial state; call whenever the active filter changes."""
        return FeedState()

    def fetch_page(
        self,
        feed_filter: FeedFilter | None = None,
        page: int = 0,
        limit: int | None = None,
    ) -> FeedPage:
        """Run the bounded query for ``[page * limit, (page + 1) * limit)``."""
        feed_filter = feed_filter or FeedFilter()
        limit = limit or self.page_size
        if page < 0:
            raise ValidationError("page must be zero or greater")
        if limit < 1 or limit > settings.feed_max_page_size:
            raise ValidationError(f"limit must be between 1 and {settings.feed_max_page_size}")

        items = self.posts.list_page(
            offset=page * limit,
            limit=limit,
            search=feed_filter.search,
            author_id=feed_filter.author_id,
        )
        logger.debug(
            "Feed page %d (limit %d, filter %s) returned %d posts",
            page, limit, feed_filter, len(items),
        )
        return FeedPage(items=tuple(items), page=page, limit=limit)

    @staticmethod
    def apply(state: FeedState, feed_filter: FeedFilter, page: FeedPage) -> FeedState:
        """Fold a fetched page into the state.

        Page 0 replaces the accumulated items; later pages are appended.

        Raises:
            ValidationError: If a later page is applied under a different
                filter than the one the state was built with, or does not
                directly follow the last loaded page.
        """
        if page.page == 0:
            return FeedState(
                items=page.items,
                cursor=0,
                more=page.more,
                filter=feed_filter,
            )
        _check_appendable(state, feed_filter, page.page)
        return replace(
            state,
            items=state.items + page.items,
            cursor=page.page,
            more=page.more,
        )

    def load_page(
        self,
        state: FeedState,
        feed_filter: FeedFilter | None = None,
        page: int = 0,
        limit: int | None = None,
    ) -> FeedState:
        """Fetch a page and fold it into ``state``."""
        feed_filter = feed_filter or FeedFilter()
        if page != 0:
            _check_appendable(state, feed_filter, page)
        return self.apply(state, feed_filter, self.fetch_page(feed_filter, page, limit))

    def load_next(self, state: FeedState, limit: int | None = None) -> FeedState:
        """Fetch the page after ``state.cursor`` under the state's filter.

        An exhausted feed is returned unchanged.
        """
        if not state.more:
            return state
        next_page = state.cursor + 1 if state.items else 0
        return self.load_page(state, state.filter, next_page, limit)


def _check_appendable(state: FeedState, feed_filter: FeedFilter, page: int) -> None:
    """Reject a page that would not extend ``state`` without a gap."""
    if feed_filter != state.filter:
        raise ValidationError("Feed filter changed; reset before loading further pages")
    expected = state.cursor + 1 if state.items else 0
    if page != expected:
        raise ValidationError(f"Page {page} does not follow the loaded pages; expected {expected}")
