# src/inkpost/api/v1/endpoints/posts.py
"""Post-related endpoints for the Inkpost API."""

from fastapi import APIRouter, Query, status

from inkpost.core.settings import settings
from inkpost.schemas.common import MessageResponse, Pagination
from inkpost.schemas.engagement import LikeResponse
from inkpost.schemas.post import FeedResponse, PostCreate, PostResponse, PostUpdate
from inkpost.services.engagement import EngagementKind, EngagementToggle
from inkpost.services.feed import FeedFilter, FeedPaginator
from inkpost.services.post_service import PostService, to_post_responses

from ..dependencies import CurrentUserDep, OptionalUserDep, SessionDep

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=FeedResponse)
async def list_posts(
    db: SessionDep,
    viewer: OptionalUserDep,
    page: int = Query(0, ge=0, description="Zero-based page index"),
    limit: int = Query(
        settings.feed_page_size,
        ge=1,
        le=settings.feed_max_page_size,
        description="Page size",
    ),
    search: str | None = Query(None, description="Case-insensitive title/content match"),
    author_id: str | None = Query(None, description="Restrict to one author"),
) -> FeedResponse:
    """List one page of posts, newest first.

    Args:
        db: Database session
        viewer: Caller, when a valid bearer token was supplied
        page: Zero-based page index
        limit: Maximum number of posts to return
        search: Optional free-text filter
        author_id: Optional author scope

    Returns:
        The page of posts plus pagination metadata; ``hasMore`` is true when
        the page was full.
    """
    paginator = FeedPaginator(db)
    feed_page = paginator.fetch_page(FeedFilter(search=search, author_id=author_id), page, limit)
    return FeedResponse(
        posts=to_post_responses(db, feed_page.items, viewer.id if viewer else None),
        pagination=Pagination(page=feed_page.page, limit=feed_page.limit, has_more=feed_page.more),
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int,
    db: SessionDep,
    viewer: OptionalUserDep,
) -> PostResponse:
    """Get a specific post by ID."""
    post = PostService(db).get_post(post_id)
    return to_post_responses(db, [post], viewer.id if viewer else None)[0]


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> PostResponse:
    """Publish a new post authored by the caller."""
    post = PostService(db).create_post(current_user.id, post_data)
    return to_post_responses(db, [post])[0]


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    post_data: PostUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> PostResponse:
    """Update a post; only its author may do so."""
    post = PostService(db).update_post(post_id, current_user.id, post_data)
    return to_post_responses(db, [post], current_user.id)[0]


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Delete a post with its comments, likes and bookmarks; author only."""
    PostService(db).delete_post(post_id, current_user.id)
    return MessageResponse(message="Post deleted successfully")


@router.post("/{post_id}/like", response_model=LikeResponse)
async def toggle_like(
    post_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> LikeResponse:
    """Like the post, or unlike it when the caller already liked it."""
    result = EngagementToggle(db).toggle(post_id, current_user.id, EngagementKind.LIKE)
    return LikeResponse(liked=result.active, likes_count=result.count or 0)
