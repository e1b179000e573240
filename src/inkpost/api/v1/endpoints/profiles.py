# src/inkpost/api/v1/endpoints/profiles.py
"""Profile endpoints for the Inkpost API."""

from fastapi import APIRouter, Query

from inkpost.core.settings import settings
from inkpost.schemas.common import Pagination
from inkpost.schemas.post import FeedResponse
from inkpost.schemas.profile import ProfileResponse, ProfileUpdate
from inkpost.services import profile_service
from inkpost.services.feed import FeedFilter, FeedPaginator
from inkpost.services.post_service import to_post_responses

from ..dependencies import CurrentUserDep, OptionalUserDep, SessionDep

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(profile_id: str, db: SessionDep) -> ProfileResponse:
    """Return a public profile."""
    return ProfileResponse.model_validate(profile_service.get_profile(db, profile_id))


@router.put("/{profile_id}", response_model=ProfileResponse)
async def update_profile(
    profile_id: str,
    update_data: ProfileUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> ProfileResponse:
    """Update the caller's own profile."""
    profile = profile_service.update_profile(db, profile_id, current_user.id, update_data)
    return ProfileResponse.model_validate(profile)


@router.get("/{profile_id}/posts", response_model=FeedResponse)
async def list_profile_posts(
    profile_id: str,
    db: SessionDep,
    viewer: OptionalUserDep,
    page: int = Query(0, ge=0),
    limit: int = Query(settings.feed_page_size, ge=1, le=settings.feed_max_page_size),
) -> FeedResponse:
    """List one page of posts written by the profile owner."""
    feed_page = FeedPaginator(db).fetch_page(FeedFilter(author_id=profile_id), page, limit)
    return FeedResponse(
        posts=to_post_responses(db, feed_page.items, viewer.id if viewer else None),
        pagination=Pagination(page=feed_page.page, limit=feed_page.limit, has_more=feed_page.more),
    )
