# src/inkpost/api/v1/endpoints/bookmarks.py
"""Bookmark endpoints for the Inkpost API."""

from fastapi import APIRouter, HTTPException, Query, Response, status

from inkpost.schemas.engagement import BookmarkListResponse, BookmarkOut, BookmarkResponse
from inkpost.services.engagement import EngagementKind, EngagementToggle

from ..dependencies import CurrentUserDep, OptionalUserDep, SessionDep

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("/", response_model=BookmarkListResponse)
async def list_bookmarks(
    db: SessionDep,
    viewer: OptionalUserDep,
    user_id: str | None = Query(None, description="Whose bookmarks; defaults to the caller"),
) -> BookmarkListResponse:
    """List bookmarks of ``user_id`` or of the authenticated caller."""
    target_user_id = user_id or (viewer.id if viewer else None)
    if not target_user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="user_id required")

    bookmarks = EngagementToggle(db).list_bookmarks(target_user_id)
    return BookmarkListResponse(
        bookmarks=[BookmarkOut.model_validate(bookmark) for bookmark in bookmarks]
    )


@router.post(
    "/{post_id}",
    response_model=BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_bookmark(
    post_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
    response: Response,
) -> BookmarkResponse:
    """Bookmark a post. Bookmarking twice answers 200 instead of 201."""
    toggle = EngagementToggle(db)
    result = toggle.mark(post_id, current_user.id, EngagementKind.BOOKMARK)
    if not result.changed:
        response.status_code = status.HTTP_200_OK
        return BookmarkResponse(bookmarked=True)

    bookmark = toggle.marks.get(EngagementKind.BOOKMARK.model, post_id, current_user.id)
    return BookmarkResponse(
        bookmarked=True,
        bookmark=BookmarkOut.model_validate(bookmark) if bookmark else None,
    )


@router.delete("/{post_id}", response_model=BookmarkResponse)
async def remove_bookmark(
    post_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> BookmarkResponse:
    """Remove a bookmark; removing a missing bookmark is not an error."""
    EngagementToggle(db).unmark(post_id, current_user.id, EngagementKind.BOOKMARK)
    return BookmarkResponse(bookmarked=False)
