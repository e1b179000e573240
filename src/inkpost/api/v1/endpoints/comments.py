# src/inkpost/api/v1/endpoints/comments.py
"""Comment endpoints for the Inkpost API."""

from fastapi import APIRouter, status

from inkpost.schemas.comment import (
    CommentCreate,
    CommentDeleteResponse,
    CommentResponse,
    CommentThreadResponse,
    CommentUpdate,
)
from inkpost.services.comment_tree import CommentNode, CommentTreeManager

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/comments", tags=["comments"])


def _to_thread_response(node: CommentNode) -> CommentThreadResponse:
    base = CommentResponse.model_validate(node.comment)
    return CommentThreadResponse(
        **base.model_dump(),
        replies=[CommentResponse.model_validate(reply) for reply in node.replies],
    )


@router.get("/post/{post_id}", response_model=list[CommentThreadResponse])
async def list_thread(post_id: int, db: SessionDep) -> list[CommentThreadResponse]:
    """Return top-level comments, newest first, each with replies oldest first.

    An unknown post yields an empty list.
    """
    nodes = CommentTreeManager(db).list_thread(post_id)
    return [_to_thread_response(node) for node in nodes]


@router.post("/", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(
    comment_data: CommentCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> CommentResponse:
    """Add a comment, or a reply when ``parent_id`` names a top-level comment."""
    comment = CommentTreeManager(db).add_comment(
        comment_data.post_id,
        current_user.id,
        comment_data.content,
        comment_data.parent_id,
    )
    return CommentResponse.model_validate(comment)


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    comment_data: CommentUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> CommentResponse:
    """Edit the body of the caller's own comment."""
    comment = CommentTreeManager(db).update_comment(
        comment_id, current_user.id, comment_data.content
    )
    return CommentResponse.model_validate(comment)


@router.delete("/{comment_id}", response_model=CommentDeleteResponse)
async def delete_comment(
    comment_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> CommentDeleteResponse:
    """Delete the caller's own comment and every reply to it."""
    removed = CommentTreeManager(db).delete_comment(comment_id, current_user.id)
    return CommentDeleteResponse(message="Comment deleted successfully", deleted=removed)
