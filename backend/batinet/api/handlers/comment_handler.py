"""
Comment Handler

Comments on content items.
"""

from fastapi import APIRouter, Depends, status

from batinet.api.dependencies import CurrentUserId
from batinet.api.dependencies.services import get_comment_service
from batinet.shared.schemas.comment import (
    CommentResponse,
    CreateCommentRequest,
    UpdateCommentRequest,
)
from batinet.shared.schemas.common import MessageResponse
from batinet.shared.services.comment_service import CommentService
from batinet.shared.utils.identifiers import parse_id


router = APIRouter()


@router.post(
    "/content/{content_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    content_id: str,
    request: CreateCommentRequest,
    user_id: CurrentUserId,
    comment_service: CommentService = Depends(get_comment_service),
):
    """Comment on a content item."""
    return await comment_service.add_comment(
        parse_id(content_id),
        user_id,
        request.body,
        parent_comment_id=request.parent_comment_id,
    )


@router.get("/content/{content_id}/comments", response_model=list[CommentResponse])
async def list_comments(
    content_id: str,
    comment_service: CommentService = Depends(get_comment_service),
):
    """Comments of a content item, oldest first."""
    return await comment_service.list_comments(parse_id(content_id))


@router.patch("/comments/{comment_id}", response_model=CommentResponse)
async def edit_comment(
    comment_id: str,
    request: UpdateCommentRequest,
    user_id: CurrentUserId,
    comment_service: CommentService = Depends(get_comment_service),
):
    """Edit one's own comment."""
    return await comment_service.edit_comment(parse_id(comment_id), user_id, request.body)


@router.delete("/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: str,
    user_id: CurrentUserId,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Delete a comment.

    Allowed for its author and for members of the company owning the content.
    """
    await comment_service.delete_comment(parse_id(comment_id), user_id)
    return MessageResponse(message="Comment deleted")
