"""
Comment-related Pydantic schemas.

Body blankness is checked in CommentService so that a whitespace-only body
yields the same VALIDATION_ERROR whichever route receives it.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from batinet.shared.schemas.common import BaseSchema


class CreateCommentRequest(BaseSchema):
    """Request to comment on content."""

    body: str
    parent_comment_id: Optional[UUID] = None


class UpdateCommentRequest(BaseSchema):
    """Request to edit a comment."""

    body: str


class CommentResponse(BaseSchema):
    """Comment on a content item."""

    id: UUID
    content_id: UUID
    author_user_id: UUID
    body: str
    parent_comment_id: Optional[UUID] = None
    created_at: datetime
