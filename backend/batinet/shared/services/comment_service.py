"""
Comment Service

Comments on content items.

Rights:
=======
- anyone authenticated may comment on an existing content item
- only the author may edit a comment
- the author, or an active member of the company owning the content, may
  delete it

Comments are not part of feed payloads, so none of these operations touch
the feed cache.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.core.exceptions import (
    AuthorizationError,
    CommentNotFoundError,
    ContentNotFoundError,
    ValidationError,
)
from batinet.shared.core.logging import get_logger
from batinet.shared.models.comment import Comment
from batinet.shared.repositories.comment_repository import CommentRepository
from batinet.shared.repositories.company_membership_repository import (
    CompanyMembershipRepository,
)
from batinet.shared.repositories.content_repository import ContentRepository


logger = get_logger("batinet.comments")


def _require_body(body: Optional[str]) -> str:
    if not body or not body.strip():
        raise ValidationError("Comment cannot be empty")
    return body


class CommentService:
    """Service for comment business logic."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.comment_repo = CommentRepository(session)
        self.content_repo = ContentRepository(session)
        self.membership_repo = CompanyMembershipRepository(session)

    async def add_comment(
        self,
        content_id: Optional[UUID],
        author_id: UUID,
        body: str,
        parent_comment_id: Optional[UUID] = None,
    ) -> Comment:
        """
        Comment on a content item.

        Raises:
            ValidationError: Blank body
            ContentNotFoundError: Unknown content
        """
        body = _require_body(body)

        content = await self.content_repo.get(content_id) if content_id else None
        if content is None:
            raise ContentNotFoundError(str(content_id) if content_id else "")

        comment = await self.comment_repo.create(
            content_id=content.id,
            author_user_id=author_id,
            body=body,
            parent_comment_id=parent_comment_id,
        )
        logger.info("Comment added", comment_id=str(comment.id), content_id=str(content.id))
        return comment

    async def list_comments(self, content_id: Optional[UUID]) -> list[Comment]:
        """Comments of a content item, oldest first; unknown content has none."""
        if content_id is None:
            return []
        return await self.comment_repo.list_for_content(content_id)

    async def edit_comment(self, comment_id: Optional[UUID], user_id: UUID, body: str) -> Comment:
        """
        Replace the text of a comment.

        Raises:
            ValidationError: Blank body
            CommentNotFoundError: Unknown comment
            AuthorizationError: Caller is not the author
        """
        body = _require_body(body)
        comment = await self._get_comment(comment_id)

        if comment.author_user_id != user_id:
            raise AuthorizationError("Only the author can edit this comment")

        comment.body = body
        await self.session.flush()
        await self.session.refresh(comment)
        return comment

    async def delete_comment(self, comment_id: Optional[UUID], user_id: UUID) -> None:
        """
        Delete a comment.

        Raises:
            CommentNotFoundError: Unknown comment
            AuthorizationError: Neither author nor member of the owning company
        """
        comment = await self._get_comment(comment_id)

        if comment.author_user_id != user_id and not await self._moderates(comment, user_id):
            raise AuthorizationError("Cannot delete this comment")

        await self.comment_repo.delete(comment)
        logger.info("Comment deleted", comment_id=str(comment.id), by_user_id=str(user_id))

    async def _get_comment(self, comment_id: Optional[UUID]) -> Comment:
        comment = await self.comment_repo.get(comment_id) if comment_id else None
        if comment is None:
            raise CommentNotFoundError(str(comment_id) if comment_id else "")
        return comment

    async def _moderates(self, comment: Comment, user_id: UUID) -> bool:
        content = await self.content_repo.get(comment.content_id)
        if content is None or content.company_id is None:
            return False
        return await self.membership_repo.is_active_member(user_id, content.company_id)
