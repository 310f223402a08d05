"""
Comment Repository

Database operations for comments.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.repositories.base import BaseRepository
from batinet.shared.models.comment import Comment


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Comment, session)

    async def list_for_content(self, content_id: UUID) -> list[Comment]:
        """
        Comments of one content, oldest first.

        SQL Generated:
            SELECT * FROM comments WHERE content_id = '...' ORDER BY created_at ASC
        """
        result = await self.session.execute(
            select(Comment)
            .where(Comment.content_id == content_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        return list(result.scalars().all())
