"""
Content Repository

Database operations specific to the Content model.

Common Operations:
==================
- list_public_page() → Public feed rows matching a conjunction of filters
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.repositories.base import BaseRepository
from batinet.shared.models.content import Content
from batinet.shared.models.enums import ContentType


class ContentRepository(BaseRepository[Content]):
    """
    Repository for Content database operations.

    Feed queries only ever see public rows.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Content, session)

    async def list_public_page(
        self,
        *,
        offset: int,
        limit: int,
        kind: Optional[ContentType] = None,
        content_ids: Optional[set[UUID]] = None,
        company_id: Optional[UUID] = None,
        author_id: Optional[UUID] = None,
        search: Optional[str] = None,
    ) -> list[Content]:
        """
        Get one window of the public feed, newest first.

        All given filters are combined with AND. `search` is a
        case-insensitive substring match on title OR body; LIKE wildcards in
        the search text are matched literally.

        Args:
            offset: Rows to skip
            limit: Rows to return
            kind: Restrict to one content type
            content_ids: Restrict to these IDs (resolved from a tag filter)
            company_id: Owning company
            author_id: Author user
            search: Free text

        SQL Generated:
            SELECT * FROM content
            WHERE is_public AND type = 'POST' AND id IN (...)
              AND (lower(title) LIKE '%' || lower(:q) || '%' OR lower(body) LIKE ...)
            ORDER BY created_at DESC
            LIMIT :limit OFFSET :offset
        """
        query = select(Content).where(Content.is_public.is_(True))

        if kind is not None:
            query = query.where(Content.type == kind)
        if content_ids is not None:
            query = query.where(Content.id.in_(content_ids))
        if company_id is not None:
            query = query.where(Content.company_id == company_id)
        if author_id is not None:
            query = query.where(Content.author_user_id == author_id)
        if search:
            query = query.where(
                or_(
                    Content.title.icontains(search, autoescape=True),
                    Content.body.icontains(search, autoescape=True),
                )
            )

        query = query.order_by(Content.created_at.desc(), Content.id.desc())
        query = query.offset(offset).limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())
