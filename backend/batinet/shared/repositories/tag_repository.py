"""
Tag Repository

Database operations for Tag and TagLink.

Common Operations:
==================
- TagRepository.get_by_slug()          → Slug uniqueness check
- TagRepository.list_by_type()         → Catalogue listing
- TagLinkRepository.content_ids_for_tags() → Resolve a feed tag filter
- TagLinkRepository.tags_for_entities()    → Batch tag lookup for enrichment
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.repositories.base import BaseRepository
from batinet.shared.models.tag import Tag, TagLink


class TagRepository(BaseRepository[Tag]):
    """Repository for the tag catalogue."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Tag, session)

    async def get_by_slug(self, slug: str) -> Optional[Tag]:
        """
        Get a tag by its unique slug.

        SQL Generated:
            SELECT * FROM tags WHERE slug = 'maconnerie'
        """
        result = await self.session.execute(select(Tag).where(Tag.slug == slug))
        return result.scalar_one_or_none()

    async def list_by_type(self, tag_type: Optional[str] = None) -> list[Tag]:
        """
        List tags ordered by label, optionally restricted to one type.

        SQL Generated:
            SELECT * FROM tags WHERE type = 'TRADE' ORDER BY label
        """
        query = select(Tag)
        if tag_type:
            query = query.where(Tag.type == tag_type)
        query = query.order_by(Tag.label.asc())

        result = await self.session.execute(query)
        return list(result.scalars().all())


class TagLinkRepository(BaseRepository[TagLink]):
    """Repository for tag attachments."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(TagLink, session)

    async def content_ids_for_tags(self, tag_ids: list[UUID], entity_type: str) -> set[UUID]:
        """
        Resolve the entities carrying at least one of the given tags.

        Returns:
            Deduplicated entity IDs (OR semantics across tags)

        SQL Generated:
            SELECT entity_id FROM tag_links
            WHERE entity_type = 'CONTENT' AND tag_id IN (...)
        """
        result = await self.session.execute(
            select(TagLink.entity_id).where(
                TagLink.entity_type == entity_type,
                TagLink.tag_id.in_(tag_ids),
            )
        )
        return set(result.scalars().all())

    async def tags_for_entities(
        self,
        entity_ids: list[UUID],
        entity_type: str,
    ) -> list[tuple[UUID, Tag]]:
        """
        Get (entity_id, tag) pairs for a batch of entities in one join.

        SQL Generated:
            SELECT tag_links.entity_id, tags.*
            FROM tag_links JOIN tags ON tags.id = tag_links.tag_id
            WHERE entity_type = 'CONTENT' AND entity_id IN (...)
        """
        result = await self.session.execute(
            select(TagLink.entity_id, Tag)
            .join(Tag, Tag.id == TagLink.tag_id)
            .where(
                TagLink.entity_type == entity_type,
                TagLink.entity_id.in_(entity_ids),
            )
            .order_by(Tag.label.asc())
        )
        return [(entity_id, tag) for entity_id, tag in result.all()]

    async def list_for_tag(self, tag_id: UUID) -> list[TagLink]:
        """All links of one tag, grouped by entity type then entity id."""
        result = await self.session.execute(
            select(TagLink)
            .where(TagLink.tag_id == tag_id)
            .order_by(TagLink.entity_type, TagLink.entity_id)
        )
        return list(result.scalars().all())

    async def find(self, tag_id: UUID, entity_type: str, entity_id: UUID) -> Optional[TagLink]:
        """Existing link between a tag and an entity, if any."""
        result = await self.session.execute(
            select(TagLink).where(
                TagLink.tag_id == tag_id,
                TagLink.entity_type == entity_type,
                TagLink.entity_id == entity_id,
            )
        )
        return result.scalars().first()
