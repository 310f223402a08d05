"""
Tag Service

Tag catalogue and tag attachments.

Attaching or detaching a tag on a CONTENT entity changes what a tag-filtered
feed returns, so those two operations invalidate the feed cache. Links on
other entity types (companies, profiles, ...) leave it alone.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.core.exceptions import (
    ConflictError,
    TagLinkNotFoundError,
    TagNotFoundError,
)
from batinet.shared.core.logging import get_logger
from batinet.shared.models.enums import TaggableEntity
from batinet.shared.models.tag import Tag, TagLink
from batinet.shared.repositories.tag_repository import TagLinkRepository, TagRepository
from batinet.shared.services.feed_cache import FeedCache


logger = get_logger("batinet.tags")


class TagService:
    """Service for tags and tag links."""

    def __init__(self, session: AsyncSession, cache: FeedCache) -> None:
        self.session = session
        self.cache = cache
        self.tag_repo = TagRepository(session)
        self.link_repo = TagLinkRepository(session)

    async def list_tags(self, tag_type: Optional[str] = None) -> list[Tag]:
        """List the catalogue, optionally one category only."""
        return await self.tag_repo.list_by_type(tag_type)

    async def create_tag(self, slug: str, label: str, tag_type: str) -> Tag:
        """
        Add a tag to the catalogue.

        Raises:
            ConflictError: Slug already taken
        """
        if await self.tag_repo.get_by_slug(slug):
            raise ConflictError(f"Tag slug '{slug}' already exists", details={"slug": slug})

        tag = await self.tag_repo.create(slug=slug, label=label, type=tag_type)
        logger.info("Tag created", tag_id=str(tag.id), slug=slug, type=tag_type)
        return tag

    async def link(self, tag_id: UUID, entity_type: str, entity_id: UUID) -> TagLink:
        """
        Attach a tag to an entity.

        Linking an already linked pair returns the existing link.

        Raises:
            TagNotFoundError: Unknown tag
        """
        if await self.tag_repo.get(tag_id) is None:
            raise TagNotFoundError(str(tag_id))

        link = await self.link_repo.find(tag_id, entity_type, entity_id)
        if link is None:
            link = await self.link_repo.create(
                tag_id=tag_id,
                entity_type=entity_type,
                entity_id=entity_id,
            )
            logger.info(
                "Tag linked",
                tag_id=str(tag_id),
                entity_type=entity_type,
                entity_id=str(entity_id),
            )

        if entity_type == TaggableEntity.CONTENT.value:
            self.cache.invalidate()
        return link

    async def unlink(self, link_id: Optional[UUID]) -> None:
        """
        Remove a tag link.

        Raises:
            TagLinkNotFoundError: Unknown or malformed link ID
        """
        link = await self.link_repo.get(link_id) if link_id else None
        if link is None:
            raise TagLinkNotFoundError(str(link_id) if link_id else "")

        entity_type = link.entity_type
        await self.link_repo.delete(link)

        if entity_type == TaggableEntity.CONTENT.value:
            self.cache.invalidate()
        logger.info("Tag unlinked", link_id=str(link.id), entity_type=entity_type)

    async def list_links(self, tag_id: Optional[UUID]) -> list[TagLink]:
        """
        Entities carrying a tag.

        Raises:
            TagNotFoundError: Unknown or malformed tag ID
        """
        if tag_id is None or await self.tag_repo.get(tag_id) is None:
            raise TagNotFoundError(str(tag_id) if tag_id else "")
        return await self.link_repo.list_for_tag(tag_id)
