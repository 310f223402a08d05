"""
Media Repository

Database operations for MediaAsset and ContentMedia.

Common Operations:
==================
- MediaAssetRepository.count_owned()         → Per-user quota check
- MediaAssetRepository.existing_ids()        → Validate IDs on post creation
- ContentMediaRepository.list_for_content()  → Ordered links of one content
- ContentMediaRepository.media_for_contents() → Batch media lookup for enrichment
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.repositories.base import BaseRepository
from batinet.shared.models.media import ContentMedia, MediaAsset


class MediaAssetRepository(BaseRepository[MediaAsset]):
    """Repository for uploaded assets."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(MediaAsset, session)

    async def count_owned(self, owner_id: UUID) -> int:
        """Number of assets uploaded by a user."""
        return await self.count_where(owner_id=owner_id)

    async def existing_ids(self, ids: list[UUID]) -> set[UUID]:
        """
        Subset of the given IDs that exist.

        SQL Generated:
            SELECT id FROM media_assets WHERE id IN (...)
        """
        if not ids:
            return set()
        result = await self.session.execute(select(MediaAsset.id).where(MediaAsset.id.in_(ids)))
        return set(result.scalars().all())


class ContentMediaRepository(BaseRepository[ContentMedia]):
    """Repository for media attached to content."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ContentMedia, session)

    async def list_for_content(self, content_id: UUID) -> list[ContentMedia]:
        """
        Links of one content in gallery order.

        The returned rows are session-tracked; services mutate sort_order and
        is_cover on them directly and flush.
        """
        result = await self.session.execute(
            select(ContentMedia)
            .where(ContentMedia.content_id == content_id)
            .order_by(ContentMedia.sort_order.asc(), ContentMedia.id.asc())
        )
        return list(result.scalars().all())

    async def media_for_contents(
        self,
        content_ids: list[UUID],
    ) -> list[tuple[ContentMedia, MediaAsset]]:
        """
        Get (link, asset) pairs for a batch of contents in one join.

        Ordered by sort_order ascending, then asset creation descending.

        SQL Generated:
            SELECT content_media.*, media_assets.*
            FROM content_media JOIN media_assets ON media_assets.id = content_media.media_id
            WHERE content_media.content_id IN (...)
            ORDER BY content_media.sort_order ASC, media_assets.created_at DESC
        """
        result = await self.session.execute(
            select(ContentMedia, MediaAsset)
            .join(MediaAsset, MediaAsset.id == ContentMedia.media_id)
            .where(ContentMedia.content_id.in_(content_ids))
            .order_by(ContentMedia.sort_order.asc(), MediaAsset.created_at.desc())
        )
        return [(link, asset) for link, asset in result.all()]

    async def flush(self) -> None:
        """Send pending changes on tracked links."""
        await self.session.flush()
