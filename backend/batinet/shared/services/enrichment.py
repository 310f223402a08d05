"""
Tag/Media Enrichment Loader

Batch-loads the media and tags attached to a set of content IDs.

Each call issues exactly one joined query for the whole batch, so a feed
page costs two extra round trips whatever its size. Content IDs without
attachments are absent from the returned mapping; callers default to an
empty list.
"""

from collections import defaultdict
from typing import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.models.content import Content
from batinet.shared.models.enums import TaggableEntity
from batinet.shared.repositories.media_repository import ContentMediaRepository
from batinet.shared.repositories.tag_repository import TagLinkRepository
from batinet.shared.schemas.content import ContentView, MediaView, TagView


class EnrichmentLoader:
    """Fan-out loader for content attachments."""

    def __init__(self, session: AsyncSession) -> None:
        self.content_media_repo = ContentMediaRepository(session)
        self.tag_link_repo = TagLinkRepository(session)

    async def load_media(self, content_ids: Iterable[UUID]) -> dict[UUID, list[MediaView]]:
        """
        Media per content, ordered by sort_order then newest asset first.

        Returns:
            {} without querying when content_ids is empty
        """
        ids = list(dict.fromkeys(content_ids))
        if not ids:
            return {}

        by_content: dict[UUID, list[MediaView]] = defaultdict(list)
        for link, asset in await self.content_media_repo.media_for_contents(ids):
            by_content[link.content_id].append(
                MediaView(
                    id=asset.id,
                    url=asset.url,
                    type=asset.type,
                    mime_type=asset.mime_type,
                    width=asset.width,
                    height=asset.height,
                    size_bytes=asset.size_bytes,
                    created_at=asset.created_at,
                    sort_order=link.sort_order,
                    is_cover=link.is_cover,
                )
            )
        return dict(by_content)

    async def load_tags(self, content_ids: Iterable[UUID]) -> dict[UUID, list[TagView]]:
        """
        Tags per content, through CONTENT tag links only.

        Returns:
            {} without querying when content_ids is empty
        """
        ids = list(dict.fromkeys(content_ids))
        if not ids:
            return {}

        by_content: dict[UUID, list[TagView]] = defaultdict(list)
        rows = await self.tag_link_repo.tags_for_entities(ids, TaggableEntity.CONTENT.value)
        for entity_id, tag in rows:
            by_content[entity_id].append(TagView.model_validate(tag))
        return dict(by_content)

    async def enrich(self, rows: list[Content]) -> list[ContentView]:
        """Attach media and tags to content rows, preserving row order."""
        ids = [row.id for row in rows]
        media = await self.load_media(ids)
        tags = await self.load_tags(ids)
        return [
            self.to_view(row, media.get(row.id, []), tags.get(row.id, []))
            for row in rows
        ]

    @staticmethod
    def to_view(row: Content, media: list[MediaView], tags: list[TagView]) -> ContentView:
        return ContentView(
            id=row.id,
            type=row.type,
            author_user_id=row.author_user_id,
            company_id=row.company_id,
            title=row.title,
            body=row.body,
            is_public=row.is_public,
            meta=row.meta,
            created_at=row.created_at,
            updated_at=row.updated_at,
            media=media,
            tags=tags,
        )
