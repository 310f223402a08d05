"""
Content Service

Business logic for single content items: post creation, content view and
the media ordering operations.

Media Ordering Invariants:
==========================
For every content item, after any operation of this service:
- content_media.sort_order values are exactly 0..n-1
- at most one link has is_cover = true

    remove_media   delete link, renumber survivors in order, first one is cover
    reorder_media  sort_order = position in the new order, covers untouched
    set_cover      clear every cover flag, flag the given link

Every mutator invalidates the feed cache as its last step, after the
response view has been loaded.

Transactions:
=============
All statements run in the request session and are committed together by
get_db(); a failure anywhere in create_post leaves no partial post behind.

Usage:
======
    from batinet.shared.services.content_service import ContentService

    service = ContentService(db, cache)
    view = await service.set_cover(content_id, media_id, user_id)
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batinet.config.settings import settings
from batinet.shared.core.exceptions import (
    AuthorizationError,
    ContentNotFoundError,
    InvalidMediaIdError,
    InvalidMediaSetError,
    MediaNotInPostError,
    MediaQuotaExceededError,
    MissingContentError,
    ValidationError,
)
from batinet.shared.core.logging import get_logger
from batinet.shared.models.content import Content
from batinet.shared.models.enums import ContentType, TaggableEntity
from batinet.shared.models.media import ContentMedia
from batinet.shared.repositories.content_repository import ContentRepository
from batinet.shared.repositories.media_repository import (
    ContentMediaRepository,
    MediaAssetRepository,
)
from batinet.shared.repositories.tag_repository import TagLinkRepository, TagRepository
from batinet.shared.schemas.content import ContentView, CreatePostRequest
from batinet.shared.services.enrichment import EnrichmentLoader
from batinet.shared.services.feed_cache import FeedCache


logger = get_logger("batinet.content")


class ContentService:
    """
    Service for content-related business logic.

    Handles:
    - Publishing posts with tags and media
    - Reading one enriched content item
    - Removing, reordering and choosing the cover of attached media
    """

    def __init__(self, session: AsyncSession, cache: FeedCache) -> None:
        """
        Initialize ContentService.

        Args:
            session: Async database session
            cache: Feed response cache to invalidate on writes
        """
        self.session = session
        self.cache = cache
        self.content_repo = ContentRepository(session)
        self.media_repo = MediaAssetRepository(session)
        self.content_media_repo = ContentMediaRepository(session)
        self.tag_repo = TagRepository(session)
        self.tag_link_repo = TagLinkRepository(session)
        self.loader = EnrichmentLoader(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_content_view(self, content_id: Optional[UUID]) -> ContentView:
        """
        Get one content item with its media and tags.

        Args:
            content_id: Parsed path ID; None for a malformed one

        Raises:
            ContentNotFoundError: Unknown or malformed ID
        """
        content = await self._get_content(content_id)
        return await self._view(content)

    # ═══════════════════════════════════════════════════════════════════════════
    # POST CREATION
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_post(self, author_id: UUID, request: CreatePostRequest) -> ContentView:
        """
        Publish a post.

        Flow:
        1. Require a title, a body or at least one medium
        2. Refuse authors above the media quota
        3. Check every media ID and tag ID exists
        4. Insert the content row, its tag links and its media links
           (sort_order = position, first medium is the cover)
        5. Invalidate the feed cache

        Args:
            author_id: Authenticated user
            request: Validated body (media count already bounded)

        Returns:
            The created post, enriched

        Raises:
            MissingContentError: Nothing to publish
            MediaQuotaExceededError: Author owns too many assets
            InvalidMediaIdError: Unknown or repeated media ID
            ValidationError: Unknown tag ID
        """
        media_ids = request.media_ids
        if not request.title and not request.body and not media_ids:
            raise MissingContentError()

        owned = await self.media_repo.count_owned(author_id)
        if owned > settings.MEDIA_QUOTA_PER_USER:
            raise MediaQuotaExceededError(settings.MEDIA_QUOTA_PER_USER)

        if media_ids:
            if len(set(media_ids)) != len(media_ids):
                raise InvalidMediaIdError()
            existing = await self.media_repo.existing_ids(media_ids)
            missing = [str(media_id) for media_id in media_ids if media_id not in existing]
            if missing:
                raise InvalidMediaIdError(missing)

        tag_ids = list(dict.fromkeys(request.tag_ids))
        if tag_ids:
            found = {tag.id for tag in await self.tag_repo.get_by_ids(tag_ids)}
            unknown = [str(tag_id) for tag_id in tag_ids if tag_id not in found]
            if unknown:
                raise ValidationError("Unknown tag id", details={"missing": unknown})

        content = await self.content_repo.create(
            type=ContentType.POST,
            author_user_id=author_id,
            company_id=request.company_id,
            title=request.title,
            body=request.body,
            is_public=request.is_public,
        )

        await self.tag_link_repo.create_many([
            {
                "tag_id": tag_id,
                "entity_type": TaggableEntity.CONTENT.value,
                "entity_id": content.id,
            }
            for tag_id in tag_ids
        ])

        await self.content_media_repo.create_many([
            {
                "content_id": content.id,
                "media_id": media_id,
                "sort_order": index,
                "is_cover": index == 0,
            }
            for index, media_id in enumerate(media_ids)
        ])

        logger.info(
            "Post created",
            content_id=str(content.id),
            author_user_id=str(author_id),
            media_count=len(media_ids),
            tag_count=len(tag_ids),
        )
        return await self._view_and_invalidate(content)

    # ═══════════════════════════════════════════════════════════════════════════
    # MEDIA ORDERING
    # ═══════════════════════════════════════════════════════════════════════════

    async def remove_media(
        self,
        content_id: Optional[UUID],
        media_id: Optional[UUID],
        user_id: UUID,
    ) -> ContentView:
        """
        Detach a medium from a content item.

        Survivors keep their relative order, are renumbered from 0 and the
        new first one becomes the cover. Removing a medium that is not
        attached deletes nothing but still renumbers and moves the cover back
        to the first medium.

        Raises:
            ContentNotFoundError: Unknown content
            AuthorizationError: Caller is not the author
        """
        content = await self._get_owned_content(content_id, user_id)

        links = await self.content_media_repo.list_for_content(content.id)
        remaining: list[ContentMedia] = []
        for link in links:
            if link.media_id == media_id:
                await self.content_media_repo.delete(link)
            else:
                remaining.append(link)

        for index, link in enumerate(remaining):
            link.sort_order = index
            link.is_cover = index == 0
        await self.content_media_repo.flush()

        logger.info(
            "Media removed from content",
            content_id=str(content.id),
            media_id=str(media_id) if media_id else None,
            remaining=len(remaining),
        )
        return await self._view_and_invalidate(content)

    async def reorder_media(
        self,
        content_id: Optional[UUID],
        media_ids: list[UUID],
        user_id: UUID,
    ) -> ContentView:
        """
        Apply a new gallery order.

        `media_ids` must be a permutation of the attached media: same
        cardinality, no duplicates, no stranger. Cover flags are left as they
        are.

        Raises:
            ContentNotFoundError: Unknown content
            AuthorizationError: Caller is not the author
            InvalidMediaSetError: Not a permutation of the attached media
        """
        content = await self._get_owned_content(content_id, user_id)

        links = await self.content_media_repo.list_for_content(content.id)
        by_media = {link.media_id: link for link in links}

        if (
            len(media_ids) != len(links)
            or len(set(media_ids)) != len(media_ids)
            or set(media_ids) != set(by_media)
        ):
            raise InvalidMediaSetError()

        for position, media_id in enumerate(media_ids):
            by_media[media_id].sort_order = position
        await self.content_media_repo.flush()

        logger.info("Media reordered", content_id=str(content.id), count=len(media_ids))
        return await self._view_and_invalidate(content)

    async def set_cover(
        self,
        content_id: Optional[UUID],
        media_id: UUID,
        user_id: UUID,
    ) -> ContentView:
        """
        Make one attached medium the cover.

        Raises:
            ContentNotFoundError: Unknown content
            AuthorizationError: Caller is not the author
            MediaNotInPostError: Medium is not attached to this content
        """
        content = await self._get_owned_content(content_id, user_id)

        links = await self.content_media_repo.list_for_content(content.id)
        target = next((link for link in links if link.media_id == media_id), None)
        if target is None:
            raise MediaNotInPostError(str(media_id))

        for link in links:
            link.is_cover = False
        target.is_cover = True
        await self.content_media_repo.flush()

        logger.info("Cover changed", content_id=str(content.id), media_id=str(media_id))
        return await self._view_and_invalidate(content)

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _get_content(self, content_id: Optional[UUID]) -> Content:
        content = await self.content_repo.get(content_id) if content_id else None
        if content is None:
            raise ContentNotFoundError(str(content_id) if content_id else "")
        return content

    async def _get_owned_content(self, content_id: Optional[UUID], user_id: UUID) -> Content:
        content = await self._get_content(content_id)
        if content.author_user_id != user_id:
            raise AuthorizationError("Only the author can modify this content")
        return content

    async def _view(self, content: Content) -> ContentView:
        views = await self.loader.enrich([content])
        return views[0]

    async def _view_and_invalidate(self, content: Content) -> ContentView:
        # No query may follow the invalidation.
        view = await self._view(content)
        self.cache.invalidate()
        return view
