"""
Feed Service

Public content feed: filtering, pagination and the response cache.

Query Flow:
===========
    FeedFilters (sanitized)
        │
        ├─ unknown kind ───────────────────────────▶ empty page
        ├─ tag filter → tag_links(CONTENT) → ids
        │       └─ no ids ─────────────────────────▶ empty page
        ▼
    content WHERE is_public AND <filters>
    ORDER BY created_at DESC
    OFFSET (page-1)*page_size LIMIT page_size+1
        │
        ▼
    has_more = got page_size+1 rows → truncate → enrich

The extra row detects a following page without a COUNT query.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.core.logging import get_logger
from batinet.shared.models.enums import TaggableEntity
from batinet.shared.repositories.content_repository import ContentRepository
from batinet.shared.repositories.tag_repository import TagLinkRepository
from batinet.shared.schemas.content import FeedPage
from batinet.shared.services.enrichment import EnrichmentLoader
from batinet.shared.services.feed_cache import FeedCache
from batinet.shared.services.feed_filters import FeedFilters


logger = get_logger("batinet.feed")


class FeedService:
    """
    Service for the public feed.

    Args:
        session: Request database session
        cache: Process-wide feed response cache
    """

    def __init__(self, session: AsyncSession, cache: FeedCache[FeedPage]) -> None:
        self.session = session
        self.cache = cache
        self.content_repo = ContentRepository(session)
        self.tag_link_repo = TagLinkRepository(session)
        self.loader = EnrichmentLoader(session)

    async def get_feed(self, filters: FeedFilters) -> FeedPage:
        """
        Cached feed read.

        Only successful responses are stored; a database error propagates and
        leaves the cache untouched.
        """
        key = FeedCache.key(filters)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Feed cache hit", key=key)
            return cached

        logger.debug("Feed cache miss", key=key)
        page = await self.query_feed(filters)
        self.cache.set(key, page)
        return page

    async def query_feed(self, filters: FeedFilters) -> FeedPage:
        """
        Run the feed query against the database, bypassing the cache.

        Args:
            filters: Sanitized criteria

        Returns:
            FeedPage with at most page_size items
        """
        if filters.kind_is_unknown:
            return self._empty_page(filters)

        content_ids = None
        if filters.tag_ids:
            content_ids = await self.tag_link_repo.content_ids_for_tags(
                list(filters.tag_ids),
                TaggableEntity.CONTENT.value,
            )
            if not content_ids:
                return self._empty_page(filters)

        rows = await self.content_repo.list_public_page(
            offset=filters.offset,
            limit=filters.page_size + 1,
            kind=filters.content_type,
            content_ids=content_ids,
            company_id=filters.company_id,
            author_id=filters.author_id,
            search=filters.search,
        )

        has_more = len(rows) > filters.page_size
        rows = rows[: filters.page_size]

        items = await self.loader.enrich(rows)

        return FeedPage(
            page=filters.page,
            page_size=filters.page_size,
            has_more=has_more,
            items=items,
        )

    @staticmethod
    def _empty_page(filters: FeedFilters) -> FeedPage:
        return FeedPage(
            page=filters.page,
            page_size=filters.page_size,
            has_more=False,
            items=[],
        )
