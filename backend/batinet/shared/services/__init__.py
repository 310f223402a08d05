"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ FeedCache (invalidate on content writes)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Only flush; the request session commits
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- FeedService: Public feed with the response cache
- ContentService: Post creation, content view, media ordering
- TagService: Tag catalogue and tag links
- CommentService: Comments on content
- EnrichmentLoader: Batch media/tag loading for content rows

Usage:
======
    from batinet.shared.services import FeedService, FeedFilters

    service = FeedService(db, cache)
    page = await service.get_feed(FeedFilters.from_query(page="2"))
"""

from batinet.shared.services.feed_filters import FeedFilters
from batinet.shared.services.feed_cache import FeedCache
from batinet.shared.services.enrichment import EnrichmentLoader
from batinet.shared.services.feed_service import FeedService
from batinet.shared.services.content_service import ContentService
from batinet.shared.services.tag_service import TagService
from batinet.shared.services.comment_service import CommentService

__all__ = [
    "FeedFilters",
    "FeedCache",
    "EnrichmentLoader",
    "FeedService",
    "ContentService",
    "TagService",
    "CommentService",
]
