"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request around the request's session. The feed
cache is the one process-wide object: it lives on app.state and is handed
to every service that reads or invalidates it.

Usage:
======
    from batinet.api.dependencies.services import get_content_service

    @router.patch("/{content_id}/media/cover")
    async def set_cover(
        ...,
        content_service: ContentService = Depends(get_content_service),
    ):
        ...
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from batinet.api.dependencies.database import get_db
from batinet.shared.schemas.content import FeedPage
from batinet.shared.services.comment_service import CommentService
from batinet.shared.services.content_service import ContentService
from batinet.shared.services.feed_cache import FeedCache
from batinet.shared.services.feed_service import FeedService
from batinet.shared.services.tag_service import TagService


def get_feed_cache(request: Request) -> FeedCache[FeedPage]:
    """The application's feed response cache."""
    return request.app.state.feed_cache


async def get_feed_service(
    db: AsyncSession = Depends(get_db),
    cache: FeedCache[FeedPage] = Depends(get_feed_cache),
) -> FeedService:
    """
    Dependency to get FeedService instance.
    """
    return FeedService(db, cache)


async def get_content_service(
    db: AsyncSession = Depends(get_db),
    cache: FeedCache[FeedPage] = Depends(get_feed_cache),
) -> ContentService:
    """
    Dependency to get ContentService instance.
    """
    return ContentService(db, cache)


async def get_tag_service(
    db: AsyncSession = Depends(get_db),
    cache: FeedCache[FeedPage] = Depends(get_feed_cache),
) -> TagService:
    """
    Dependency to get TagService instance.
    """
    return TagService(db, cache)


async def get_comment_service(
    db: AsyncSession = Depends(get_db),
) -> CommentService:
    """
    Dependency to get CommentService instance.
    """
    return CommentService(db)
