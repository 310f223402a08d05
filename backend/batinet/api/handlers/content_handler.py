"""
Content Handler

Public feed, single content view, post creation and media ordering.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer. Path IDs are parsed leniently:
a malformed ID is passed on as None and ends as a 404.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from batinet.api.dependencies import CurrentUserId
from batinet.api.dependencies.services import get_content_service, get_feed_service
from batinet.shared.schemas.content import (
    ContentView,
    CreatePostRequest,
    FeedPage,
    ReorderMediaRequest,
    SetCoverRequest,
)
from batinet.shared.services.content_service import ContentService
from batinet.shared.services.feed_filters import FeedFilters
from batinet.shared.services.feed_service import FeedService
from batinet.shared.utils.identifiers import parse_id


router = APIRouter()


def get_feed_filters(
    kind: Annotated[Optional[str], Query(alias="type")] = None,
    tag_ids: Annotated[Optional[str], Query(alias="tagIds")] = None,
    company_id: Annotated[Optional[str], Query(alias="companyId")] = None,
    author_id: Annotated[Optional[str], Query(alias="authorId")] = None,
    search: Annotated[Optional[str], Query()] = None,
    page: Annotated[Optional[str], Query()] = None,
    page_size: Annotated[Optional[str], Query(alias="pageSize")] = None,
) -> FeedFilters:
    """
    Feed query string as sanitized filters.

    Everything is accepted as a raw string so that malformed values are
    dropped by FeedFilters instead of failing request validation.
    """
    return FeedFilters.from_query(
        kind=kind,
        tag_ids=tag_ids,
        company_id=company_id,
        author_id=author_id,
        search=search,
        page=page,
        page_size=page_size,
    )


@router.get("", response_model=FeedPage)
async def get_feed(
    filters: Annotated[FeedFilters, Depends(get_feed_filters)],
    feed_service: FeedService = Depends(get_feed_service),
):
    """
    Public feed, newest first.

    Query: type, tagIds (comma-separated), companyId, authorId, search,
    page, pageSize. Served from the feed cache when the same query was
    answered less than a TTL ago.
    """
    return await feed_service.get_feed(filters)


@router.post("/posts", response_model=ContentView, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostRequest,
    user_id: CurrentUserId,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Publish a post with optional tags and up to ten media.

    The first medium becomes the cover.
    """
    return await content_service.create_post(user_id, request)


@router.get("/{content_id}", response_model=ContentView)
async def get_content(
    content_id: str,
    content_service: ContentService = Depends(get_content_service),
):
    """Get one content item with its media and tags."""
    return await content_service.get_content_view(parse_id(content_id))


@router.delete("/{content_id}/media/{media_id}", response_model=ContentView)
async def remove_media(
    content_id: str,
    media_id: str,
    user_id: CurrentUserId,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Detach a medium from the author's content.

    Remaining media are renumbered and the first one becomes the cover.
    """
    return await content_service.remove_media(parse_id(content_id), parse_id(media_id), user_id)


@router.patch("/{content_id}/media/reorder", response_model=ContentView)
async def reorder_media(
    content_id: str,
    request: ReorderMediaRequest,
    user_id: CurrentUserId,
    content_service: ContentService = Depends(get_content_service),
):
    """Reorder the gallery; mediaIds must list every attached medium once."""
    return await content_service.reorder_media(parse_id(content_id), request.media_ids, user_id)


@router.patch("/{content_id}/media/cover", response_model=ContentView)
async def set_cover(
    content_id: str,
    request: SetCoverRequest,
    user_id: CurrentUserId,
    content_service: ContentService = Depends(get_content_service),
):
    """Choose the cover among the attached media."""
    return await content_service.set_cover(parse_id(content_id), request.media_id, user_id)
