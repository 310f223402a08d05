"""
Content-related Pydantic schemas.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import Field

from batinet.config.settings import settings
from batinet.shared.models.enums import ContentType, MediaType
from batinet.shared.schemas.common import BaseSchema


class MediaView(BaseSchema):
    """A media asset as attached to one content item."""

    id: UUID
    url: str
    type: MediaType
    mime_type: str
    width: Optional[int] = None
    height: Optional[int] = None
    size_bytes: int
    created_at: datetime
    sort_order: int
    is_cover: bool


class TagView(BaseSchema):
    """A tag attached to a content item."""

    id: UUID
    slug: str
    label: str
    type: str


class ContentView(BaseSchema):
    """
    Content row enriched with its media and tags.

    Media are in gallery order; the cover, when any, is flagged by is_cover.
    """

    id: UUID
    type: ContentType
    author_user_id: UUID
    company_id: Optional[UUID] = None
    title: Optional[str] = None
    body: Optional[str] = None
    is_public: bool
    meta: Optional[dict[str, Any]] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    media: list[MediaView] = Field(default_factory=list)
    tags: list[TagView] = Field(default_factory=list)


class FeedPage(BaseSchema):
    """One page of the public feed."""

    page: int
    page_size: int
    has_more: bool
    items: list[ContentView]


class CreatePostRequest(BaseSchema):
    """Request to publish a post."""

    title: Optional[str] = Field(None, max_length=255, description="Post title")
    body: Optional[str] = Field(None, description="Post text")
    is_public: bool = Field(True, description="Visible in the public feed")
    company_id: Optional[UUID] = Field(None, description="Publish on behalf of a company")
    tag_ids: list[UUID] = Field(default_factory=list, description="Tags to attach")
    media_ids: list[UUID] = Field(
        default_factory=list,
        max_length=settings.POST_MAX_MEDIA,
        description="Uploaded media, first one becomes the cover",
    )


class ReorderMediaRequest(BaseSchema):
    """New gallery order; must list every attached medium exactly once."""

    media_ids: list[UUID]


class SetCoverRequest(BaseSchema):
    """Medium to flag as cover."""

    media_id: UUID
