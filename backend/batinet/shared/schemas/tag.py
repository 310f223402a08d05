"""
Tag-related Pydantic schemas.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from batinet.shared.schemas.common import BaseSchema


class TagResponse(BaseSchema):
    """Tag catalogue entry."""

    id: UUID
    slug: str
    label: str
    type: str
    created_at: datetime


class CreateTagRequest(BaseSchema):
    """Request to add a tag to the catalogue."""

    slug: str = Field(min_length=1, max_length=100, description="Unique machine name")
    label: str = Field(min_length=1, max_length=100, description="Display label")
    type: str = Field(min_length=1, max_length=30, description="Category, e.g. TRADE")


class LinkTagRequest(BaseSchema):
    """Request to attach a tag to an entity."""

    tag_id: UUID
    entity_type: str = Field(min_length=1, max_length=30, description="e.g. CONTENT")
    entity_id: UUID


class TagLinkResponse(BaseSchema):
    """Tag attachment."""

    id: UUID
    tag_id: UUID
    entity_type: str
    entity_id: UUID
