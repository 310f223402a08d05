"""
Batinet SQLAlchemy Models

This package contains all database models for the content backend.

Model Hierarchy:
================
    Content
       ├── media_links (ContentMedia[]) ──> MediaAsset
       └── comments (Comment[])

    Tag
       └── links (TagLink[]) ──> (entity_type, entity_id)

    CompanyMembership  (read-only here)

Usage:
======
    from batinet.shared.models import Content, ContentMedia, Tag, TagLink

    content.media_links  # ordered by sort_order
"""

from batinet.shared.models.base import Base, CreatedAtMixin, TimestampMixin
from batinet.shared.models.enums import ContentType, MediaType, TaggableEntity
from batinet.shared.models.content import Content
from batinet.shared.models.tag import Tag, TagLink
from batinet.shared.models.media import MediaAsset, ContentMedia
from batinet.shared.models.comment import Comment
from batinet.shared.models.company_membership import CompanyMembership

__all__ = [
    # Base classes and mixins
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    # Enums
    "ContentType",
    "MediaType",
    "TaggableEntity",
    # Models
    "Content",
    "Tag",
    "TagLink",
    "MediaAsset",
    "ContentMedia",
    "Comment",
    "CompanyMembership",
]
