"""
Enums used across the application.
"""

from enum import Enum


class ContentType(str, Enum):
    """Discriminant of the polymorphic content record."""

    POST = "POST"
    WORK_REQUEST = "WORK_REQUEST"
    JOB_OFFER = "JOB_OFFER"
    TENDER = "TENDER"
    LEGAL = "LEGAL"


class MediaType(str, Enum):
    """Kind of uploaded asset, derived from its MIME type."""

    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    FILE = "FILE"


class TaggableEntity(str, Enum):
    """
    Entity types that tag links point to.

    tag_links.entity_type is a free string column; these are the values the
    platform writes. Only CONTENT links affect the feed.
    """

    CONTENT = "CONTENT"
    COMPANY = "COMPANY"
    PROFILE = "PROFILE"
    LEGAL_ARTICLE = "LEGAL_ARTICLE"
