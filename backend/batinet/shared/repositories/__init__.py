"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]             ← Generic CRUD operations
         │
         ├── ContentRepository            ← Public feed window
         ├── TagRepository                ← Tag catalogue
         ├── TagLinkRepository            ← Tag attachments, tag filter resolution
         ├── MediaAssetRepository         ← Uploaded assets, quota
         ├── ContentMediaRepository       ← Gallery order and cover flag
         ├── CommentRepository            ← Comments on content
         └── CompanyMembershipRepository  ← Moderation rights

Usage Example:
==============
    from batinet.shared.repositories import ContentRepository, TagLinkRepository

    async def tagged_feed(db: AsyncSession, tag_ids: list[UUID]):
        ids = await TagLinkRepository(db).content_ids_for_tags(tag_ids, "CONTENT")
        return await ContentRepository(db).list_public_page(
            offset=0, limit=21, content_ids=ids
        )
"""

from batinet.shared.repositories.base import BaseRepository
from batinet.shared.repositories.content_repository import ContentRepository
from batinet.shared.repositories.tag_repository import TagRepository, TagLinkRepository
from batinet.shared.repositories.media_repository import (
    MediaAssetRepository,
    ContentMediaRepository,
)
from batinet.shared.repositories.comment_repository import CommentRepository
from batinet.shared.repositories.company_membership_repository import (
    CompanyMembershipRepository,
)

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "ContentRepository",
    "TagRepository",
    "TagLinkRepository",
    "MediaAssetRepository",
    "ContentMediaRepository",
    "CommentRepository",
    "CompanyMembershipRepository",
]
