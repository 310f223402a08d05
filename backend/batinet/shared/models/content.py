"""
Content Entity Model

Polymorphic post-like record behind every item of the public feed.

A single table holds posts, work requests, job offers, tenders and legal
articles; `type` is the discriminant. Domain routes create rows of their own
type, the feed reads all of them.

SAMPLE CONTENT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ type             │ POST                                                       │
│ author_user_id   │ 660e8400-e29b-41d4-a716-446655440000                      │
│ company_id       │ NULL                                                       │
│ title            │ "Chantier terminé à Lyon"                                  │
│ is_public        │ true                                                       │
└──────────────────────────────────────────────────────────────────────────────┘

Rules:
- is_public = false rows never appear in the public feed
- rows are never hard-deleted; media links can be removed independently
"""

from typing import TYPE_CHECKING, Any, Optional
import uuid

from sqlalchemy import Boolean, String, Text, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from batinet.shared.models.base import Base, TimestampMixin, JSONType
from batinet.shared.models.enums import ContentType


if TYPE_CHECKING:
    from batinet.shared.models.media import ContentMedia
    from batinet.shared.models.comment import Comment


class Content(Base, TimestampMixin):
    """
    Content model - any user-published item.

    Attributes:
        id: Unique identifier (UUID v4)
        type: Discriminant (POST, WORK_REQUEST, JOB_OFFER, TENDER, LEGAL)
        author_user_id: User who published the item
        company_id: Owning company, when published on behalf of one
        title / body: Optional text
        is_public: Visibility flag
        meta: Free-form metadata owned by the domain route that created the row

    Relationships:
        media_links: ContentMedia rows (ordering and cover flag)
        comments: Comments on this item
    """

    __tablename__ = "content"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # DISCRIMINANT & OWNERSHIP
    # ═══════════════════════════════════════════════════════════════════════════

    type: Mapped[ContentType] = mapped_column(
        SQLEnum(ContentType, name="contenttype"),
        nullable=False,
        index=True,
    )

    author_user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        nullable=False,
        index=True,
    )

    company_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        UUID(as_uuid=True),
        nullable=True,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # BODY
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_public: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
        index=True,
    )

    meta: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSONType,
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    media_links: Mapped[list["ContentMedia"]] = relationship(
        "ContentMedia",
        back_populates="content",
        cascade="all, delete-orphan",
        order_by="ContentMedia.sort_order",
    )

    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="content",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Content(id={self.id}, type={self.type}, public={self.is_public})>"
