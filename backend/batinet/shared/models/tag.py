"""
Tag and TagLink Entity Models

Tags are a global catalogue (trade, region, certification, ...). A TagLink
attaches a tag to any taggable entity by (entity_type, entity_id). The link
is a weak reference: there is no foreign key on entity_id because it can
point to several tables.

    tags ──< tag_links >── (CONTENT | COMPANY | PROFILE | ...)
"""

import uuid

from sqlalchemy import ForeignKey, String, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from batinet.shared.models.base import Base, CreatedAtMixin


class Tag(Base, CreatedAtMixin):
    """
    Tag model.

    Attributes:
        id: Unique identifier
        slug: Globally unique machine name, e.g. "maconnerie"
        label: Display label
        type: Category of the tag, e.g. "TRADE" or "REGION"
    """

    __tablename__ = "tags"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    label: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False, index=True)

    links: Mapped[list["TagLink"]] = relationship(
        "TagLink",
        back_populates="tag",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Tag(slug={self.slug}, type={self.type})>"


class TagLink(Base):
    """
    TagLink model - tag attached to an entity.

    Attributes:
        id: Unique identifier
        tag_id: The tag
        entity_type: Target table discriminant ("CONTENT" for feed items)
        entity_id: Target row id
    """

    __tablename__ = "tag_links"
    __table_args__ = (
        Index("ix_tag_links_entity", "entity_type", "entity_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    tag_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("tags.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    entity_type: Mapped[str] = mapped_column(String(30), nullable=False)
    entity_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)

    tag: Mapped["Tag"] = relationship("Tag", back_populates="links")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<TagLink(tag_id={self.tag_id}, {self.entity_type}:{self.entity_id})>"
