"""
MediaAsset and ContentMedia Entity Models

MediaAsset is an uploaded file owned by its uploader. ContentMedia attaches
an asset to a content item with an explicit position and a cover flag.

    media_assets ──< content_media >── content

ContentMedia Invariants:
========================
- at most one row per content has is_cover = true
- sort_order values of one content form 0..n-1 with no gaps after any
  removal or reorder
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import BigInteger, Boolean, ForeignKey, Integer, String, Text, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from batinet.shared.models.base import Base, CreatedAtMixin
from batinet.shared.models.enums import MediaType


if TYPE_CHECKING:
    from batinet.shared.models.content import Content


class MediaAsset(Base, CreatedAtMixin):
    """
    MediaAsset model - an uploaded file.

    Attributes:
        id: Unique identifier
        owner_id: Uploading user
        url: Public storage URL, e.g. "/uploads/abc.webp"
        type: IMAGE, VIDEO or FILE
        mime_type: MIME type reported at upload
        width / height: Pixel dimensions when known
        size_bytes: Stored size
        storage_provider: Backend that holds the bytes
    """

    __tablename__ = "media_assets"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    owner_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        nullable=False,
        index=True,
    )

    url: Mapped[str] = mapped_column(Text, nullable=False)

    type: Mapped[MediaType] = mapped_column(
        SQLEnum(MediaType, name="mediatype"),
        nullable=False,
    )

    mime_type: Mapped[str] = mapped_column(String(100), nullable=False)
    width: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    height: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    size_bytes: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    storage_provider: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        default="local",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<MediaAsset(id={self.id}, type={self.type})>"


class ContentMedia(Base):
    """
    ContentMedia model - media attached to a content item.

    Attributes:
        content_id: The content
        media_id: The attached asset
        sort_order: Position in the gallery, 0-based
        is_cover: Whether this asset is the thumbnail of the content
    """

    __tablename__ = "content_media"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    content_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("content.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    media_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("media_assets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_cover: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    content: Mapped["Content"] = relationship("Content", back_populates="media_links")
    media: Mapped["MediaAsset"] = relationship("MediaAsset")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<ContentMedia(content_id={self.content_id}, media_id={self.media_id}, "
            f"sort_order={self.sort_order}, cover={self.is_cover})>"
        )
