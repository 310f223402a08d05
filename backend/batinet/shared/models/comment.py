"""
Comment Entity Model

Flat comments on a content item; parent_comment_id allows one level of
threading in clients but is not enforced here.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from batinet.shared.models.base import Base, CreatedAtMixin


if TYPE_CHECKING:
    from batinet.shared.models.content import Content


class Comment(Base, CreatedAtMixin):
    """
    Comment model.

    Attributes:
        content_id: Commented content
        author_user_id: Comment author
        body: Non-blank text
        parent_comment_id: Comment being answered, if any
    """

    __tablename__ = "comments"

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

    author_user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    parent_comment_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        UUID(as_uuid=True),
        nullable=True,
    )

    content: Mapped["Content"] = relationship("Content", back_populates="comments")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Comment(id={self.id}, content_id={self.content_id})>"
