"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models in Batinet.
It includes the declarative base and the timestamp mixins.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── CreatedAtMixin   ← created_at only (append-mostly rows)
       │
       └── TimestampMixin   ← created_at + nullable updated_at

Usage:
======
    from batinet.shared.models.base import Base, TimestampMixin

    class Content(Base, TimestampMixin):
        __tablename__ = "content"
        id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
"""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time, used as client-side column default."""
    return datetime.now(timezone.utc)


# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Maps Python dict annotations to JSONB on PostgreSQL so free-form
    metadata columns can be declared as `Mapped[Optional[dict[str, Any]]]`.
    """

    type_annotation_map = {
        dict[str, Any]: JSONType,
    }


class CreatedAtMixin:
    """
    Mixin for rows that are written once: tags, media assets, comments.

    created_at gets a client-side default with microsecond precision so
    that "newest first" orderings stay stable for rows inserted in the same
    second, and a server default for rows inserted outside the ORM.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


class TimestampMixin(CreatedAtMixin):
    """
    Mixin that adds update tracking on top of created_at.

    updated_at stays NULL until the first modification through the ORM.
    """

    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        onupdate=utcnow,
    )
