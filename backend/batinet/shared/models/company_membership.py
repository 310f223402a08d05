"""
CompanyMembership Entity Model

Membership of a user in a company. Companies and memberships are managed by
the companies service; this backend only reads memberships to decide who may
moderate comments on company content.
"""

import uuid

from sqlalchemy import String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from batinet.shared.models.base import Base, CreatedAtMixin


class CompanyMembership(Base, CreatedAtMixin):
    """
    CompanyMembership model.

    Attributes:
        user_id: Member
        company_id: Company
        roles: JSON-encoded role list, e.g. '["ADMIN"]'
        status: "active" for current members
    """

    __tablename__ = "company_memberships"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)
    company_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)
    roles: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<CompanyMembership(user_id={self.user_id}, company_id={self.company_id})>"
