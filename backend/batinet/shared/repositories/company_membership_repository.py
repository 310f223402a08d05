"""
Company Membership Repository

Read-only membership lookups used for moderation rights.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.repositories.base import BaseRepository
from batinet.shared.models.company_membership import CompanyMembership


class CompanyMembershipRepository(BaseRepository[CompanyMembership]):
    """Repository for CompanyMembership lookups."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(CompanyMembership, session)

    async def is_active_member(self, user_id: UUID, company_id: UUID) -> bool:
        """
        Check whether a user currently belongs to a company.

        SQL Generated:
            SELECT id FROM company_memberships
            WHERE user_id = '...' AND company_id = '...' AND status = 'active'
            LIMIT 1
        """
        result = await self.session.execute(
            select(CompanyMembership.id)
            .where(
                CompanyMembership.user_id == user_id,
                CompanyMembership.company_id == company_id,
                CompanyMembership.status == "active",
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None
