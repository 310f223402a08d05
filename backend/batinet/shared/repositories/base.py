"""
Base Repository

Operations shared by every entity repository.

    get(id)              one row or None
    get_by_ids(ids)      rows found among ids, single IN query
    count_where(**eq)    COUNT(*) with equality criteria
    create(**fields)     INSERT, then reload server defaults
    create_many(rows)    INSERT a batch with one flush
    delete(instance)     DELETE an already loaded row

Repositories flush, they never commit. get_db() owns the transaction for the
whole request, so a post and its tag and media links land together or not
at all.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Repository bound to one model class.

    Attributes:
        model: Mapped class handled by this repository
        session: Request session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        SQL Generated:
            SELECT * FROM <table> WHERE id = :id
        """
        return await self.session.get(self.model, record_id)

    async def get_by_ids(self, ids: list[UUID]) -> list[ModelType]:
        """
        Rows whose id is in `ids`; missing ones are simply absent.

        SQL Generated:
            SELECT * FROM <table> WHERE id IN (:id_1, :id_2, ...)
        """
        if not ids:
            return []
        result = await self.session.execute(select(self.model).where(self.model.id.in_(ids)))
        return list(result.scalars().all())

    async def count_where(self, **criteria: Any) -> int:
        """
        SQL Generated:
            SELECT count(*) FROM media_assets WHERE owner_id = :owner_id
        """
        query = select(func.count()).select_from(self.model).filter_by(**criteria)
        return (await self.session.execute(query)).scalar_one()

    async def create(self, **fields: Any) -> ModelType:
        """Insert one row and refresh it so defaults such as created_at are loaded."""
        instance = self.model(**fields)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def create_many(self, rows: list[dict[str, Any]]) -> list[ModelType]:
        """Insert link rows written together by a single operation."""
        if not rows:
            return []
        instances = [self.model(**row) for row in rows]
        self.session.add_all(instances)
        await self.session.flush()
        return instances

    async def delete(self, instance: ModelType) -> None:
        await self.session.delete(instance)
        await self.session.flush()
