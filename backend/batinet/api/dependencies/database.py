"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed once after the handler returns and rolled back if
it raises, so every statement of one request is a single transaction.
Tests override this dependency to point at their own engine.

Usage:
======
    from batinet.api.dependencies.database import DbSession

    @router.get("/content/{content_id}/comments")
    async def list_comments(content_id: str, db: DbSession):
        ...
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from batinet.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
