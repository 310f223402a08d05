"""
Database Session Management

One async engine per process, one AsyncSession per request.

    request ──▶ get_db() opens session
                  │  handlers, services and repositories run their
                  │  statements and flush, nobody commits
                  ▼
              handler returned  → COMMIT
              handler raised    → ROLLBACK, error propagates

Post creation, gallery edits and comment moderation therefore never leave a
half-written state behind.

SQLite URLs (used by the test suite) get no queue pool sizing; PostgreSQL
URLs get DATABASE_POOL_SIZE persistent connections plus
DATABASE_MAX_OVERFLOW extra ones under load.
"""

from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from batinet.config.settings import settings
from batinet.shared.core.logging import get_logger


logger = get_logger("batinet.db")


def _engine_options(database_url: str) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        options["pool_size"] = settings.DATABASE_POOL_SIZE
        options["max_overflow"] = settings.DATABASE_MAX_OVERFLOW
    return options


engine = create_async_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

# Objects stay readable after commit; repositories flush explicitly.
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield the request session and settle its transaction once the handler is done."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        else:
            await session.commit()


async def init_db() -> None:
    """
    Check the database answers before the API starts serving.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: Database unreachable; startup aborts
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database reachable", backend=engine.url.get_backend_name())


async def close_db() -> None:
    """Release pooled connections at shutdown."""
    await engine.dispose()
    logger.info("Database connections released")
