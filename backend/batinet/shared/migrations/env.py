# pylint: skip-file
# ruff: noqa
"""
Alembic Environment

Migrations for the content schema: content, media, tags, comments and the
read-only company memberships.

The database URL always comes from settings.DATABASE_URL, never from an ini
file, so the API and the migrations cannot point at different databases.
SQLite URLs (local runs, tests) get batch mode because SQLite cannot ALTER
most constraints in place.

Commands:
=========
    alembic upgrade head                 apply everything
    alembic upgrade head --sql           print the SQL instead
    alembic revision --autogenerate -m   diff models against the database
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from alembic import context

from batinet.config.settings import settings
from batinet.shared.models import Base  # noqa: F401  registers every table

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
database_url = settings.DATABASE_URL
render_as_batch = database_url.startswith("sqlite")


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        render_as_batch=render_as_batch,
        compare_type=True,
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Emit SQL for the pending revisions without a connection."""
    _configure(url=database_url, literal_binds=True, dialect_opts={"paramstyle": "named"})

    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection: Connection) -> None:
    _configure(connection=connection, compare_server_default=True)

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply the pending revisions over an async connection."""
    engine = create_async_engine(database_url, poolclass=NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_with_connection)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
