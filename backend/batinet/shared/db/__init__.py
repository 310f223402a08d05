"""
Database Module

Async engine, request sessions and startup/shutdown hooks.

    from batinet.shared.db import get_db, init_db, close_db
"""

from batinet.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
