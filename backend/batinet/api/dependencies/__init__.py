"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: authenticate(), get_current_user_id(), CurrentUserId
- Services: get_*_service() functions, get_feed_cache()

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user_id: UUID = Depends(get_current_user_id)
    ):

    # Write this:
    async def handler(db: DbSession, user_id: CurrentUserId):
"""

from batinet.api.dependencies.database import (
    get_db,
    DbSession,
)
from batinet.api.dependencies.auth import (
    authenticate,
    get_current_user_id,
    CurrentUserId,
)
from batinet.api.dependencies.services import (
    get_feed_cache,
    get_feed_service,
    get_content_service,
    get_tag_service,
    get_comment_service,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "authenticate",
    "get_current_user_id",
    "CurrentUserId",
    # Services
    "get_feed_cache",
    "get_feed_service",
    "get_content_service",
    "get_tag_service",
    "get_comment_service",
]
