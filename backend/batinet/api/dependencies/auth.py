"""
Authentication Dependencies

Bearer token verification for mutating routes.

Tokens are issued elsewhere; this backend only checks the signature and
reads the `user_id` claim.

Dependency Hierarchy:
=====================
    bearer_scheme             ← Extract "Authorization: Bearer <jwt>"
           │
           ▼
    authenticate(token)       ← Verify JWT, return the user UUID
           │
           ▼
    get_current_user_id()     ← 401 when the header is missing or bad

Type Aliases:
=============
    CurrentUserId - UUID of the authenticated caller

Usage:
======
    from batinet.api.dependencies.auth import CurrentUserId

    @router.post("/posts")
    async def create_post(body: CreatePostRequest, user_id: CurrentUserId):
        ...
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from batinet.config.settings import settings
from batinet.shared.core.exceptions import AuthenticationError
from batinet.shared.utils.identifiers import parse_id
from batinet.shared.utils.security import SecurityUtils


# auto_error=False so a missing header reaches us and becomes a 401
bearer_scheme = HTTPBearer(auto_error=False)


def authenticate(token: str) -> UUID:
    """
    Resolve a bearer token to a user ID.

    Args:
        token: Raw JWT

    Returns:
        The `user_id` claim

    Raises:
        AuthenticationError: Expired, badly signed, or without a usable user_id
    """
    try:
        payload = SecurityUtils.decode_access_token(
            token,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e

    user_id = parse_id(str(payload.get("user_id") or ""))
    if user_id is None:
        raise AuthenticationError("Invalid token payload")
    return user_id


async def get_current_user_id(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)] = None,
) -> UUID:
    """
    Authenticated caller of the current request.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")
    return authenticate(credentials.credentials)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
