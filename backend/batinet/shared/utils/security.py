"""
Security Utilities

Bearer tokens are HS256 JWTs issued by the identity service with a
`user_id` claim. This backend verifies them; issuing is here for tooling
and the test suite.

Usage:
======
    from batinet.shared.utils.security import SecurityUtils

    token = SecurityUtils.create_access_token(user_id, secret_key)
    claims = SecurityUtils.decode_access_token(token, secret_key)
    claims["user_id"]
"""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt


DEFAULT_TOKEN_LIFETIME = timedelta(days=7)


class SecurityUtils:
    """JWT helpers."""

    @staticmethod
    def create_access_token(
        user_id: UUID,
        secret_key: str,
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
        algorithm: str = "HS256",
    ) -> str:
        """Sign a token whose `user_id` claim is the given user."""
        issued_at = datetime.now(timezone.utc)
        claims = {
            "user_id": str(user_id),
            "iat": issued_at,
            "exp": issued_at + lifetime,
        }
        return jwt.encode(claims, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(token: str, secret_key: str, algorithm: str = "HS256") -> dict[str, Any]:
        """
        Verify signature and expiry, return the claims.

        Raises:
            ValueError: Expired, badly signed or unparsable token
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm], options={"require": ["exp"]})
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e
