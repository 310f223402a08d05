"""
Custom Exceptions

Every business failure is a BatinetException carrying its HTTP status and a
stable error code; the error handler middleware renders it as

    {"error": {"code": "...", "message": "...", "details": {...}}}

    status  code                  raised by
    ──────  ────────────────────  ─────────────────────────────────────────────
    401     AUTHENTICATION_ERROR  bearer token missing, expired, unsigned
    403     FORBIDDEN             caller does not own the content or comment
    404     NOT_FOUND             unknown or malformed content/tag/link/comment
    400     VALIDATION_ERROR      blank comment, unknown tag on a new post
    400     MISSING_CONTENT       post without title, body or media
    400     INVALID_MEDIA_ID      post references unknown or repeated media
    400     MEDIA_QUOTA_EXCEEDED  author owns more assets than allowed
    400     INVALID_MEDIA_SET     reorder payload is not a permutation
    400     MEDIA_NOT_IN_POST     cover target not attached to the post
    409     CONFLICT              tag slug taken
"""

from typing import Any, Optional


class BatinetException(Exception):
    """
    Base of all application errors.

    Attributes:
        message: Human-readable message
        status_code: HTTP status
        error_code: Machine-readable code
        details: Extra context, always a dict in the response
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# 401 / 403
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(BatinetException):
    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, status_code=401, error_code="AUTHENTICATION_ERROR")


class AuthorizationError(BatinetException):
    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message, status_code=403, error_code="FORBIDDEN")


# ═══════════════════════════════════════════════════════════════════════════════
# 404
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(BatinetException):
    """
    Example:
        NotFoundError("Tag", "3f2a...")  # "Tag with id '3f2a...' not found"

    An empty resource_id (malformed path parameter) gives "Tag not found".
    """

    def __init__(self, resource: str, resource_id: Optional[str] = None) -> None:
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, status_code=404, error_code="NOT_FOUND")


class ContentNotFoundError(NotFoundError):
    def __init__(self, content_id: str) -> None:
        super().__init__("Content", content_id)


class TagNotFoundError(NotFoundError):
    def __init__(self, tag_id: str) -> None:
        super().__init__("Tag", tag_id)


class TagLinkNotFoundError(NotFoundError):
    def __init__(self, link_id: str) -> None:
        super().__init__("Tag link", link_id)


class CommentNotFoundError(NotFoundError):
    def __init__(self, comment_id: str) -> None:
        super().__init__("Comment", comment_id)


# ═══════════════════════════════════════════════════════════════════════════════
# 400
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(BatinetException):
    """Invalid input; subclasses narrow error_code so clients can branch on it."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(message, status_code=400, error_code=error_code, details=details)


class MissingContentError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "A post needs a title, a body or at least one media",
            error_code="MISSING_CONTENT",
        )


class InvalidMediaIdError(ValidationError):
    """`missing` lists the unknown IDs; absent when the problem is a repeated ID."""

    def __init__(self, missing: Optional[list[str]] = None) -> None:
        super().__init__(
            "Unknown media id",
            details={"missing": missing} if missing else None,
            error_code="INVALID_MEDIA_ID",
        )


class MediaQuotaExceededError(ValidationError):
    def __init__(self, quota: int) -> None:
        super().__init__(
            "Too many media owned by this user",
            details={"quota": quota},
            error_code="MEDIA_QUOTA_EXCEEDED",
        )


class InvalidMediaSetError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "Media ids must be exactly the media attached to the post",
            error_code="INVALID_MEDIA_SET",
        )


class MediaNotInPostError(ValidationError):
    def __init__(self, media_id: str) -> None:
        super().__init__(
            f"Media '{media_id}' is not attached to this post",
            details={"mediaId": media_id},
            error_code="MEDIA_NOT_IN_POST",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# 409
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(BatinetException):
    def __init__(self, message: str = "Resource conflict", details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, status_code=409, error_code="CONFLICT", details=details)
