"""
Core Module

Logging and the exception hierarchy, imported by every layer.

    from batinet.shared.core import get_logger, ContentNotFoundError
"""

from batinet.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from batinet.shared.core.exceptions import (
    BatinetException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ContentNotFoundError,
    TagNotFoundError,
    TagLinkNotFoundError,
    CommentNotFoundError,
    ValidationError,
    MissingContentError,
    InvalidMediaIdError,
    MediaQuotaExceededError,
    InvalidMediaSetError,
    MediaNotInPostError,
    ConflictError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "BatinetException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ContentNotFoundError",
    "TagNotFoundError",
    "TagLinkNotFoundError",
    "CommentNotFoundError",
    "ValidationError",
    "MissingContentError",
    "InvalidMediaIdError",
    "MediaQuotaExceededError",
    "InvalidMediaSetError",
    "MediaNotInPostError",
    "ConflictError",
]
