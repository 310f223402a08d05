"""
Route Registration

    /health, /ready, /live                  health checks
    /content                                feed, posts, gallery operations
    /content/{id}/comments, /comments/{id}  comments
    /tags                                   catalogue and links

Every business router documents the error envelope for the statuses its
handlers can produce.
"""

from typing import Any

from fastapi import FastAPI

from batinet.api.handlers import (
    comment_handler,
    content_handler,
    health_handler,
    tag_handler,
)
from batinet.shared.schemas.common import ErrorResponse


def _error_responses(*statuses: int) -> dict[int | str, dict[str, Any]]:
    return {status: {"model": ErrorResponse} for status in statuses}


def register_routes(app: FastAPI) -> None:
    """Mount every router on the application."""
    app.include_router(health_handler.router, tags=["Health"])

    # Comment routes live under both /content and /comments, so they carry full paths
    app.include_router(
        comment_handler.router,
        tags=["Comments"],
        responses=_error_responses(400, 401, 403, 404),
    )

    app.include_router(
        content_handler.router,
        prefix="/content",
        tags=["Content"],
        responses=_error_responses(400, 401, 403, 404),
    )

    app.include_router(
        tag_handler.router,
        prefix="/tags",
        tags=["Tags"],
        responses=_error_responses(400, 401, 404, 409),
    )
