"""
Common Schemas

Python attributes are snake_case, JSON is camelCase:

    class FeedPage(BaseSchema):
        page_size: int      # "pageSize"
        has_more: bool      # "hasMore"

Responses are serialized by alias; request bodies accept either spelling.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base of every request and response schema; readable from ORM rows."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class MessageResponse(BaseModel):
    """Confirmation for operations without a resource to return."""

    message: str
    success: bool = True


class ErrorDetail(BaseModel):
    code: str = Field(description="Machine-readable code, e.g. INVALID_MEDIA_SET")
    message: str
    details: Optional[dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Error envelope produced by the exception handlers; documented on every router."""

    error: ErrorDetail


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "batinet"
    version: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
