"""
API Handlers

Route handlers for the Batinet API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer; errors are raised as
BatinetException subclasses and rendered by the global exception handlers.
"""

from batinet.api.handlers import (
    comment_handler,
    content_handler,
    health_handler,
    tag_handler,
)

__all__ = [
    "comment_handler",
    "content_handler",
    "health_handler",
    "tag_handler",
]
