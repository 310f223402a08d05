"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- request_context: Request ID and path bound to log lines

Usage:
======
    from batinet.api.middleware import setup_exception_handlers, setup_request_context

    app = FastAPI()
    setup_exception_handlers(app)
    setup_request_context(app)
"""

from batinet.api.middleware.error_handler import setup_exception_handlers
from batinet.api.middleware.request_context import setup_request_context

__all__ = [
    "setup_exception_handlers",
    "setup_request_context",
]
