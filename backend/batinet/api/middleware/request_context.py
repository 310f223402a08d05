"""
Request Context Middleware

Binds a request ID, method and path to every log line emitted while a
request is handled, and logs one line per completed request.

    2025-01-15 10:30:00 [info] Request completed  request_id=3f2a... method=GET path=/content status_code=200
"""

import time
import uuid

from fastapi import FastAPI, Request

from batinet.shared.core.logging import clear_log_context, log_context, logger


REQUEST_ID_HEADER = "X-Request-ID"


def setup_request_context(app: FastAPI) -> None:
    """
    Register the request context middleware.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            clear_log_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "Request completed",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response
