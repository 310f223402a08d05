"""
Error Handler Middleware

Turns every failure into the same JSON envelope:

    {"error": {"code": "INVALID_MEDIA_SET", "message": "...", "details": {...}}}

    BatinetException             its own status_code and error_code
    RequestValidationError       400 VALIDATION_ERROR, field errors in details
    pydantic ValidationError     400 VALIDATION_ERROR (model built in a handler)
    anything else                500 INTERNAL_ERROR, logged with traceback,
                                 no detail returned to the client
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from batinet.shared.core.exceptions import BatinetException
from batinet.shared.core.logging import logger


def _error_body(code: str, message: str, details: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"error": error}


def _invalid_request(request: Request, errors: Any) -> JSONResponse:
    encoded = jsonable_encoder(errors)
    logger.warning("Request rejected by schema", path=request.url.path, errors=encoded)
    return JSONResponse(
        status_code=400,
        content=_error_body("VALIDATION_ERROR", "Request validation failed", {"errors": encoded}),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register the exception handlers on an application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(BatinetException)
    async def batinet_exception_handler(request: Request, exc: BatinetException) -> JSONResponse:
        logger.warning(
            "Request failed",
            error_code=exc.error_code,
            status_code=exc.status_code,
            message=exc.message,
            path=request.url.path,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _invalid_request(request, exc.errors())

    @app.exception_handler(ValidationError)
    async def model_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _invalid_request(request, exc.errors())

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error",
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
