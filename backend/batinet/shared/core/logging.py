"""
Logging Configuration

structlog on top of the standard logging module.

    development    colored key=value lines
    anything else  one JSON object per line

Fields bound with log_context() (request_id, method, path) are merged into
every line emitted by the same request; the request context middleware binds
and clears them.

Usage:
======
    from batinet.shared.core.logging import get_logger

    logger = get_logger("batinet.content")
    logger.info("Cover changed", content_id=str(content.id), media_id=str(media_id))
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import Processor

from batinet.config.settings import settings


def _renderer() -> Processor:
    if settings.is_development:
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def setup_logging() -> None:
    """Route structlog through stdlib logging at settings.LOG_LEVEL."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.getLevelName(settings.LOG_LEVEL.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _renderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Named logger; services use "batinet.<area>"."""
    return structlog.get_logger(name)


def log_context(**fields: Any) -> None:
    """Attach fields to every following log line of the current task."""
    structlog.contextvars.bind_contextvars(**fields)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("batinet")
