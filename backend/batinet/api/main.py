"""
Batinet API Application

Content backend of the Batinet construction-trades network: public feed,
posts with media galleries, tags and comments.

Request path:
=============
    CORS
      └─ request context (X-Request-ID, bound log fields)
           └─ exception handlers (BatinetException → JSON error body)
                └─ routers: /health /ready /live
                            /content  (feed, posts, gallery operations)
                            /content/{id}/comments, /comments/{id}
                            /tags

Process state:
==============
    app.state.feed_cache    the single-slot FeedCache shared by every request
                            of this process; services receive it through
                            get_feed_cache()

Run:
====
    uvicorn batinet.api.main:app --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from batinet.config.settings import settings
from batinet.shared.db import init_db, close_db
from batinet.shared.core.logging import logger
from batinet.shared.schemas.content import FeedPage
from batinet.shared.services.feed_cache import FeedCache
from batinet.api.middleware import setup_exception_handlers, setup_request_context
from batinet.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Check the database on startup, release the pool on shutdown."""
    logger.info(
        "Batinet API starting",
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        feed_cache_ttl=settings.FEED_CACHE_TTL_SECONDS,
    )
    await init_db()

    yield

    await close_db()
    logger.info("Batinet API stopped")


def create_application() -> FastAPI:
    """
    Build the FastAPI application.

    Each call gets its own feed cache, so test applications never share
    cached pages.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Content feed of the Batinet construction-trades network",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.feed_cache = FeedCache[FeedPage](ttl_seconds=settings.FEED_CACHE_TTL_SECONDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )
    setup_request_context(app)
    setup_exception_handlers(app)

    register_routes(app)

    return app


app = create_application()
