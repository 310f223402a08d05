"""
Health Handler

    /health   static service identity, never touches the database
    /ready    200 once the database answers SELECT 1
    /live     process is up
"""

from fastapi import APIRouter
from sqlalchemy import text

from batinet.api.dependencies import DbSession
from batinet.config.settings import settings
from batinet.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(service=settings.APP_NAME.lower(), version=settings.APP_VERSION)


@router.get("/ready")
async def readiness_check(db: DbSession):
    """A database failure propagates and is reported as a 500."""
    await db.execute(text("SELECT 1"))
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    return {"status": "alive"}
