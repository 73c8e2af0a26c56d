"""
Health check endpoints for monitoring and orchestration.

- /: root status
- /health, /health/live: liveness (always 200)
- /health/db: database connectivity
- /health/ready: readiness (all dependencies healthy)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.api.dependencies import get_session

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "hotel-orders-api"


async def _database_healthy(session: AsyncSession | None) -> bool:
    if session is None:
        # in-memory mode has no database to reach
        return True
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        return True
    except Exception as e:
        logger.error("Database health check failed", exc_info=e)
        return False


@router.get("/")
async def root():
    return {"status": "ok"}


@router.get("/health")
async def health_check():
    """Basic liveness probe."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    """Alias for /health for orchestrators that prefer the /live naming."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/db")
async def health_check_db(session: AsyncSession | None = Depends(get_session)):
    """
    Database connectivity health check.

    Returns 503 Service Unavailable if the database is down.
    """
    if await _database_healthy(session):
        return {"status": "healthy", "component": "database"}
    return JSONResponse(
        status_code=503,
        content={
            "status": "unhealthy",
            "component": "database",
            "error": "Database connection failed"
        }
    )


@router.get("/health/ready")
async def health_check_ready(session: AsyncSession | None = Depends(get_session)):
    """
    Readiness probe.

    Returns 503 if not ready to accept requests.
    """
    if await _database_healthy(session):
        return {"status": "ready", "checks": {"database": "healthy"}}
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "checks": {"database": "unhealthy"}}
    )
