"""
Notes API — Health Check Routes
=================================

What:  Liveness message at GET / and dependency health at GET /health.
Why:   GET / must answer regardless of persistence state, so it never
       touches the database. GET /health is for probes that also want to
       know whether the store is reachable.
Who:   Called by the notes client (`notes ping`), Docker health checks and
       monitoring.
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from notes_api import __version__
from notes_api.schemas.note import HealthResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: initialized once when the module loads
_start_time = time.time()


@router.get(
    "/",
    response_model=MessageResponse,
    summary="API liveness message",
)
async def root() -> MessageResponse:
    return MessageResponse(message="API is running!")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports whether the database answers a trivial query.",
)
async def health_check() -> HealthResponse:
    """
    Check the health of the service and its database.

    Database: Executes SELECT 1 to verify connection and query execution.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        from notes_api.database import engine
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
