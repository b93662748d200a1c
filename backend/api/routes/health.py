"""
Health check endpoints.

Provides endpoints for monitoring application liveness and store connectivity.
"""

import logging
import time
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from shared.database import DatabaseError
from shared.models import CamelModel, utc_now

from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

router = APIRouter()

# Process start, for uptime reporting
STARTED_AT = time.monotonic()


class HealthResponse(CamelModel):
    """Health check response model."""

    status: str
    time: datetime
    uptime: float
    mongo_ok: bool
    mongo_host: Optional[str] = None


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Liveness text."""
    return "NSS Server is running"


@router.get("/health", response_model=HealthResponse)
async def health_check(container: ServiceContainer = Depends(get_container)):
    """
    Report store connectivity and process uptime.

    Returns 500 with status "error" when the store does not answer.
    """
    try:
        info = await container.store.server_status()
    except DatabaseError as e:
        logger.error("Health check failed: %s", e.message)
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Database connection failed"},
        )

    return HealthResponse(
        status="ok",
        time=utc_now(),
        uptime=time.monotonic() - STARTED_AT,
        mongo_ok=info.get("ok") == 1,
        mongo_host=info.get("host"),
    )
