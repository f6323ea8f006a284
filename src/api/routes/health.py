"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from src.application.dto.responses import HealthResponse, ProviderHealthResponse
from src.config import get_settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health() -> HealthResponse:
    """
    Storage health check.

    Reads the stock ledger through the configured backend and times it.
    """
    from src.infrastructure.storage import get_ledger_store

    backend = get_settings().storage.backend
    start = time.time()

    try:
        await get_ledger_store().load_stock()
        db_status = ProviderHealthResponse(
            name=backend,
            available=True,
            latency_ms=(time.time() - start) * 1000,
        )

    except Exception as e:
        db_status = ProviderHealthResponse(
            name=backend,
            available=False,
            error=str(e),
        )

    return HealthResponse(
        status="healthy" if db_status.available else "unhealthy",
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
        database=db_status,
    )
