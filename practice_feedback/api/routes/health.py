"""Health & Readiness Probes: liveness, readiness and summary-service checks.

Invariants:
    - GET /api/health/ always returns 200 if the process is up (liveness)
    - GET /api/health/ready returns 503 if the data directory is unusable
    - GET /api/health/summary-service makes one tiny model call; 503 on failure

Design Decisions:
    - Summary check kept off the readiness probe: it costs an API call
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "practice-feedback-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe: the data directory must be writable."""
    store_ok = await request.app.state.store.health_check()
    if not store_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "data_dir_unavailable"},
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}


@router.get("/summary-service")
async def summary_service_check(request: Request):
    connected = await request.app.state.generator.test_connection()
    if not connected:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "reason": "summary_service_unreachable"},
        )
    return {"status": "ready", "checks": {"summary_service": "healthy"}}
