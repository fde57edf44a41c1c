"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the reference catalog is loaded (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from locale_catalog.services import localization_service as service_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "locale-catalog-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes reference catalog state."""
    service = service_module.localization_service
    if service is None or not service.is_ready:
        state = service.catalog.state.value if service else "uninitialized"
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "catalog_not_loaded",
                "catalog_state": state,
            },
        )
    return {"status": "ready", "checks": {"catalog": "loaded"}}
