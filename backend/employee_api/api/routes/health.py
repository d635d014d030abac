"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the upstream client is not initialized (readiness)

Design Decisions:
    - Readiness does NOT call upstream: a rate-limited upstream must not take this
      service out of the load balancer
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from employee_api.infrastructure import upstream_client as upstream_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "employee-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: upstream client must be initialized."""
    client = upstream_module.upstream_client
    if client is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "upstream_client_uninitialized",
            },
        )
    return {
        "status": "ready",
        "checks": {"upstream_client": "initialized"},
        "upstream": client.base_url,
    }
