"""
Health check router for service monitoring.
"""

from fastapi import APIRouter

from app.config import settings
from app.schemas.responses import HealthResponse, ReadyResponse
from app.services.dispatch_service import dispatch_service

router = APIRouter(prefix="/api/v1/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the service is running.
    Does not check if models are loaded.
    """
    return HealthResponse(
        status="healthy",
        version=settings.api_version
    )


@router.get("/ready", response_model=ReadyResponse)
async def readiness_check() -> ReadyResponse:
    """
    Readiness check endpoint.

    Reports whether the router and experts are loaded.
    """
    is_ready = dispatch_service.is_initialized

    details = None
    if is_ready:
        stats = dispatch_service.get_system_stats()
        details = {
            "experts": stats.get("num_experts", 0),
            "top_k": stats.get("top_k"),
        }

    return ReadyResponse(
        status="ready" if is_ready else "not_ready",
        models_loaded=is_ready,
        details=details
    )


@router.get("/live")
async def liveness_check() -> dict:
    """
    Liveness check endpoint for Kubernetes.

    Simple endpoint that returns 200 if the process is alive.
    """
    return {"status": "alive"}
