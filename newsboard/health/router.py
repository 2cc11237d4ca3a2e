"""Health check endpoints."""

from fastapi import APIRouter, Request


router = APIRouter(prefix="/health", tags=["health"])


@router.get("/live")
async def liveness() -> dict[str, str]:
    """Liveness probe - checks if the service is running."""
    return {"status": "alive"}


@router.get("/ready")
async def readiness(request: Request) -> dict[str, str | bool]:
    """Readiness probe - checks if the service is ready to serve requests."""
    settings = request.app.state.settings
    return {
        "status": "ready",
        "environment": settings.environment,
        "debug": settings.debug,
    }


@router.get("")
async def health(request: Request) -> dict[str, str]:
    """General health check endpoint."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": request.app.state.service_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }
