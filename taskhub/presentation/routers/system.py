"""System router for non-versioned application endpoints.

Lightweight, side-effect free endpoints for health checks and basic
diagnostics.
"""

from fastapi import APIRouter

from taskhub.core.config import settings

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Reports the configured backend so operators can tell which store a
    running instance talks to.
    """
    return {"status": "healthy", "backend": settings.backend}
