"""System router for non-versioned endpoints.

Root, health and config are plain JSON: they are not part of any resource's
version catalog and ignore the Accept header.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_resource_registry
from src.domain.protocols.resource_registry_protocol import ResourceRegistryProtocol

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Service name, status, release and where to discover versions."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
        "versions_url": f"{settings.api_prefix}/versions",
    }


@system_router.get("/health")
async def health(
    registry: ResourceRegistryProtocol = Depends(get_resource_registry),
) -> dict[str, str | int]:
    """Health check for load balancers.

    Healthy once the resource registry is built; a broken catalog fails
    startup instead of reporting unhealthy.

    Returns:
        dict: Status and number of registered resources.
    """
    return {"status": "healthy", "resources": len(registry.resources())}


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Negotiation settings (development only, 403 elsewhere)."""
    if not settings.is_development:
        return JSONResponse(
            status_code=403,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "log_level": settings.log_level,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "prefix": settings.api_prefix,
            },
            "media_type": {
                "vendor": settings.media_vendor,
                "suffix": settings.media_suffix,
            },
        }
    )
