"""Version route registry package.

This package implements the registry pattern for versioned representations.
The registry is the single source of truth for every (resource, version)
pair, generating the resource registry used for negotiation and the FastAPI
routes that serve them.

Modules:
    metadata: Core types (VersionRouteMetadata, ErrorSpec, Producer)
    registry: VERSION_ROUTE_REGISTRY - List of all versioned representations
    generator: register_versioned_routes() - Generate FastAPI routes
    derivations: Helpers to derive artifacts from the registry

Usage:
    from src.presentation.routers.api.flip.routes.registry import VERSION_ROUTE_REGISTRY
    from src.presentation.routers.api.flip.routes.generator import register_versioned_routes

    router = APIRouter(prefix="/flip")
    register_versioned_routes(router, VERSION_ROUTE_REGISTRY)
"""

from src.presentation.routers.api.flip.routes.metadata import (
    ErrorSpec,
    Producer,
    VersionRouteMetadata,
)

__all__ = [
    "VersionRouteMetadata",
    "ErrorSpec",
    "Producer",
]
