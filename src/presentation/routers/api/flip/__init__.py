"""Versioned resource routers.

Every route except the version listing is generated from the version route
registry at startup. The registry (VERSION_ROUTE_REGISTRY) is the single
source of truth for resources and their versions; see
src/presentation/routers/api/flip/routes/registry.py.

Resources:
    /flip/greeting/greet    - Greeting (v1 deprecated, v2)
    /flip/departing/depart  - Departing (v1)
    /flip/versions          - Registered versions of every resource
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.flip.routes.generator import (
    register_versioned_routes,
)
from src.presentation.routers.api.flip.routes.registry import VERSION_ROUTE_REGISTRY
from src.presentation.routers.api.flip.versions import versions_router

flip_router = APIRouter(prefix=settings.api_prefix)
register_versioned_routes(flip_router, VERSION_ROUTE_REGISTRY)
flip_router.include_router(versions_router)

__all__ = [
    "flip_router",
]
