"""Versioning dependency factories.

Application-scoped singletons for content negotiation:
- Resource registry (built from the version route registry)
- Version dispatcher

The registry is built once, on first use. The FastAPI lifespan calls
get_resource_registry() at startup so configuration bugs (duplicate
versions) stop the process before it serves traffic.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import get_logger
from src.core.result import Failure

if TYPE_CHECKING:
    from src.application.services.version_dispatcher import VersionDispatcher
    from src.domain.protocols.resource_registry_protocol import (
        ResourceRegistryProtocol,
    )


@lru_cache()
def get_resource_registry() -> "ResourceRegistryProtocol":
    """Get resource registry singleton (app-scoped).

    Populated from VERSION_ROUTE_REGISTRY, the single source of truth for
    versioned representations.

    Returns:
        ResourceRegistryProtocol: Populated in-memory registry.

    Raises:
        RuntimeError: If the version route registry declares the same
            (resource, version) twice.
    """
    from src.infrastructure.versioning.in_memory_resource_registry import (
        InMemoryResourceRegistry,
    )
    from src.presentation.routers.api.flip.routes.derivations import (
        populate_resource_registry,
    )
    from src.presentation.routers.api.flip.routes.registry import (
        VERSION_ROUTE_REGISTRY,
    )

    logger = get_logger()
    registry = InMemoryResourceRegistry(logger=logger)

    result = populate_resource_registry(registry, VERSION_ROUTE_REGISTRY)
    if isinstance(result, Failure):
        logger.critical(
            "Version registry configuration invalid",
            error_code=result.error.code.value,
            resource=result.error.resource,
            version=result.error.version,
        )
        raise RuntimeError(str(result.error))

    logger.info(
        "Resource registry built",
        resources=registry.resources(),
        versions=result.value,
    )
    return registry


@lru_cache()
def get_dispatcher() -> "VersionDispatcher":
    """Get version dispatcher singleton (app-scoped).

    Returns:
        VersionDispatcher: Dispatcher reading the app resource registry.

    Usage:
        # Presentation Layer (FastAPI Depends)
        dispatcher: VersionDispatcher = Depends(get_dispatcher)
    """
    from src.application.services.version_dispatcher import VersionDispatcher

    return VersionDispatcher(
        registry=get_resource_registry(),
        logger=get_logger(),
        vendor=settings.media_vendor,
        suffix=settings.media_suffix,
    )
