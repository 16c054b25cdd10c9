"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_dispatcher

The container is organized into modules by concern:
- infrastructure: Core services (logging)
- versioning: Resource registry and version dispatcher

All factories are lru_cache singletons (app-scoped). FastAPI routes receive
them through Depends() so tests can swap them with dependency_overrides.
"""

from src.core.container.infrastructure import get_logger
from src.core.container.versioning import get_dispatcher, get_resource_registry

__all__ = [
    "get_dispatcher",
    "get_logger",
    "get_resource_registry",
]
