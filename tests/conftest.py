"""Pytest configuration and shared fixtures.

Fixtures build registries from scratch for every test so no state leaks
between tests; the app-scoped singletons in src.core.container are only
used by API tests.
"""

from unittest.mock import MagicMock

import pytest

from src.application.services.version_dispatcher import VersionDispatcher
from src.core.result import Success
from src.domain.enums.lifecycle_state import LifecycleState
from src.domain.value_objects.version_token import VersionToken
from src.infrastructure.versioning.in_memory_resource_registry import (
    InMemoryResourceRegistry,
)

VENDOR = "flipfoundry"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")


def media_type(resource: str, version: int) -> str:
    """Helper to render a vendor media type for testing.

    Usage:
        media_type("greeting", 2)
        # 'application/vnd.flipfoundry.greeting.v2+json'
    """
    return f"application/vnd.{VENDOR}.{resource}.v{version}+json"


@pytest.fixture
def mock_logger():
    """Logger double recording every call (LoggerProtocol)."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def empty_registry(mock_logger):
    """Registry with nothing registered."""
    return InMemoryResourceRegistry(logger=mock_logger)


@pytest.fixture
def registry(mock_logger):
    """Registry mirroring the production catalog.

    - greeting v1: deprecated since 1.3, successor greeting v2
    - greeting v2: active
    - departing v1: active
    """
    registry = InMemoryResourceRegistry(logger=mock_logger)
    results = [
        registry.register(
            "greeting",
            1,
            LifecycleState.DEPRECATED,
            VersionToken(resource="greeting", version=2),
            deprecated_since="1.3",
        ),
        registry.register("greeting", 2),
        registry.register("departing", 1),
    ]
    assert all(isinstance(result, Success) for result in results)
    return registry


@pytest.fixture
def dispatcher(registry, mock_logger):
    """Dispatcher over the catalog registry."""
    return VersionDispatcher(registry=registry, logger=mock_logger, vendor=VENDOR)
