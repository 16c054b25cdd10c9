"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import LoggerProtocol, ResourceRegistryProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.resource_registry_protocol import (
    RegistryViewProtocol,
    ResourceRegistryProtocol,
)

__all__ = [
    "LoggerProtocol",
    "RegistryViewProtocol",
    "ResourceRegistryProtocol",
]
