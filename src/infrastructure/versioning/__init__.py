"""Versioning infrastructure adapters."""

from src.infrastructure.versioning.in_memory_resource_registry import (
    InMemoryResourceRegistry,
    RegistrySnapshot,
)

__all__ = ["InMemoryResourceRegistry", "RegistrySnapshot"]
