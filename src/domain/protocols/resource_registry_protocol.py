"""ResourceRegistryProtocol definition.

Port for the registry of versioned resource representations. The dispatcher
depends only on RegistryViewProtocol (read side) through snapshot(), so a
resolution always sees one consistent registry state.

Usage:
    from src.domain.protocols.resource_registry_protocol import (
        ResourceRegistryProtocol,
    )

    registry: ResourceRegistryProtocol = get_resource_registry()
    view = registry.snapshot()
    result = view.lookup("greeting", 2)
"""

from collections.abc import Iterator
from typing import Protocol

from src.core.errors import NotFoundError, ValidationError
from src.core.result import Result
from src.domain.entities.version_descriptor import VersionDescriptor
from src.domain.enums.lifecycle_state import LifecycleState
from src.domain.errors import DuplicateVersionError
from src.domain.value_objects.version_token import VersionToken


class RegistryViewProtocol(Protocol):
    """Read-only view of registered resource versions."""

    def has_resource(self, resource: str) -> bool:
        """Check whether any version of resource is registered.

        Removed versions count: the resource is still known.
        """
        ...

    def resources(self) -> list[str]:
        """Return registered resource names, sorted."""
        ...

    def lookup(
        self, resource: str, version: int
    ) -> Result[VersionDescriptor, NotFoundError]:
        """Look up one descriptor (removed descriptors included).

        Returns:
            Success(VersionDescriptor): Descriptor found.
            Failure(NotFoundError): RESOURCE_NOT_FOUND if the resource is
                unknown, VERSION_NOT_FOUND if only the version is.
        """
        ...

    def list_versions(self, resource: str) -> Iterator[VersionDescriptor]:
        """Iterate a resource's descriptors, ascending by version.

        Single pass; call again for a fresh iterator. Unknown resources
        yield nothing.
        """
        ...


class ResourceRegistryProtocol(RegistryViewProtocol, Protocol):
    """Registry of versioned resource representations (read + write)."""

    def register(
        self,
        resource: str,
        version: int,
        lifecycle_state: LifecycleState = LifecycleState.ACTIVE,
        successor: VersionToken | None = None,
        *,
        deprecated_since: str | None = None,
        removal_after: str | None = None,
        representation_shape: str | None = None,
    ) -> Result[VersionDescriptor, DuplicateVersionError]:
        """Register a new (resource, version) pair.

        Returns:
            Success(VersionDescriptor): The registered descriptor.
            Failure(DuplicateVersionError): Pair already registered.

        Raises:
            ValueError: If the descriptor fields violate its invariants.
        """
        ...

    def transition(
        self,
        resource: str,
        version: int,
        lifecycle_state: LifecycleState,
        *,
        deprecated_since: str | None = None,
        removal_after: str | None = None,
        successor: VersionToken | None = None,
    ) -> Result[VersionDescriptor, NotFoundError | ValidationError]:
        """Move a registered version forward along its lifecycle.

        Returns:
            Success(VersionDescriptor): The updated descriptor.
            Failure(NotFoundError): Pair not registered.
            Failure(ValidationError): Transition is not strictly forward.
        """
        ...

    def snapshot(self) -> RegistryViewProtocol:
        """Return the current immutable view of the registry."""
        ...
