"""In-memory resource registry implementation.

This module implements ResourceRegistryProtocol with copy-on-write snapshots.
Registration normally completes at startup (built from the version route
registry), after which the registry is only read. Late registration and
lifecycle transitions are supported: writers serialize on a lock and publish
a new immutable snapshot, readers never lock.

Architecture:
    - Implements ResourceRegistryProtocol (hexagonal adapter pattern)
    - RegistrySnapshot: immutable resource -> {version -> descriptor} view
    - Single-writer lock, snapshot swap is one attribute assignment

Usage:
    >>> registry = InMemoryResourceRegistry(logger=get_logger())
    >>> registry.register("greeting", 2)
    >>> view = registry.snapshot()
    >>> [d.version for d in view.list_versions("greeting")]
    [2]
"""

import dataclasses
import threading
from collections.abc import Iterator, Mapping
from operator import attrgetter
from types import MappingProxyType

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.version_descriptor import VersionDescriptor
from src.domain.enums.lifecycle_state import LifecycleState
from src.domain.errors import DuplicateVersionError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.version_token import VersionToken


class RegistrySnapshot:
    """Immutable view of the registry at one point in time.

    Implements RegistryViewProtocol. Safe to share between threads.
    """

    __slots__ = ("_versions",)

    def __init__(
        self, versions: Mapping[str, Mapping[int, VersionDescriptor]] | None = None
    ) -> None:
        """Freeze a resource -> {version -> descriptor} mapping.

        Args:
            versions: Descriptors by resource and version. Copied.
        """
        self._versions: Mapping[str, Mapping[int, VersionDescriptor]] = (
            MappingProxyType(
                {
                    resource: MappingProxyType(dict(by_version))
                    for resource, by_version in (versions or {}).items()
                }
            )
        )

    def has_resource(self, resource: str) -> bool:
        """Check whether any version of resource is registered."""
        return resource in self._versions

    def resources(self) -> list[str]:
        """Return registered resource names, sorted."""
        return sorted(self._versions)

    def lookup(
        self, resource: str, version: int
    ) -> Result[VersionDescriptor, NotFoundError]:
        """Look up one descriptor (removed descriptors included).

        Args:
            resource: Resource name.
            version: Version number.

        Returns:
            Success(VersionDescriptor): Descriptor found.
            Failure(NotFoundError): Unknown resource or unknown version.
        """
        by_version = self._versions.get(resource)
        if by_version is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.RESOURCE_NOT_FOUND,
                    message=f"Resource '{resource}' is not registered",
                    resource_type="resource",
                    resource_id=resource,
                )
            )

        descriptor = by_version.get(version)
        if descriptor is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.VERSION_NOT_FOUND,
                    message=f"Version {version} of '{resource}' is not registered",
                    resource_type="version",
                    resource_id=f"{resource}.v{version}",
                )
            )

        return Success(value=descriptor)

    def list_versions(self, resource: str) -> Iterator[VersionDescriptor]:
        """Iterate a resource's descriptors, ascending by version.

        Args:
            resource: Resource name.

        Returns:
            Iterator[VersionDescriptor]: Single-pass iterator (empty for
                unknown resources).
        """
        by_version = self._versions.get(resource, {})
        return iter(sorted(by_version.values(), key=attrgetter("version")))

    def _with(self, descriptor: VersionDescriptor) -> "RegistrySnapshot":
        """Return a new snapshot with descriptor added or replaced."""
        versions = {
            resource: dict(by_version) for resource, by_version in self._versions.items()
        }
        versions.setdefault(descriptor.resource, {})[descriptor.version] = descriptor
        return RegistrySnapshot(versions)


class InMemoryResourceRegistry:
    """In-memory registry of versioned resource representations.

    Implements ResourceRegistryProtocol.

    Thread Safety:
        - Reads go to the current snapshot without locking
        - register() and transition() hold a lock while they build and
          publish the next snapshot

    Attributes:
        _snapshot: Currently published RegistrySnapshot.
        _lock: Serializes writers.
        _logger: Logger for registrations and transitions.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize an empty registry.

        Args:
            logger: Logger for registrations (debug) and transitions (info).
        """
        self._snapshot = RegistrySnapshot()
        self._lock = threading.Lock()
        self._logger = logger

    # Read side delegates to the published snapshot

    def snapshot(self) -> RegistrySnapshot:
        """Return the current immutable view of the registry."""
        return self._snapshot

    def has_resource(self, resource: str) -> bool:
        """Check whether any version of resource is registered."""
        return self._snapshot.has_resource(resource)

    def resources(self) -> list[str]:
        """Return registered resource names, sorted."""
        return self._snapshot.resources()

    def lookup(
        self, resource: str, version: int
    ) -> Result[VersionDescriptor, NotFoundError]:
        """Look up one descriptor in the current snapshot."""
        return self._snapshot.lookup(resource, version)

    def list_versions(self, resource: str) -> Iterator[VersionDescriptor]:
        """Iterate a resource's descriptors in the current snapshot."""
        return self._snapshot.list_versions(resource)

    # Write side

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

        Args:
            resource: Resource name.
            version: Positive version number.
            lifecycle_state: Initial lifecycle state.
            successor: Recommended replacement, if any.
            deprecated_since: Release marker (non-active states only).
            removal_after: Release marker (non-active states only).
            representation_shape: Opaque schema identifier.

        Returns:
            Success(VersionDescriptor): The registered descriptor.
            Failure(DuplicateVersionError): Pair already registered.

        Raises:
            ValueError: If the descriptor fields violate its invariants.
        """
        descriptor = VersionDescriptor(
            resource=resource,
            version=version,
            lifecycle_state=lifecycle_state,
            deprecated_since=deprecated_since,
            removal_after=removal_after,
            successor=successor,
            representation_shape=representation_shape,
        )

        with self._lock:
            if isinstance(self._snapshot.lookup(resource, version), Success):
                return Failure(
                    error=DuplicateVersionError(
                        code=ErrorCode.VERSION_ALREADY_REGISTERED,
                        message=f"Version {version} of '{resource}' is already registered",
                        resource_type="version",
                        conflicting_field="version",
                        resource=resource,
                        version=version,
                    )
                )
            self._snapshot = self._snapshot._with(descriptor)

        self._logger.debug(
            "Resource version registered",
            resource=resource,
            version=version,
            lifecycle_state=lifecycle_state.value,
        )
        return Success(value=descriptor)

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

        Markers and successor not passed are carried over from the current
        descriptor.

        Args:
            resource: Resource name.
            version: Version number.
            lifecycle_state: Target state (must be later than the current one).
            deprecated_since: New deprecation marker, if changing.
            removal_after: New removal marker, if changing.
            successor: New successor, if changing.

        Returns:
            Success(VersionDescriptor): The updated descriptor.
            Failure(NotFoundError): Pair not registered.
            Failure(ValidationError): Transition is not strictly forward, or
                the updated descriptor is invalid (e.g. it succeeds itself).
        """
        with self._lock:
            lookup = self._snapshot.lookup(resource, version)
            if isinstance(lookup, Failure):
                return lookup

            current = lookup.value
            if not current.lifecycle_state.can_transition_to(lifecycle_state):
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_LIFECYCLE_TRANSITION,
                        message=(
                            f"Cannot move {current.token} from "
                            f"{current.lifecycle_state.value} to {lifecycle_state.value}"
                        ),
                        field="lifecycle_state",
                    )
                )

            try:
                updated = dataclasses.replace(
                    current,
                    lifecycle_state=lifecycle_state,
                    deprecated_since=deprecated_since or current.deprecated_since,
                    removal_after=removal_after or current.removal_after,
                    successor=successor or current.successor,
                )
            except ValueError as e:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message=str(e),
                        field="successor",
                    )
                )
            self._snapshot = self._snapshot._with(updated)

        self._logger.info(
            "Resource version transitioned",
            resource=resource,
            version=version,
            from_state=current.lifecycle_state.value,
            to_state=lifecycle_state.value,
        )
        return Success(value=updated)
