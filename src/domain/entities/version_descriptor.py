"""Version descriptor domain entity.

Describes one registered (resource, version) pair and where it stands in its
lifecycle. Descriptors are immutable: a lifecycle transition produces a new
descriptor which the registry publishes in a new snapshot, so a request that
already holds the previous snapshot keeps a consistent view.

Invariants:
    - version is a positive integer, unique per resource (enforced by the
      registry, not here).
    - deprecated_since / removal_after are only set when the state is not
      ACTIVE.
    - successor never points at the descriptor itself.
"""

from dataclasses import dataclass

from src.domain.enums.lifecycle_state import LifecycleState
from src.domain.value_objects.version_token import (
    VersionToken,
    validate_resource_name,
    validate_version_number,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class VersionDescriptor:
    """One version of a resource representation.

    Attributes:
        resource: Resource name (e.g., "greeting"). Stable once registered.
        version: Positive version number. Versions need not be contiguous.
        lifecycle_state: ACTIVE, DEPRECATED or REMOVED.
        deprecated_since: Release marker the deprecation took effect in.
        removal_after: Release marker after which the version goes away.
        successor: Recommended replacement (same or different resource).
            Informational only; the descriptor does not own it.
        representation_shape: Opaque schema identifier (documentation only).

    Example:
        >>> descriptor = VersionDescriptor(
        ...     resource="greeting",
        ...     version=1,
        ...     lifecycle_state=LifecycleState.DEPRECATED,
        ...     deprecated_since="1.3",
        ...     successor=VersionToken(resource="greeting", version=2),
        ... )
        >>> descriptor.is_servable
        True
    """

    resource: str
    version: int
    lifecycle_state: LifecycleState = LifecycleState.ACTIVE
    deprecated_since: str | None = None
    removal_after: str | None = None
    successor: VersionToken | None = None
    representation_shape: str | None = None

    def __post_init__(self) -> None:
        """Validate descriptor after initialization.

        Raises:
            ValueError: If any invariant is violated.
        """
        validate_resource_name(self.resource)
        validate_version_number(self.version)

        if self.lifecycle_state == LifecycleState.ACTIVE and (
            self.deprecated_since is not None or self.removal_after is not None
        ):
            raise ValueError(
                f"{self.token}: release markers are only allowed on "
                "deprecated or removed versions"
            )

        if self.successor is not None and self.successor == self.token:
            raise ValueError(f"{self.token}: a version cannot succeed itself")

    @property
    def token(self) -> VersionToken:
        """The (resource, version) key of this descriptor."""
        return VersionToken(resource=self.resource, version=self.version)

    @property
    def is_deprecated(self) -> bool:
        """Whether responses for this version carry deprecation headers."""
        return self.lifecycle_state == LifecycleState.DEPRECATED

    @property
    def is_removed(self) -> bool:
        """Whether this version is withdrawn (kept for audit only)."""
        return self.lifecycle_state == LifecycleState.REMOVED

    @property
    def is_servable(self) -> bool:
        """Whether the dispatcher may select this version."""
        return not self.is_removed

    def __str__(self) -> str:
        """Return string representation.

        Returns:
            str: e.g. "greeting.v1 (deprecated)".
        """
        return f"{self.token} ({self.lifecycle_state.value})"
