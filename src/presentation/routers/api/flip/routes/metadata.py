"""Version route metadata types for the version route registry.

This module defines the core types for the version route registry. Each
entry describes one (resource, version) representation: where it is served,
which producer builds it, and where it stands in its lifecycle. The registry
is the single source of truth; the resource registry used for negotiation
and the FastAPI routes are both derived from it.

Core types:
    VersionRouteMetadata: One versioned representation
    ErrorSpec: Error response specification for OpenAPI
    Producer: Callable building a representation from request parameters

Usage:
    from src.presentation.routers.api.flip.routes.metadata import VersionRouteMetadata

    metadata = VersionRouteMetadata(
        resource="departing",
        version=1,
        path="/departing/depart",
        producer=depart_v1,
        response_model=DepartV1Response,
        tags=["Departing"],
        summary="Say goodbye",
    )
"""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass

from pydantic import BaseModel

from src.domain.enums.lifecycle_state import LifecycleState
from src.domain.value_objects.version_token import VersionToken

Producer = Callable[[Mapping[str, str]], Awaitable[BaseModel]]


# =============================================================================
# Error Specification
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 404, 406)
        description: Human-readable error description

    Examples:
        >>> ErrorSpec(status=406, description="No acceptable version requested")
    """

    status: int
    description: str


# =============================================================================
# Version Route Metadata (SSOT)
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class VersionRouteMetadata:
    """Complete declaration of one versioned representation.

    Identity fields:
        resource: Resource name; also the first path segment
        version: Positive version number, unique per resource
        path: Route path relative to the API prefix (e.g., "/greeting/greet")
        producer: Async callable building the payload from query parameters

    OpenAPI documentation:
        tags: OpenAPI tags (e.g., ["Greeting"])
        summary: Short description of the route (shared by all versions)
        description: Optional longer description of this version
        response_model: Pydantic model of this version's payload
        errors: Possible error responses

    Lifecycle:
        lifecycle_state: ACTIVE, DEPRECATED or REMOVED
        deprecated_since: Release the deprecation took effect in
        removal_after: Release after which the version goes away
        successor: Recommended replacement

    Examples:
        >>> VersionRouteMetadata(
        ...     resource="greeting",
        ...     version=1,
        ...     path="/greeting/greet",
        ...     producer=greet_v1,
        ...     response_model=GreetingV1Response,
        ...     tags=["Greeting"],
        ...     summary="Greet someone",
        ...     lifecycle_state=LifecycleState.DEPRECATED,
        ...     deprecated_since="1.3",
        ...     successor=VersionToken(resource="greeting", version=2),
        ... )
    """

    # Identity
    resource: str
    version: int
    path: str
    producer: Producer

    # OpenAPI documentation
    tags: Sequence[str]
    summary: str
    description: str | None = None
    response_model: type[BaseModel]
    errors: list[ErrorSpec] | None = None

    # Lifecycle
    lifecycle_state: LifecycleState = LifecycleState.ACTIVE
    deprecated_since: str | None = None
    removal_after: str | None = None
    successor: VersionToken | None = None

    @property
    def token(self) -> VersionToken:
        """The (resource, version) pair this entry describes."""
        return VersionToken(resource=self.resource, version=self.version)

    @property
    def representation_shape(self) -> str:
        """Schema identifier recorded on the version descriptor."""
        return self.response_model.__name__
