"""Derive runtime artifacts from the version route registry.

The registry (registry.py) declares representations; this module turns the
declarations into what the running service needs:

    populate_resource_registry: Register every entry with the resource
        registry the dispatcher negotiates against
    group_routes_by_path: One FastAPI route per path, dispatching to the
        producer of each version
    build_resource_paths: Resource -> public path (for successor links)
    build_deprecation_headers: Response headers for a deprecated resolution

Reference:
    - src/presentation/routers/api/flip/routes/registry.py
"""

from collections.abc import Callable, Sequence

from src.application.services.version_dispatcher import Resolution
from src.core.result import Failure, Result, Success
from src.domain.errors import DuplicateVersionError
from src.domain.protocols.resource_registry_protocol import ResourceRegistryProtocol
from src.domain.value_objects.version_token import VersionToken
from src.presentation.routers.api.flip.routes.metadata import VersionRouteMetadata


def populate_resource_registry(
    registry: ResourceRegistryProtocol,
    entries: Sequence[VersionRouteMetadata],
) -> Result[int, DuplicateVersionError]:
    """Register every registry entry with the resource registry.

    Stops at the first duplicate; the registry is a startup artifact, so a
    partially populated one is discarded by the caller.

    Args:
        registry: Resource registry to populate.
        entries: Version route registry entries.

    Returns:
        Success(int): Number of versions registered.
        Failure(DuplicateVersionError): Same (resource, version) declared twice.
    """
    for entry in entries:
        result = registry.register(
            entry.resource,
            entry.version,
            entry.lifecycle_state,
            entry.successor,
            deprecated_since=entry.deprecated_since,
            removal_after=entry.removal_after,
            representation_shape=entry.representation_shape,
        )
        if isinstance(result, Failure):
            return result

    return Success(value=len(entries))


def group_routes_by_path(
    entries: Sequence[VersionRouteMetadata],
) -> dict[str, dict[int, VersionRouteMetadata]]:
    """Group registry entries by path, then by version.

    Args:
        entries: Version route registry entries.

    Returns:
        dict: path -> {version -> entry}, paths in first-declared order.

    Raises:
        ValueError: If one path is declared for two different resources.
    """
    routes: dict[str, dict[int, VersionRouteMetadata]] = {}
    for entry in entries:
        versions = routes.setdefault(entry.path, {})
        for other in versions.values():
            if other.resource != entry.resource:
                msg = (
                    f"Path {entry.path} is declared for both "
                    f"'{other.resource}' and '{entry.resource}'"
                )
                raise ValueError(msg)
        versions[entry.version] = entry
    return routes


def build_resource_paths(
    entries: Sequence[VersionRouteMetadata],
    prefix: str = "",
) -> dict[str, str]:
    """Map each resource to its public path.

    Args:
        entries: Version route registry entries.
        prefix: Router prefix (e.g., "/flip").

    Returns:
        dict[str, str]: e.g. {"greeting": "/flip/greeting/greet"}.
    """
    paths: dict[str, str] = {}
    for entry in entries:
        paths.setdefault(entry.resource, f"{prefix}{entry.path}")
    return paths


def build_deprecation_headers(
    resolution: Resolution,
    resource_paths: dict[str, str],
    media_type_for: Callable[[VersionToken], str],
) -> dict[str, str]:
    """Build deprecation headers for a resolution.

    Headers:
        Deprecation: "true" (release markers are not dates)
        X-API-Deprecated-Since / X-API-Removal-After: release markers
        Link: successor path with rel="successor-version" and its media type

    Args:
        resolution: Dispatcher resolution.
        resource_paths: Resource -> public path.
        media_type_for: Renders a token's media type.

    Returns:
        dict[str, str]: Headers to add (empty for non-deprecated versions).
    """
    if not resolution.deprecated:
        return {}

    descriptor = resolution.descriptor
    headers = {"Deprecation": "true"}
    if descriptor.deprecated_since:
        headers["X-API-Deprecated-Since"] = descriptor.deprecated_since
    if descriptor.removal_after:
        headers["X-API-Removal-After"] = descriptor.removal_after

    successor = resolution.successor
    if successor is not None and successor.resource in resource_paths:
        headers["Link"] = (
            f"<{resource_paths[successor.resource]}>; "
            f'rel="successor-version"; type="{media_type_for(successor.token)}"'
        )
    return headers
