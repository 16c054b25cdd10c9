"""Route generator for the version route registry.

This module provides register_versioned_routes(), which generates one FastAPI
route per resource path from VersionRouteMetadata entries at application
startup. Every version of a resource shares its path; the version served is
chosen per request from the Accept header by the VersionDispatcher.

Functions:
    register_versioned_routes: Generate all routes from the registry
    _build_endpoint: Build the negotiating endpoint for one path
    _build_responses: Build OpenAPI responses dict from error specs

Usage:
    from src.presentation.routers.api.flip.routes.registry import VERSION_ROUTE_REGISTRY
    from src.presentation.routers.api.flip.routes.generator import register_versioned_routes

    flip_router = APIRouter(prefix="/flip")
    register_versioned_routes(flip_router, VERSION_ROUTE_REGISTRY)
"""

from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from src.application.services.version_dispatcher import VersionDispatcher
from src.core.config import settings
from src.core.container import get_dispatcher, get_logger
from src.core.result import Failure
from src.domain.enums.lifecycle_state import LifecycleState
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.media_range import parse_accept_header
from src.presentation.routers.api.flip.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.flip.routes.derivations import (
    build_deprecation_headers,
    build_resource_paths,
    group_routes_by_path,
)
from src.presentation.routers.api.flip.routes.metadata import (
    ErrorSpec,
    VersionRouteMetadata,
)
from src.presentation.api.middleware.trace_middleware import get_trace_id


def register_versioned_routes(
    router: APIRouter,
    entries: Sequence[VersionRouteMetadata],
) -> None:
    """Generate FastAPI routes from version route metadata.

    One GET route is registered per distinct path. It handles:
    - Accept header parsing and version negotiation
    - Dispatch to the selected version's producer
    - Content-Type of the selected representation
    - Vary and deprecation headers
    - OpenAPI documentation (summary, per-version description, errors)

    A path is marked deprecated in OpenAPI only when none of its versions
    is active.

    Args:
        router: FastAPI APIRouter to register routes on
        entries: VersionRouteMetadata entries to convert into routes

    Raises:
        ValueError: If one path is declared for two resources.
    """
    resource_paths = build_resource_paths(entries, router.prefix)

    for path, versions in group_routes_by_path(entries).items():
        ordered = [versions[number] for number in sorted(versions)]
        first = ordered[0]

        router.add_api_route(
            path=path,
            endpoint=_build_endpoint(first.resource, versions, resource_paths),
            methods=["GET"],
            response_class=JSONResponse,
            tags=list(first.tags),
            summary=first.summary,
            description=_build_description(ordered),
            operation_id=f"get_{first.resource}",
            responses=_build_responses(ordered),
            deprecated=all(
                entry.lifecycle_state != LifecycleState.ACTIVE for entry in ordered
            ),
        )


def _build_endpoint(
    resource: str,
    versions: dict[int, VersionRouteMetadata],
    resource_paths: dict[str, str],
) -> Any:
    """Build the negotiating endpoint for one resource path.

    Args:
        resource: Resource served at the path.
        versions: Version number -> registry entry.
        resource_paths: Resource -> public path (successor links).

    Returns:
        Async endpoint function for add_api_route().
    """

    async def endpoint(
        request: Request,
        dispatcher: VersionDispatcher = Depends(get_dispatcher),
        logger: LoggerProtocol = Depends(get_logger),
    ) -> Response:
        candidates = parse_accept_header(request.headers.get("accept"))
        result = dispatcher.resolve(resource, candidates)

        if isinstance(result, Failure):
            response = ErrorResponseBuilder.from_domain_error(
                error=result.error,
                request=request,
                trace_id=get_trace_id(),
            )
            response.headers["Vary"] = "Accept"
            return response

        resolution = result.value
        entry = versions.get(resolution.token.version)
        if entry is None:
            # Registered at runtime without a producer behind this route
            raise RuntimeError(f"No producer registered for {resolution.token}")

        payload = await entry.producer(request.query_params)

        headers = {"Vary": "Accept"}
        if resolution.deprecated:
            headers.update(
                build_deprecation_headers(
                    resolution, resource_paths, dispatcher.media_type_for
                )
            )
            logger.warning(
                "Deprecated version served",
                resource=resource,
                version=resolution.token.version,
                successor=str(resolution.successor.token)
                if resolution.successor
                else None,
                trace_id=get_trace_id(),
            )

        return JSONResponse(
            content=payload.model_dump(mode="json"),
            media_type=resolution.media_type,
            headers=headers,
        )

    endpoint.__name__ = f"get_{resource}"
    return endpoint


def _build_description(entries: Sequence[VersionRouteMetadata]) -> str:
    """Describe every version served at one path (OpenAPI description).

    Args:
        entries: Entries for one path, ascending by version.

    Returns:
        Markdown list with media type, lifecycle state and description.
    """
    lines = ["Select a version with the Accept header.", ""]
    for entry in entries:
        media_type = entry.token.media_type(settings.media_vendor, settings.media_suffix)
        line = f"- `{media_type}` ({entry.lifecycle_state.value})"
        if entry.description:
            line += f": {entry.description}"
        lines.append(line)
    return "\n".join(lines)


def _build_responses(entries: Sequence[VersionRouteMetadata]) -> dict[int | str, Any]:
    """Build OpenAPI responses dict for one path.

    Args:
        entries: Entries for one path, ascending by version.

    Returns:
        Dict mapping status codes to response documentation. The 200
        response lists each version's media type.
    """
    responses: dict[int | str, Any] = {
        200: {
            "description": "Representation of the negotiated version",
            "content": {
                entry.token.media_type(settings.media_vendor, settings.media_suffix): {
                    "schema": {"title": entry.response_model.__name__}
                }
                for entry in entries
            },
        }
    }

    errors: dict[int, ErrorSpec] = {}
    for entry in entries:
        for spec in entry.errors or []:
            errors.setdefault(spec.status, spec)
    for status_code, spec in sorted(errors.items()):
        responses[status_code] = {"description": spec.description}

    return responses
