"""Version listing endpoints.

Read-only view of the resource registry so clients can discover which
versions exist, which are deprecated, and what replaces them.

Endpoints:
    GET /flip/versions             - All resources and their versions
    GET /flip/versions/{resource}  - One resource's versions
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.services.version_dispatcher import VersionDispatcher
from src.core.container import get_dispatcher, get_resource_registry
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.domain.protocols.resource_registry_protocol import (
    RegistryViewProtocol,
    ResourceRegistryProtocol,
)
from src.presentation.routers.api.flip.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.schemas.version_schemas import (
    ResourceListResponse,
    ResourceVersionsResponse,
    VersionResponse,
)

versions_router = APIRouter(prefix="/versions", tags=["Versions"])


def _describe_resource(
    view: RegistryViewProtocol,
    resource: str,
    dispatcher: VersionDispatcher,
) -> ResourceVersionsResponse:
    """Build the listing for one resource from a registry snapshot."""
    return ResourceVersionsResponse(
        resource=resource,
        versions=[
            VersionResponse(
                version=descriptor.version,
                media_type=dispatcher.media_type_for(descriptor.token),
                lifecycle_state=descriptor.lifecycle_state,
                deprecated_since=descriptor.deprecated_since,
                removal_after=descriptor.removal_after,
                successor=dispatcher.media_type_for(descriptor.successor)
                if descriptor.successor
                else None,
                representation_shape=descriptor.representation_shape,
            )
            for descriptor in view.list_versions(resource)
        ],
    )


@versions_router.get(
    "",
    response_model=ResourceListResponse,
    summary="List versioned resources",
    operation_id="list_versions",
)
async def list_versions(
    registry: ResourceRegistryProtocol = Depends(get_resource_registry),
    dispatcher: VersionDispatcher = Depends(get_dispatcher),
) -> ResourceListResponse:
    """List every registered resource with its versions.

    Returns:
        ResourceListResponse: Resources sorted by name, versions ascending.
    """
    view = registry.snapshot()
    resources = [
        _describe_resource(view, resource, dispatcher) for resource in view.resources()
    ]
    return ResourceListResponse(resources=resources, total_count=len(resources))


@versions_router.get(
    "/{resource}",
    response_model=ResourceVersionsResponse,
    summary="List versions of a resource",
    operation_id="get_resource_versions",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Resource not registered"}},
)
async def get_resource_versions(
    resource: str,
    request: Request,
    registry: ResourceRegistryProtocol = Depends(get_resource_registry),
    dispatcher: VersionDispatcher = Depends(get_dispatcher),
) -> ResourceVersionsResponse | JSONResponse:
    """List one resource's versions.

    Args:
        resource: Resource name.

    Returns:
        ResourceVersionsResponse: Versions ascending.
        JSONResponse: 404 Problem Details if the resource is not registered.
    """
    view = registry.snapshot()
    if not view.has_resource(resource):
        return ErrorResponseBuilder.from_domain_error(
            error=NotFoundError(
                code=ErrorCode.RESOURCE_NOT_FOUND,
                message=f"Resource '{resource}' is not registered",
                resource_type="resource",
                resource_id=resource,
            ),
            request=request,
            trace_id=get_trace_id(),
        )
    return _describe_resource(view, resource, dispatcher)
