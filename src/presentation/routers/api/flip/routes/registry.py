"""Version Route Registry - Single Source of Truth for versioned representations.

This module contains VERSION_ROUTE_REGISTRY, the authoritative list of every
(resource, version) representation. At startup it is used to build the
resource registry the dispatcher negotiates against and to generate one
FastAPI route per resource path.

Registry structure:
    - 2 resources (greeting, departing), 3 representations
    - Each entry is a VersionRouteMetadata instance
    - Lifecycle state, release markers and successor are declared here,
      never mutated by request handling

To deprecate a version:
    Set lifecycle_state=LifecycleState.DEPRECATED, deprecated_since to the
    release, and successor to the replacement. Responses for the version
    then carry Deprecation and Link headers; bodies are unchanged.

Usage:
    from src.presentation.routers.api.flip.routes.registry import VERSION_ROUTE_REGISTRY
"""

from src.domain.enums.lifecycle_state import LifecycleState
from src.domain.value_objects.version_token import VersionToken
from src.presentation.routers.api.flip.departing import depart_v1
from src.presentation.routers.api.flip.greeting import greet_v1, greet_v2
from src.presentation.routers.api.flip.routes.metadata import (
    ErrorSpec,
    VersionRouteMetadata,
)
from src.schemas.departing_schemas import DepartV1Response
from src.schemas.greeting_schemas import GreetingV1Response, GreetingV2Response

NEGOTIATION_ERRORS = [
    ErrorSpec(status=404, description="Resource not registered"),
    ErrorSpec(status=406, description="No acceptable version requested"),
]

# =============================================================================
# VERSION_ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

VERSION_ROUTE_REGISTRY: list[VersionRouteMetadata] = [
    # =========================================================================
    # Greeting Resource (2 versions)
    # =========================================================================
    VersionRouteMetadata(
        resource="greeting",
        version=1,
        path="/greeting/greet",
        producer=greet_v1,
        tags=["Greeting"],
        summary="Greet someone",
        description="Original greeting with a single content field.",
        response_model=GreetingV1Response,
        errors=NEGOTIATION_ERRORS,
        lifecycle_state=LifecycleState.DEPRECATED,
        deprecated_since="1.3",
        successor=VersionToken(resource="greeting", version=2),
    ),
    VersionRouteMetadata(
        resource="greeting",
        version=2,
        path="/greeting/greet",
        producer=greet_v2,
        tags=["Greeting"],
        summary="Greet someone",
        description="Greeting with separate message, recipient and issue time.",
        response_model=GreetingV2Response,
        errors=NEGOTIATION_ERRORS,
    ),
    # =========================================================================
    # Departing Resource (1 version)
    # =========================================================================
    VersionRouteMetadata(
        resource="departing",
        version=1,
        path="/departing/depart",
        producer=depart_v1,
        tags=["Departing"],
        summary="Say goodbye",
        description="Goodbye message with departure time (date added in 1.1).",
        response_model=DepartV1Response,
        errors=NEGOTIATION_ERRORS,
    ),
]
