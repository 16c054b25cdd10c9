"""Registry compliance tests - prevent drift and ensure completeness.

These tests ensure VERSION_ROUTE_REGISTRY remains the single source of truth
by validating that:
1. Every registry path is routed, and every routed path is in the registry
2. (resource, version) pairs are unique
3. Lifecycle metadata is consistent (markers, successors)
4. Producers and response models are usable

If these tests fail, the registry has drifted from the running application.
"""

import inspect

from pydantic import BaseModel

from src.core.config import settings
from src.domain.enums.lifecycle_state import LifecycleState
from src.main import app
from src.presentation.routers.api.flip import flip_router
from src.presentation.routers.api.flip.routes.registry import VERSION_ROUTE_REGISTRY


# =============================================================================
# Test Class 1: Route Completeness
# =============================================================================


class TestRegistryCompleteness:
    """Verify registry and FastAPI routes are in sync."""

    def test_every_registry_path_is_routed(self):
        """Every registry path must have exactly one GET route.

        Fails if: Route generation skipped an entry.
        """
        routed = {
            route.path
            for route in flip_router.routes
            if "GET" in getattr(route, "methods", set())
        }

        expected = {f"{settings.api_prefix}{entry.path}" for entry in VERSION_ROUTE_REGISTRY}

        assert expected <= routed, f"Registry paths not routed: {expected - routed}"

    def test_no_orphan_versioned_routes(self):
        """Every routed path outside /versions must come from the registry.

        Fails if: Someone adds a versioned route by hand.
        """
        expected = {f"{settings.api_prefix}{entry.path}" for entry in VERSION_ROUTE_REGISTRY}
        versions_prefix = f"{settings.api_prefix}/versions"

        orphans = {
            route.path
            for route in flip_router.routes
            if hasattr(route, "methods")
            and not route.path.startswith(versions_prefix)
            and route.path not in expected
        }

        assert not orphans, f"Routes not declared in VERSION_ROUTE_REGISTRY: {orphans}"

    def test_operation_ids_are_unique(self):
        """Every operation_id in the OpenAPI document must be unique."""
        operation_ids = [
            operation["operationId"]
            for path_item in app.openapi()["paths"].values()
            for operation in path_item.values()
        ]

        assert len(operation_ids) == len(set(operation_ids))


# =============================================================================
# Test Class 2: Registry Consistency
# =============================================================================


class TestRegistryConsistency:
    """Verify registry entries are internally consistent."""

    def test_resource_versions_are_unique(self):
        """No (resource, version) pair may be declared twice."""
        pairs = [(entry.resource, entry.version) for entry in VERSION_ROUTE_REGISTRY]

        assert len(pairs) == len(set(pairs))

    def test_one_resource_per_path(self):
        """All versions at one path belong to the same resource."""
        by_path: dict[str, set[str]] = {}
        for entry in VERSION_ROUTE_REGISTRY:
            by_path.setdefault(entry.path, set()).add(entry.resource)

        assert all(len(resources) == 1 for resources in by_path.values())

    def test_successors_are_registered(self):
        """Every successor must name a registered version."""
        pairs = {(entry.resource, entry.version) for entry in VERSION_ROUTE_REGISTRY}

        for entry in VERSION_ROUTE_REGISTRY:
            if entry.successor is not None:
                assert (entry.successor.resource, entry.successor.version) in pairs, (
                    f"{entry.token} names unregistered successor {entry.successor}"
                )

    def test_deprecated_entries_have_release_marker_and_successor(self):
        """Deprecated entries must say since when and what replaces them."""
        for entry in VERSION_ROUTE_REGISTRY:
            if entry.lifecycle_state == LifecycleState.DEPRECATED:
                assert entry.deprecated_since, f"{entry.token} missing deprecated_since"
                assert entry.successor is not None, f"{entry.token} missing successor"

    def test_every_resource_has_a_servable_version(self):
        """A resource with nothing servable would always answer 406."""
        servable: dict[str, bool] = {}
        for entry in VERSION_ROUTE_REGISTRY:
            servable[entry.resource] = servable.get(entry.resource, False) or (
                entry.lifecycle_state != LifecycleState.REMOVED
            )

        assert all(servable.values())


# =============================================================================
# Test Class 3: Producers and Schemas
# =============================================================================


class TestProducers:
    """Verify producers and response models."""

    def test_producers_are_coroutine_functions(self):
        """Producers are awaited by the generated route."""
        for entry in VERSION_ROUTE_REGISTRY:
            assert inspect.iscoroutinefunction(entry.producer), entry.token

    def test_response_models_are_pydantic(self):
        """Response models must be Pydantic models."""
        for entry in VERSION_ROUTE_REGISTRY:
            assert issubclass(entry.response_model, BaseModel), entry.token

    def test_representation_shapes_are_distinct(self):
        """Each version of a resource has its own schema."""
        shapes = {}
        for entry in VERSION_ROUTE_REGISTRY:
            shapes.setdefault(entry.resource, []).append(entry.representation_shape)

        for resource, names in shapes.items():
            assert len(names) == len(set(names)), resource
