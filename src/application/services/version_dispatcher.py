"""Versioned resource dispatcher.

Resolves a requested resource plus the client's ordered version candidates
(parsed from the Accept header) to one registered version.

Rules:
    1. Candidates that do not parse as version tokens are discarded.
    2. Candidates for another resource, for unregistered versions, or for
       removed versions are skipped.
    3. The first surviving candidate in the client's order wins. The
       dispatcher never upgrades a client to a newer version than requested.
    4. A deprecated match carries the deprecation flag and its successor.
    5. No survivor is a NegotiationError (406 at the boundary); an unknown
       resource is a NotFoundError (404).

Resolution is a pure function of (registry snapshot, resource, candidates):
no locking, no retries.

Usage:
    dispatcher = VersionDispatcher(registry=registry, logger=logger, vendor="flipfoundry")
    result = dispatcher.resolve("greeting", ["application/vnd.flipfoundry.greeting.v2+json"])
    match result:
        case Success(value=resolution):
            ...
        case Failure(error=error):
            ...
"""

from collections.abc import Sequence
from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.version_descriptor import VersionDescriptor
from src.domain.errors import NegotiationError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.resource_registry_protocol import (
    RegistryViewProtocol,
    ResourceRegistryProtocol,
)
from src.domain.value_objects.version_token import VersionToken, parse_version_token


@dataclass(frozen=True, slots=True, kw_only=True)
class Resolution:
    """Outcome of a successful negotiation.

    Attributes:
        descriptor: Selected version descriptor.
        token: Selected (resource, version) pair.
        media_type: Canonical media type of the chosen representation.
        deprecated: Whether the boundary should emit deprecation headers.
        successor: Successor descriptor of a deprecated version, if registered.
    """

    descriptor: VersionDescriptor
    token: VersionToken
    media_type: str
    deprecated: bool = False
    successor: VersionDescriptor | None = None


class VersionDispatcher:
    """Resolve (resource, candidates) against the resource registry.

    Dependencies (injected via constructor):
        - ResourceRegistryProtocol: Source of registry snapshots
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        registry: ResourceRegistryProtocol,
        logger: LoggerProtocol,
        vendor: str,
        suffix: str | None = "json",
    ) -> None:
        """Initialize dispatcher with dependencies.

        Args:
            registry: Registry to read snapshots from.
            logger: Logger for negotiation decisions.
            vendor: Media type vendor (tokens naming another vendor are
                discarded).
            suffix: Structured syntax suffix of rendered media types.
        """
        self._registry = registry
        self._logger = logger
        self._vendor = vendor
        self._suffix = suffix

    @property
    def vendor(self) -> str:
        """Media type vendor this dispatcher accepts."""
        return self._vendor

    def media_type_for(self, token: VersionToken) -> str:
        """Render the canonical media type for a token."""
        return token.media_type(self._vendor, self._suffix)

    def resolve(
        self,
        resource: str,
        candidates: Sequence[str | VersionToken],
    ) -> Result[Resolution, NegotiationError | NotFoundError]:
        """Select the version to serve for resource.

        Args:
            resource: Requested resource (from the request path).
            candidates: Client-preferred version candidates, most preferred
                first. Raw media ranges or already-parsed tokens.

        Returns:
            Success(Resolution): Chosen version.
            Failure(NotFoundError): Resource unknown to the registry.
            Failure(NegotiationError): No candidate matched a servable version.
        """
        view = self._registry.snapshot()

        if not view.has_resource(resource):
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.RESOURCE_NOT_FOUND,
                    message=f"Resource '{resource}' is not registered",
                    resource_type="resource",
                    resource_id=resource,
                )
            )

        for candidate in candidates:
            token = (
                candidate
                if isinstance(candidate, VersionToken)
                else parse_version_token(candidate, vendor=self._vendor)
            )
            if token is None:
                self._logger.debug(
                    "Discarded malformed version token", candidate=str(candidate)
                )
                continue
            if token.resource != resource:
                continue

            lookup = view.lookup(resource, token.version)
            if isinstance(lookup, Failure) or not lookup.value.is_servable:
                continue

            return Success(value=self._build_resolution(view, lookup.value))

        acceptable = self._acceptable_media_types(view, resource)
        self._logger.info(
            "Version negotiation failed",
            resource=resource,
            candidates=len(candidates),
            acceptable=list(acceptable),
        )
        return Failure(
            error=NegotiationError(
                code=ErrorCode.VERSION_NOT_ACCEPTABLE,
                message=f"No acceptable version of '{resource}' was requested",
                resource=resource,
                acceptable=acceptable,
            )
        )

    def _build_resolution(
        self, view: RegistryViewProtocol, descriptor: VersionDescriptor
    ) -> Resolution:
        """Build the resolution for a selected descriptor.

        The successor is looked up in the same snapshot so both refer to one
        registry state. A removed successor is not advertised.
        """
        successor: VersionDescriptor | None = None
        if descriptor.is_deprecated and descriptor.successor is not None:
            ref = descriptor.successor
            successor_lookup = view.lookup(ref.resource, ref.version)
            if isinstance(successor_lookup, Success) and successor_lookup.value.is_servable:
                successor = successor_lookup.value

        return Resolution(
            descriptor=descriptor,
            token=descriptor.token,
            media_type=self.media_type_for(descriptor.token),
            deprecated=descriptor.is_deprecated,
            successor=successor,
        )

    def _acceptable_media_types(
        self, view: RegistryViewProtocol, resource: str
    ) -> tuple[str, ...]:
        """Media types of the resource's servable versions, ascending."""
        return tuple(
            self.media_type_for(descriptor.token)
            for descriptor in view.list_versions(resource)
            if descriptor.is_servable
        )
