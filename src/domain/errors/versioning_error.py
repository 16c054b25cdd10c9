"""Versioning error types.

Returned (never raised) by the resource registry and the dispatcher.

Usage:
    from src.domain.errors import NegotiationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(NegotiationError(
        code=ErrorCode.VERSION_NOT_ACCEPTABLE,
        message="No acceptable version of 'greeting'",
        resource="greeting",
        acceptable=("application/vnd.flipfoundry.greeting.v2+json",),
    ))
"""

from dataclasses import dataclass

from src.core.errors import ConflictError, DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class DuplicateVersionError(ConflictError):
    """A (resource, version) pair was registered twice.

    A configuration bug: fatal at startup, never recovered.

    Attributes:
        code: ErrorCode.VERSION_ALREADY_REGISTERED.
        message: Human-readable message.
        resource_type: Always "version".
        conflicting_field: Always "version".
        resource: Resource name.
        version: Version number registered twice.
    """

    resource: str
    version: int


@dataclass(frozen=True, slots=True, kw_only=True)
class NegotiationError(DomainError):
    """No acceptable version could be matched for a request.

    Always correctable by the client: resubmit with one of the acceptable
    media types.

    Attributes:
        code: ErrorCode.VERSION_NOT_ACCEPTABLE.
        message: Human-readable message.
        resource: Requested resource.
        acceptable: Media types the resource can currently be served as.
        details: Additional context.
    """

    resource: str
    acceptable: tuple[str, ...] = ()
