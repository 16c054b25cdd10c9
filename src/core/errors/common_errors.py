"""Common error classes used across all layers.

These are generic errors that don't belong to the versioning domain alone.
They flow through the system inside Result types.

Error Types:
- ValidationError: Input or state validation failures
- NotFoundError: Resource (or resource version) not found
- ConflictError: Resource conflicts (duplicates, state conflicts)

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(NotFoundError(
        code=ErrorCode.RESOURCE_NOT_FOUND,
        message="Resource 'farewell' is not registered",
        resource_type="resource",
        resource_id="farewell",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input or state validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Kind of thing looked up ("resource", "version").
        resource_id: Identifier that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (version, etc.).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None
