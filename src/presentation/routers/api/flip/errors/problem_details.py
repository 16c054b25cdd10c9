"""RFC 7807 Problem Details for HTTP APIs.

This module implements RFC 7807 (Problem Details for HTTP APIs) using Pydantic
models for structured error responses.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field (or query parameter) with error
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Standard members (type, title, status, detail, instance) plus two
    extension members: trace_id for correlation and acceptable, listing the
    media types a resource can be served as when negotiation fails.

    Examples:
        >>> # Negotiation failure
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/version_not_acceptable",
        ...     title="Version Not Acceptable",
        ...     status=406,
        ...     detail="No acceptable version of 'greeting' was requested",
        ...     instance="/flip/greeting/greet",
        ...     acceptable=[
        ...         "application/vnd.flipfoundry.greeting.v1+json",
        ...         "application/vnd.flipfoundry.greeting.v2+json",
        ...     ],
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/version_not_acceptable"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Version Not Acceptable"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[406],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["No acceptable version of 'greeting' was requested"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/flip/greeting/greet"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    acceptable: list[str] | None = Field(
        None,
        description="Media types the resource can be served as (406 only)",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
