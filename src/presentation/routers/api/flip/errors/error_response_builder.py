"""Error response builder for RFC 7807 Problem Details.

Builds Problem Details responses from the domain errors returned by the
resource registry and the version dispatcher.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.domain.errors import NegotiationError
from src.presentation.routers.api.flip.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

PROBLEM_MEDIA_TYPE = "application/problem+json"


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=negotiation_error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> response.status_code
        406
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Domain error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with ProblemDetails content. Negotiation failures
            carry the acceptable media types.
        """
        status_code = ErrorResponseBuilder._get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder._get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        if isinstance(error, NegotiationError):
            problem.acceptable = list(error.acceptable)

        if isinstance(error, ValidationError):
            problem.errors = [
                ErrorDetail(
                    field=error.field or "unknown",
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            media_type=PROBLEM_MEDIA_TYPE,
        )

    @staticmethod
    def _get_status_code(code: ErrorCode) -> int:
        """Map error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(ErrorCode.VERSION_NOT_ACCEPTABLE)
            406
        """
        mapping = {
            ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
            ErrorCode.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
            ErrorCode.VERSION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
            ErrorCode.VERSION_NOT_ACCEPTABLE: status.HTTP_406_NOT_ACCEPTABLE,
            ErrorCode.VERSION_ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
            ErrorCode.INVALID_LIFECYCLE_TRANSITION: status.HTTP_409_CONFLICT,
        }
        return mapping.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def _get_title(code: ErrorCode) -> str:
        """Get human-readable title for error code."""
        mapping = {
            ErrorCode.VALIDATION_FAILED: "Validation Failed",
            ErrorCode.RESOURCE_NOT_FOUND: "Resource Not Found",
            ErrorCode.VERSION_NOT_FOUND: "Version Not Found",
            ErrorCode.VERSION_NOT_ACCEPTABLE: "Version Not Acceptable",
            ErrorCode.VERSION_ALREADY_REGISTERED: "Version Conflict",
            ErrorCode.INVALID_LIFECYCLE_TRANSITION: "Invalid Lifecycle Transition",
        }
        return mapping.get(code, "Internal Server Error")
