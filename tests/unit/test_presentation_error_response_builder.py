"""Unit tests for ErrorResponseBuilder utility."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import status

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.domain.errors import DuplicateVersionError, NegotiationError
from src.presentation.routers.api.flip.errors import ErrorResponseBuilder

TRACE_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def request_mock():
    """Request double with a URL path."""
    request = MagicMock()
    request.url.path = "/flip/greeting/greet"
    return request


def _body(response) -> dict:
    return json.loads(bytes(response.body).decode())


@pytest.mark.unit
class TestErrorResponseBuilder:
    """Unit tests for ErrorResponseBuilder utility class."""

    def test_negotiation_error_is_406_with_acceptable(self, request_mock):
        """Test negotiation failures map to 406 and list acceptable media types."""
        # Arrange
        error = NegotiationError(
            code=ErrorCode.VERSION_NOT_ACCEPTABLE,
            message="No acceptable version of 'greeting' was requested",
            resource="greeting",
            acceptable=(
                "application/vnd.flipfoundry.greeting.v1+json",
                "application/vnd.flipfoundry.greeting.v2+json",
            ),
        )

        # Act
        response = ErrorResponseBuilder.from_domain_error(
            error=error, request=request_mock, trace_id=TRACE_ID
        )

        # Assert
        assert response.status_code == status.HTTP_406_NOT_ACCEPTABLE
        assert response.media_type == "application/problem+json"
        body = _body(response)
        assert body["type"] == f"{settings.api_base_url}/errors/version_not_acceptable"
        assert body["title"] == "Version Not Acceptable"
        assert body["status"] == 406
        assert body["detail"] == "No acceptable version of 'greeting' was requested"
        assert body["instance"] == "/flip/greeting/greet"
        assert body["trace_id"] == TRACE_ID
        assert body["acceptable"] == list(error.acceptable)
        assert "errors" not in body

    @pytest.mark.parametrize(
        ("code", "resource_type"),
        [
            (ErrorCode.RESOURCE_NOT_FOUND, "resource"),
            (ErrorCode.VERSION_NOT_FOUND, "version"),
        ],
    )
    def test_not_found_is_404(self, request_mock, code, resource_type):
        """Test not-found errors map to 404 without acceptable."""
        error = NotFoundError(
            code=code,
            message="Resource 'farewell' is not registered",
            resource_type=resource_type,
            resource_id="farewell",
        )

        response = ErrorResponseBuilder.from_domain_error(error, request_mock, TRACE_ID)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "acceptable" not in _body(response)

    def test_duplicate_version_is_409(self, request_mock):
        """Test duplicate registrations map to 409."""
        error = DuplicateVersionError(
            code=ErrorCode.VERSION_ALREADY_REGISTERED,
            message="Version 1 of 'greeting' is already registered",
            resource_type="version",
            conflicting_field="version",
            resource="greeting",
            version=1,
        )

        response = ErrorResponseBuilder.from_domain_error(error, request_mock, TRACE_ID)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert _body(response)["title"] == "Version Conflict"

    def test_invalid_transition_is_409_with_field_error(self, request_mock):
        """Test lifecycle transition failures map to 409 with a field error."""
        error = ValidationError(
            code=ErrorCode.INVALID_LIFECYCLE_TRANSITION,
            message="Cannot move greeting.v1 from deprecated to active",
            field="lifecycle_state",
        )

        response = ErrorResponseBuilder.from_domain_error(error, request_mock, TRACE_ID)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert _body(response)["errors"] == [
            {
                "field": "lifecycle_state",
                "code": "invalid_lifecycle_transition",
                "message": "Cannot move greeting.v1 from deprecated to active",
            }
        ]

    def test_validation_failed_is_400(self, request_mock):
        """Test generic validation failures map to 400."""
        error = ValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message="Invalid resource name",
            field=None,
        )

        response = ErrorResponseBuilder.from_domain_error(error, request_mock, None)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = _body(response)
        assert body["errors"][0]["field"] == "unknown"
        assert "trace_id" not in body
