"""Departing representation schemas.

Endpoint:
    GET /flip/departing/depart

Versions:
    application/vnd.flipfoundry.departing.v1+json - DepartV1Response
"""

from pydantic import BaseModel, ConfigDict, Field


class DepartV1Response(BaseModel):
    """Departure message, version 1.

    The date field was added in release 1.1 and may be null for producers
    that predate it.
    """

    content: str = Field(..., description="Goodbye message")
    date: str | None = Field(
        None,
        description="Departure time, formatted MM/dd/yyyy HH:mm:ss:S (S = milliseconds)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"content": "Goodbye", "date": "01/29/2025 12:00:00:7"}
        }
    )
