"""Greeting representation schemas.

Pydantic models for the versioned greeting resource.

Endpoint:
    GET /flip/greeting/greet?name=World

Versions:
    application/vnd.flipfoundry.greeting.v1+json - GreetingV1Response (deprecated since 1.3)
    application/vnd.flipfoundry.greeting.v2+json - GreetingV2Response
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GreetingV1Response(BaseModel):
    """Greeting representation, version 1.

    Deprecated as of release 1.3; use GreetingV2Response.
    """

    id: int = Field(..., description="Sequential greeting number")
    content: str = Field(..., description="Greeting text")

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": 1, "content": "Hello, World!"}}
    )


class GreetingV2Response(BaseModel):
    """Greeting representation, version 2.

    Splits the greeting into message and recipient and stamps it.
    """

    id: int = Field(..., description="Sequential greeting number")
    message: str = Field(..., description="Greeting text")
    recipient: str = Field(..., description="Who was greeted")
    issued_at: datetime = Field(..., description="When the greeting was issued (UTC)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 2,
                "message": "Hello, World!",
                "recipient": "World",
                "issued_at": "2025-01-29T12:00:00Z",
            }
        }
    )
