"""Greeting representation producers.

One producer per registered greeting version. Producers only build payloads;
negotiation, headers and status codes are handled by the generated route.

Versions:
    v1 - {"id", "content"}                                  (deprecated since 1.3)
    v2 - {"id", "message", "recipient", "issued_at"}
"""

import itertools
from collections.abc import Mapping
from datetime import UTC, datetime

from src.schemas.greeting_schemas import GreetingV1Response, GreetingV2Response

DEFAULT_RECIPIENT = "World"

# Shared across versions so ids stay unique whichever version is requested
_greeting_ids = itertools.count(1)


def _recipient(params: Mapping[str, str]) -> str:
    """Return the name to greet (query parameter "name", default "World")."""
    name = (params.get("name") or "").strip()
    return name or DEFAULT_RECIPIENT


async def greet_v1(params: Mapping[str, str]) -> GreetingV1Response:
    """Build a version 1 greeting.

    Args:
        params: Request query parameters.

    Returns:
        GreetingV1Response: e.g. {"id": 1, "content": "Hello, World!"}.
    """
    return GreetingV1Response(
        id=next(_greeting_ids),
        content=f"Hello, {_recipient(params)}!",
    )


async def greet_v2(params: Mapping[str, str]) -> GreetingV2Response:
    """Build a version 2 greeting.

    Args:
        params: Request query parameters.

    Returns:
        GreetingV2Response: Greeting with separate recipient and timestamp.
    """
    recipient = _recipient(params)
    return GreetingV2Response(
        id=next(_greeting_ids),
        message=f"Hello, {recipient}!",
        recipient=recipient,
        issued_at=datetime.now(UTC),
    )
