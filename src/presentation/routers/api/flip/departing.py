"""Departing representation producers.

Versions:
    v1 - {"content": "Goodbye", "date": "MM/dd/yyyy HH:mm:ss:S"}
"""

from collections.abc import Mapping
from datetime import datetime

from src.schemas.departing_schemas import DepartV1Response

DEPART_MESSAGE = "Goodbye"


def format_departure_time(moment: datetime) -> str:
    """Format a departure time as MM/dd/yyyy HH:mm:ss:S.

    S is the millisecond, not zero-padded.

    Args:
        moment: Time to format.

    Returns:
        str: e.g. "01/29/2025 09:05:03:7".
    """
    return f"{moment:%m/%d/%Y %H:%M:%S}:{moment.microsecond // 1000}"


async def depart_v1(params: Mapping[str, str]) -> DepartV1Response:
    """Build a version 1 departure message.

    Args:
        params: Request query parameters (unused).

    Returns:
        DepartV1Response: Goodbye message stamped with the local time.
    """
    return DepartV1Response(
        content=DEPART_MESSAGE,
        date=format_departure_time(datetime.now()),
    )
