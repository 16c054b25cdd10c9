"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.media_range import (
    MediaRange,
    parse_accept_header,
    parse_media_ranges,
)
from src.domain.value_objects.version_token import (
    VersionToken,
    parse_version_token,
    validate_resource_name,
    validate_version_number,
)

__all__ = [
    "MediaRange",
    "VersionToken",
    "parse_accept_header",
    "parse_media_ranges",
    "parse_version_token",
    "validate_resource_name",
    "validate_version_number",
]
