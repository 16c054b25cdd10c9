"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_REGISTERED)
- Negotiation errors (*_NOT_ACCEPTABLE)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_LIFECYCLE_TRANSITION = "invalid_lifecycle_transition"

    # Resource errors
    RESOURCE_NOT_FOUND = "resource_not_found"
    VERSION_NOT_FOUND = "version_not_found"

    # Conflict errors
    VERSION_ALREADY_REGISTERED = "version_already_registered"

    # Negotiation errors
    VERSION_NOT_ACCEPTABLE = "version_not_acceptable"
