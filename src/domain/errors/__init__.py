"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import DuplicateVersionError, NegotiationError
"""

from src.domain.errors.versioning_error import DuplicateVersionError, NegotiationError

__all__ = [
    "DuplicateVersionError",
    "NegotiationError",
]
