"""Core shared kernel.

Everything here is imported by several layers:
- Result (Success / Failure) returned by the registry and the dispatcher
- DomainError and its generic subclasses
- ErrorCode and Environment enums
- Settings (src.core.config) and the dependency container (src.core.container),
  imported explicitly where needed
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
