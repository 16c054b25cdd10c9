"""Result types for railway-oriented programming.

Operations that can fail for a caller-correctable reason (duplicate
registration, unknown resource, no acceptable version) return a Result
instead of raising. The failure is part of the signature and callers
pattern-match on it.

Usage:
    result = registry.lookup("greeting", 2)
    match result:
        case Success(value=descriptor):
            print(descriptor.version)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result = Success[T] | Failure[E]
