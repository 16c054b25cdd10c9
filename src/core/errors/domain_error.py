"""Base error type carried inside Failure results.

Registry and dispatcher failures are expected outcomes (a client asked for a
version that does not exist, a catalog declared a version twice), so they are
returned as data rather than raised. The presentation layer turns them into
RFC 7807 responses keyed on ``code``.

Usage:
    from src.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class NegotiationError(DomainError):
        resource: str
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (not an Exception subclass; never raised).

    Attributes:
        code: Machine-readable error code, also the problem type slug.
        message: Human-readable message, used as the problem detail.
        details: Optional extra context.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """Render as "<code>: <message>" (used for RuntimeError at startup)."""
        return f"{self.code.value}: {self.message}"
