"""Resource version lifecycle states.

Defines the lifecycle of one registered (resource, version) pair.

State Machine:
    ACTIVE → DEPRECATED → REMOVED

    - ACTIVE: Served normally
    - DEPRECATED: Still served, responses carry deprecation headers
    - REMOVED: Never served, kept in the registry for auditability

Usage:
    from src.domain.enums import LifecycleState

    if descriptor.lifecycle_state == LifecycleState.DEPRECATED:
        # Emit deprecation headers
"""

from enum import Enum


class LifecycleState(str, Enum):
    """Lifecycle state of a resource version.

    String Enum:
        Inherits from str for easy serialization in listing responses.
        Values are lowercase for consistency.

    State Transitions:
        ACTIVE → DEPRECATED: Successor announced, old clients warned
        ACTIVE → REMOVED: Withdrawn without a deprecation period
        DEPRECATED → REMOVED: Deprecation period over
        REMOVED is terminal.
    """

    ACTIVE = "active"
    DEPRECATED = "deprecated"
    REMOVED = "removed"

    @property
    def rank(self) -> int:
        """Position along the lifecycle (higher = later)."""
        return _RANK[self]

    def can_transition_to(self, target: "LifecycleState") -> bool:
        """Check whether a move to target goes strictly forward.

        Args:
            target: Proposed new state.

        Returns:
            bool: True if target is later in the lifecycle than self.
        """
        return target.rank > self.rank


_RANK: dict[LifecycleState, int] = {
    LifecycleState.ACTIVE: 0,
    LifecycleState.DEPRECATED: 1,
    LifecycleState.REMOVED: 2,
}
