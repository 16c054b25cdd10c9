"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - LifecycleState: Active / Deprecated / Removed status of a resource version
"""

from src.domain.enums.lifecycle_state import LifecycleState

__all__ = ["LifecycleState"]
