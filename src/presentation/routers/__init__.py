"""HTTP routers.

- system: Non-versioned endpoints (root, health, config)
- api/flip: Versioned resources, negotiated through the Accept header
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
