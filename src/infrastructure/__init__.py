"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- versioning/: In-memory resource registry (copy-on-write snapshots)
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
