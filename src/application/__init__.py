"""Application layer - Use cases and orchestration.

Structure:
- services/: VersionDispatcher (resolves a resource and the client's version
  candidates against a registry snapshot)

The application layer orchestrates domain objects and returns Result types;
it knows nothing about HTTP.
"""
