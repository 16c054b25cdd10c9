"""Application services."""

from src.application.services.version_dispatcher import Resolution, VersionDispatcher

__all__ = ["Resolution", "VersionDispatcher"]
