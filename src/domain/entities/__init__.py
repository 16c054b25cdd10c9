"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.version_descriptor import VersionDescriptor

__all__ = ["VersionDescriptor"]
