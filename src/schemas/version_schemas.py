"""Version listing schemas.

Endpoints:
    GET /flip/versions             - All resources and their versions
    GET /flip/versions/{resource}  - One resource's versions
"""

from pydantic import BaseModel, Field

from src.domain.enums.lifecycle_state import LifecycleState


class VersionResponse(BaseModel):
    """One registered version of a resource."""

    version: int = Field(..., description="Version number")
    media_type: str = Field(..., description="Media type that selects this version")
    lifecycle_state: LifecycleState = Field(
        ...,
        description="active, deprecated or removed",
    )
    deprecated_since: str | None = Field(
        None,
        description="Release the deprecation took effect in",
    )
    removal_after: str | None = Field(
        None,
        description="Release after which the version is removed",
    )
    successor: str | None = Field(
        None,
        description="Media type of the recommended replacement",
    )
    representation_shape: str | None = Field(
        None,
        description="Response schema name",
    )


class ResourceVersionsResponse(BaseModel):
    """All registered versions of one resource, ascending."""

    resource: str = Field(..., description="Resource name")
    versions: list[VersionResponse] = Field(default_factory=list)


class ResourceListResponse(BaseModel):
    """Every registered resource."""

    resources: list[ResourceVersionsResponse] = Field(default_factory=list)
    total_count: int = Field(..., description="Number of resources")
