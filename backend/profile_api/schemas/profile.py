"""Profile Schemas — serialized views of the resource tree for API responses.

Invariants:
    - links maps relation name → absolute link; keys unique per response
    - ProfileDetail.links has no "overlay" key when is_overlay is True
    - Views are assembled from already-loaded data (no IO in construction)
"""

from pydantic import BaseModel, Field


class ProfileDetail(BaseModel):
    """Detail view of one profile resource."""
    id: str
    version: str
    parents: list[str] = Field(default_factory=list)
    is_overlay: bool = False
    abstract: bool = False
    hidden: bool = False
    locked: bool = False
    attributes: dict[str, str] = Field(default_factory=dict)
    links: dict[str, str] = Field(default_factory=dict)


class VersionDetail(BaseModel):
    """Detail view of one version: links to its profiles."""
    id: str
    profiles: dict[str, str] = Field(default_factory=dict)


class RootDetail(BaseModel):
    """Entry point of the API: links to every version."""
    versions: dict[str, str] = Field(default_factory=dict)


class ContainerDetail(BaseModel):
    """Detail view of one container: links to its assigned profiles."""
    id: str
    version: str
    alive: bool = False
    profiles: dict[str, str] = Field(default_factory=dict)
