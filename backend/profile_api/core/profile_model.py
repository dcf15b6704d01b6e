"""Profile Model — immutable views of profiles and containers as seen by the resource core.

Invariants:
    - A Profile is identified by (version, id); overlay and source share the identity
    - Profile values are frozen: mutation happens only through the ProfileDirectory
    - file_configuration() returns None (never raises) for unknown names

Design Decisions:
    - frozen dataclasses over ORM rows: resources never touch a session (ADR: impureim sandwich)
    - MappingProxyType for nested mappings: the dataclass freeze would not cover dict contents
"""

from dataclasses import dataclass, field, replace
from collections.abc import Mapping
from types import MappingProxyType


def _frozen(mapping: Mapping | None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Profile:
    """A named, versioned bundle of configuration files."""
    version: str
    id: str
    is_overlay: bool = False
    parents: tuple[str, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=dict)
    file_configurations: Mapping[str, bytes] = field(default_factory=dict)
    abstract: bool = False
    hidden: bool = False
    locked: bool = False

    def __post_init__(self):
        object.__setattr__(self, "parents", tuple(self.parents))
        object.__setattr__(self, "attributes", _frozen(self.attributes))
        object.__setattr__(
            self, "file_configurations", _frozen(self.file_configurations),
        )

    def configuration_file_names(self) -> set[str]:
        return set(self.file_configurations)

    def file_configuration(self, file_name: str) -> bytes | None:
        return self.file_configurations.get(file_name)

    def as_overlay(
        self,
        attributes: Mapping[str, str],
        file_configurations: Mapping[str, bytes],
    ) -> "Profile":
        """Copy of this profile flagged as overlay with merged content."""
        return replace(
            self,
            is_overlay=True,
            attributes=attributes,
            file_configurations=file_configurations,
        )


@dataclass(frozen=True)
class Container:
    """A runtime container and the profiles assigned to it."""
    id: str
    version: str
    profile_ids: tuple[str, ...] = ()
    alive: bool = False

    def __post_init__(self):
        object.__setattr__(self, "profile_ids", tuple(self.profile_ids))


def containers_for_profile(
    containers: list[Container], profile_id: str, version: str,
) -> list[Container]:
    """Containers assigned to profile_id on exactly this version."""
    return [
        c for c in containers
        if c.version == version and profile_id in c.profile_ids
    ]


def container_ids(containers: list[Container]) -> list[str]:
    return [c.id for c in containers]
