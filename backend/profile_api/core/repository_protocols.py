"""Boundary Protocols — contracts between the resource core and the profile storage shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All IO operations accessed through the ProfileDirectory Protocol
    - Implementations provided by shell via dependency injection (see infrastructure/)

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions (addressing, links, media types, overlay folding)
      are never async themselves
"""

from typing import Protocol

from profile_api.core.profile_model import Container, Profile
from profile_api.core.requirements import FabricRequirements


class ProfileDirectory(Protocol):
    """Contract for the profile/version directory service: implemented by shell."""
    async def get_versions(self) -> list[str]: ...
    async def get_profiles(self, version: str) -> list[Profile]: ...
    async def get_profile(self, version: str, profile_id: str) -> Profile | None: ...
    async def get_containers(self) -> list[Container]: ...
    async def get_container(self, container_id: str) -> Container | None: ...
    async def get_requirements(self) -> FabricRequirements | None: ...
    async def set_requirements(self, requirements: FabricRequirements) -> None: ...
    async def delete_profile(
        self, version: str, profile_id: str, force: bool,
    ) -> None: ...
    async def get_overlay_profile(self, profile: Profile) -> Profile: ...
