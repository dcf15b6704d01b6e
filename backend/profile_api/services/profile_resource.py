"""Profile Resource — one profile bound into the resource tree, with its child operations.

Invariants:
    - Segment is "overlay" for overlay profiles, "profile/{id}" otherwise
    - details() never links an overlay from an overlay (no overlay-of-overlay chain)
    - overlay() recomputes on every call and returns None for overlays or a missing directory
    - Read paths degrade (empty/None) on a missing directory; delete raises ServiceUnavailableError
    - requirements() persists a default record the first time a profile is read
    - file_names() links keep "/" in names but percent-encode everything else unsafe

Design Decisions:
    - Container links built from the grandparent address: the tree root for a source
      profile (root → version → profile)
    - requirements read and write are two independent directory calls, no transaction
      (ADR: last write wins, conflict resolution belongs to the storage engine)
"""

import logging
from urllib.parse import quote

from profile_api.core.domain_types import (
    CONTAINER_SEGMENT_PREFIX, FILE_SEGMENT, OVERLAY_SEGMENT,
    PROFILE_SEGMENT_PREFIX, Relation,
)
from profile_api.core.errors import (
    BadInputError, ErrorContext, ProfileFileNotFoundError, ServiceUnavailableError,
)
from profile_api.core.links import map_to_links, resolve_link
from profile_api.core.media_types import guess_media_type
from profile_api.core.profile_model import Profile, container_ids, containers_for_profile
from profile_api.core.requirements import ProfileRequirements
from profile_api.core.resource_node import ResourceNode
from profile_api.schemas.profile import ProfileDetail

logger = logging.getLogger(__name__)

DIRECTORY_SERVICE = "profileDirectory"


def profile_segment(profile: Profile) -> str:
    if profile.is_overlay:
        return OVERLAY_SEGMENT
    return PROFILE_SEGMENT_PREFIX + profile.id


class ProfileResource(ResourceNode):
    """Addressable wrapper around a single Profile."""

    def __init__(self, parent: ResourceNode | None, profile: Profile):
        super().__init__(profile_segment(profile), parent)
        self.profile = profile

    def __repr__(self) -> str:
        return f"ProfileResource(profile={self.profile.id!r}, version={self.profile.version!r})"

    def _log_extra(self, relation: str | None = None) -> dict:
        return {
            "version_id": self.profile.version,
            "profile_id": self.profile.id,
            "relation": relation,
        }

    def _no_directory(self, relation: str) -> None:
        logger.warning(
            f"No profile directory available for {self.address()}",
            extra=self._log_extra(relation),
        )

    def details(self) -> ProfileDetail:
        links = {
            Relation.CONTAINERS.value: self.link(Relation.CONTAINERS.value),
            Relation.REQUIREMENTS.value: self.link(Relation.REQUIREMENTS.value),
            Relation.FILE_NAMES.value: self.link(Relation.FILE_NAMES.value),
        }
        if not self.profile.is_overlay:
            links[Relation.OVERLAY.value] = self.link(Relation.OVERLAY.value)
        return ProfileDetail(
            id=self.profile.id,
            version=self.profile.version,
            parents=list(self.profile.parents),
            is_overlay=self.profile.is_overlay,
            abstract=self.profile.abstract,
            hidden=self.profile.hidden,
            locked=self.profile.locked,
            attributes=dict(self.profile.attributes),
            links=links,
        )

    async def delete(self) -> None:
        directory = self.directory
        if directory is None:
            raise ServiceUnavailableError(
                DIRECTORY_SERVICE,
                ErrorContext(
                    version_id=self.profile.version,
                    profile_id=self.profile.id,
                    resource_address=self.address(),
                ),
            )
        await directory.delete_profile(
            self.profile.version, self.profile.id, force=True,
        )
        logger.info(
            f"Deleted profile {self.profile.id}",
            extra=self._log_extra(),
        )

    async def containers(self) -> dict[str, str]:
        """Links to the containers running this profile on this version."""
        directory = self.directory
        if directory is None:
            self._no_directory(Relation.CONTAINERS.value)
            return {}
        assigned = containers_for_profile(
            await directory.get_containers(), self.profile.id, self.profile.version,
        )
        prefix = resolve_link(self.base_address(2), CONTAINER_SEGMENT_PREFIX)
        return map_to_links(container_ids(assigned), prefix)

    async def overlay(self) -> "ProfileResource | None":
        """The effective (merged) profile as a child resource."""
        if self.profile.is_overlay:
            return None
        directory = self.directory
        if directory is None:
            self._no_directory(Relation.OVERLAY.value)
            return None
        overlay_profile = await directory.get_overlay_profile(self.profile)
        return ProfileResource(self, overlay_profile)

    async def requirements(self) -> ProfileRequirements | None:
        directory = self.directory
        if directory is None:
            self._no_directory(Relation.REQUIREMENTS.value)
            return None
        fabric_requirements = await directory.get_requirements()
        if fabric_requirements is None:
            return None
        created = fabric_requirements.find_profile_requirements(self.profile.id) is None
        record = fabric_requirements.get_or_create_profile_requirement(self.profile.id)
        if created:
            await directory.set_requirements(fabric_requirements)
        return record

    async def set_requirements(self, record: ProfileRequirements) -> None:
        if record.profile != self.profile.id:
            raise BadInputError(
                f"Requirements for profile '{record.profile}' cannot be written "
                f"to profile '{self.profile.id}'",
                "profile",
                ErrorContext(
                    version_id=self.profile.version, profile_id=self.profile.id,
                ),
            )
        directory = self.directory
        if directory is None:
            raise ServiceUnavailableError(
                DIRECTORY_SERVICE,
                ErrorContext(
                    version_id=self.profile.version,
                    profile_id=self.profile.id,
                    resource_address=self.address(),
                ),
            )
        fabric_requirements = await directory.get_requirements()
        if fabric_requirements is None:
            return
        fabric_requirements.add_or_update_profile_requirements(record)
        await directory.set_requirements(fabric_requirements)

    def file_names(self) -> dict[str, str]:
        """Links to every configuration file; names are percent-encoded in the link."""
        prefix = self.link(FILE_SEGMENT + "/")
        return {
            name: prefix + quote(name, safe="/")
            for name in sorted(self.profile.configuration_file_names())
        }

    def file(self, file_name: str) -> tuple[bytes, str]:
        """Raw bytes of a configuration file and its guessed media type."""
        content = self.profile.file_configuration(file_name)
        if content is None:
            raise ProfileFileNotFoundError(
                file_name, self.profile.id, self.profile.version,
            )
        return content, guess_media_type(file_name)
