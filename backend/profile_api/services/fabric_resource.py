"""Fabric Resources — the tree root, versions and containers above/beside profiles.

Invariants:
    - FabricResource is the only node without a parent; its segment is the base URL
    - Tree shape: root → version/{v} → profile/{id} → overlay, root → container/{id}
    - Lookups that need the directory raise ServiceUnavailableError when it is absent;
      listings degrade to empty link maps
    - Unknown versions/profiles/containers raise ResourceNotFoundError

Design Decisions:
    - Versions exist only through their profiles: the directory lists version ids,
      the tree never materializes a version it was not asked for
"""

import logging

from profile_api.core.domain_types import (
    CONTAINER_SEGMENT_PREFIX, PROFILE_SEGMENT_PREFIX, VERSION_SEGMENT_PREFIX,
)
from profile_api.core.errors import (
    ErrorContext, ResourceNotFoundError, ServiceUnavailableError,
)
from profile_api.core.profile_model import Container
from profile_api.core.repository_protocols import ProfileDirectory
from profile_api.core.resource_node import ResourceNode
from profile_api.schemas.profile import ContainerDetail, RootDetail, VersionDetail
from profile_api.services.profile_resource import DIRECTORY_SERVICE, ProfileResource

logger = logging.getLogger(__name__)


def _require(node: ResourceNode) -> ProfileDirectory:
    directory = node.directory
    if directory is None:
        raise ServiceUnavailableError(
            DIRECTORY_SERVICE, ErrorContext(resource_address=node.address()),
        )
    return directory


class FabricResource(ResourceNode):
    """Root of the resource tree."""

    def __init__(self, base_address: str, directory: ProfileDirectory | None):
        super().__init__(base_address.rstrip("/"), None, directory)

    async def details(self) -> RootDetail:
        directory = self.directory
        if directory is None:
            logger.warning(f"No profile directory available for {self.address()}")
            return RootDetail()
        versions = await directory.get_versions()
        return RootDetail(
            versions=self.map_to_links(versions, VERSION_SEGMENT_PREFIX),
        )

    async def version(self, version_id: str) -> "VersionResource":
        directory = _require(self)
        if version_id not in await directory.get_versions():
            raise ResourceNotFoundError(
                "Version", version_id, ErrorContext(version_id=version_id),
            )
        return VersionResource(self, version_id)

    async def container(self, container_id: str) -> "ContainerResource":
        container = await _require(self).get_container(container_id)
        if container is None:
            raise ResourceNotFoundError("Container", container_id)
        return ContainerResource(self, container)


class VersionResource(ResourceNode):
    """One profile version: segment version/{id}."""

    def __init__(self, parent: FabricResource, version_id: str):
        super().__init__(VERSION_SEGMENT_PREFIX + version_id, parent)
        self.version_id = version_id

    async def details(self) -> VersionDetail:
        profiles = await _require(self).get_profiles(self.version_id)
        return VersionDetail(
            id=self.version_id,
            profiles=self.map_to_links(
                sorted(p.id for p in profiles), PROFILE_SEGMENT_PREFIX,
            ),
        )

    async def profile(self, profile_id: str) -> ProfileResource:
        profile = await _require(self).get_profile(self.version_id, profile_id)
        if profile is None:
            raise ResourceNotFoundError(
                "Profile", profile_id,
                ErrorContext(version_id=self.version_id, profile_id=profile_id),
            )
        return ProfileResource(self, profile)


class ContainerResource(ResourceNode):
    """One container: segment container/{id}."""

    def __init__(self, parent: FabricResource, container: Container):
        super().__init__(CONTAINER_SEGMENT_PREFIX + container.id, parent)
        self.container = container

    def details(self) -> ContainerDetail:
        version_node = ResourceNode(
            VERSION_SEGMENT_PREFIX + self.container.version, self.parent,
        )
        return ContainerDetail(
            id=self.container.id,
            version=self.container.version,
            alive=self.container.alive,
            profiles=version_node.map_to_links(
                self.container.profile_ids, PROFILE_SEGMENT_PREFIX,
            ),
        )
