"""Fabric Routes — API root, versions and containers.

Invariants:
    - GET {API_PREFIX} lists version links (empty when no directory is configured)
    - Unknown versions and containers answer 404 through ResourceNotFoundError
"""

import logging

from fastapi import APIRouter, Depends

from profile_api.api.deps import API_PREFIX, get_fabric_root
from profile_api.schemas.profile import ContainerDetail, RootDetail, VersionDetail
from profile_api.services.fabric_resource import FabricResource

logger = logging.getLogger(__name__)
router = APIRouter(prefix=API_PREFIX, tags=["fabric"])


@router.get("", response_model=RootDetail)
async def root_details(root: FabricResource = Depends(get_fabric_root)):
    """Entry point: links to every version."""
    return await root.details()


@router.get("/version/{version_id}", response_model=VersionDetail)
async def version_details(
    version_id: str, root: FabricResource = Depends(get_fabric_root),
):
    """Version detail: links to its profiles."""
    version = await root.version(version_id)
    return await version.details()


@router.get("/container/{container_id}", response_model=ContainerDetail)
async def container_details(
    container_id: str, root: FabricResource = Depends(get_fabric_root),
):
    """Container detail: links to its assigned profiles."""
    container = await root.container(container_id)
    return container.details()
