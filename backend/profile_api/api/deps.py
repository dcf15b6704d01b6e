"""Request Dependencies — build the per-request resource chain.

Invariants:
    - Root address = public_base_url (if set) or the request base URL, plus API_PREFIX
    - A missing database yields a root without directory (reads degrade, lookups 503)
    - Profile resources are rebuilt for every request, overlays included

Design Decisions:
    - Dependencies chain root → version → profile → overlay so each route receives a
      node already bound under its ancestors
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.config import get_settings
from profile_api.core.errors import ErrorContext, ResourceNotFoundError
from profile_api.core.repository_protocols import ProfileDirectory
from profile_api.infrastructure.database import get_db
from profile_api.infrastructure.profile_directory import SqlProfileDirectory
from profile_api.services.fabric_resource import FabricResource
from profile_api.services.profile_resource import ProfileResource

API_PREFIX = "/api/v1"


def root_address(request: Request) -> str:
    base = get_settings().public_base_url or str(request.base_url).rstrip("/")
    return base + API_PREFIX


async def get_directory(
    db: AsyncSession | None = Depends(get_db),
) -> ProfileDirectory | None:
    return SqlProfileDirectory(db) if db is not None else None


async def get_fabric_root(
    request: Request,
    directory: ProfileDirectory | None = Depends(get_directory),
) -> FabricResource:
    return FabricResource(root_address(request), directory)


async def get_profile_resource(
    version_id: str,
    profile_id: str,
    root: FabricResource = Depends(get_fabric_root),
) -> ProfileResource:
    version = await root.version(version_id)
    return await version.profile(profile_id)


async def get_overlay_resource(
    source: ProfileResource = Depends(get_profile_resource),
) -> ProfileResource:
    overlay = await source.overlay()
    if overlay is None:
        raise ResourceNotFoundError(
            "Overlay", source.link("overlay"),
            ErrorContext(
                version_id=source.profile.version, profile_id=source.profile.id,
            ),
        )
    return overlay
