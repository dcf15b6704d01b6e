"""Profile Routes — HTTP bindings for a profile resource and its overlay.

Invariants:
    - Every operation is served twice: on profile/{id} and on profile/{id}/overlay
    - Structured responses are JSON; file responses carry the guessed media type
    - DELETE and requirements POST return 204 with no body
    - fileName matches the remaining path, separators included

Design Decisions:
    - Routes registered by _add_profile_routes(suffix, resolver): the overlay is the
      same resource type bound one level deeper, so the handlers are identical
"""

import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, Response, status

from profile_api.api.deps import (
    API_PREFIX, get_overlay_resource, get_profile_resource,
)
from profile_api.schemas.profile import ProfileDetail
from profile_api.schemas.requirements import ProfileRequirementsPayload
from profile_api.services.profile_resource import ProfileResource

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix=f"{API_PREFIX}/version/{{version_id}}/profile/{{profile_id}}",
    tags=["profiles"],
)


def _add_profile_routes(suffix: str, resolve: Callable, name: str) -> None:
    """Register the profile operation set under `suffix`."""

    @router.get(suffix, response_model=ProfileDetail, name=f"{name}_details")
    async def details(resource: ProfileResource = Depends(resolve)):
        """Profile detail view with links to its child resources."""
        return resource.details()

    @router.delete(
        suffix, status_code=status.HTTP_204_NO_CONTENT, name=f"{name}_delete",
    )
    async def delete_profile(resource: ProfileResource = Depends(resolve)):
        """Delete the profile (forced: unassigns it from containers)."""
        await resource.delete()
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get(
        f"{suffix}/containers", response_model=dict[str, str],
        name=f"{name}_containers",
    )
    async def containers(resource: ProfileResource = Depends(resolve)):
        """Links to containers assigned to this profile and version."""
        return await resource.containers()

    @router.get(
        f"{suffix}/requirements",
        response_model=ProfileRequirementsPayload | None,
        name=f"{name}_requirements",
    )
    async def requirements(resource: ProfileResource = Depends(resolve)):
        """Requirement record, created empty on first read."""
        record = await resource.requirements()
        if record is None:
            return None
        return ProfileRequirementsPayload.from_domain(record)

    @router.post(
        f"{suffix}/requirements", status_code=status.HTTP_204_NO_CONTENT,
        name=f"{name}_set_requirements",
    )
    async def set_requirements(
        body: ProfileRequirementsPayload,
        resource: ProfileResource = Depends(resolve),
    ):
        """Add or replace this profile's requirement record."""
        await resource.set_requirements(
            body.to_domain(body.profile or resource.profile.id),
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get(
        f"{suffix}/fileNames", response_model=dict[str, str],
        name=f"{name}_file_names",
    )
    async def file_names(resource: ProfileResource = Depends(resolve)):
        """Links to every configuration file of the profile."""
        return resource.file_names()

    @router.get(f"{suffix}/file/{{file_name:path}}", name=f"{name}_file")
    async def file(file_name: str, resource: ProfileResource = Depends(resolve)):
        """Raw configuration file content."""
        content, media_type = resource.file(file_name)
        return Response(content=content, media_type=media_type)


_add_profile_routes("", get_profile_resource, "profile")
_add_profile_routes("/overlay", get_overlay_resource, "overlay")
