"""SQL Profile Directory — ProfileDirectory implementation over an AsyncSession.

Invariants:
    - Returns core dataclasses only, never ORM rows
    - get_overlay_profile() reloads the version's profiles on every call (no cache)
    - get_requirements() returns None when no requirements document exists
    - delete_profile(force=False) refuses profiles assigned to containers;
      force=True unassigns them first

Design Decisions:
    - One instance per request, bound to the request's session (ADR: request-scoped resources)
    - set_requirements() serializes through json before storing: a payload that cannot
      be serialized fails here, before anything is written
"""

import json
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.core.errors import ProfileInUseError, ResourceNotFoundError, ErrorContext
from profile_api.core.overlay import derive_overlay
from profile_api.core.profile_model import (
    Container, Profile, container_ids, containers_for_profile,
)
from profile_api.core.requirements import FabricRequirements
from profile_api.models.container import ContainerRecord
from profile_api.models.profile import ProfileRecord
from profile_api.models.requirements import RequirementsDocument, REQUIREMENTS_DOCUMENT_ID
from profile_api.models.version import Version

logger = logging.getLogger(__name__)


class SqlProfileDirectory:
    """Profile/version directory backed by the relational store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_versions(self) -> list[str]:
        result = await self.db.execute(select(Version.id).order_by(Version.id))
        return list(result.scalars().all())

    async def get_profiles(self, version: str) -> list[Profile]:
        result = await self.db.execute(
            select(ProfileRecord)
            .where(ProfileRecord.version_id == version)
            .order_by(ProfileRecord.profile_id)
        )
        return [record.to_domain() for record in result.scalars().all()]

    async def get_profile(self, version: str, profile_id: str) -> Profile | None:
        record = await self._get_profile_record(version, profile_id)
        return record.to_domain() if record else None

    async def _get_profile_record(
        self, version: str, profile_id: str,
    ) -> ProfileRecord | None:
        result = await self.db.execute(
            select(ProfileRecord)
            .where(ProfileRecord.version_id == version)
            .where(ProfileRecord.profile_id == profile_id)
        )
        return result.scalar_one_or_none()

    async def get_containers(self) -> list[Container]:
        result = await self.db.execute(
            select(ContainerRecord).order_by(ContainerRecord.id),
        )
        return [record.to_domain() for record in result.scalars().all()]

    async def get_container(self, container_id: str) -> Container | None:
        record = await self.db.get(ContainerRecord, container_id)
        return record.to_domain() if record else None

    async def get_requirements(self) -> FabricRequirements | None:
        record = await self.db.get(RequirementsDocument, REQUIREMENTS_DOCUMENT_ID)
        if record is None:
            return None
        return FabricRequirements.from_dict(record.document or {})

    async def set_requirements(self, requirements: FabricRequirements) -> None:
        document = json.loads(json.dumps(requirements.to_dict()))
        record = await self.db.get(RequirementsDocument, REQUIREMENTS_DOCUMENT_ID)
        if record is None:
            record = RequirementsDocument(id=REQUIREMENTS_DOCUMENT_ID)
            self.db.add(record)
        record.document = document
        await self.db.commit()

    async def delete_profile(
        self, version: str, profile_id: str, force: bool,
    ) -> None:
        record = await self._get_profile_record(version, profile_id)
        if record is None:
            raise ResourceNotFoundError(
                "Profile", profile_id,
                ErrorContext(version_id=version, profile_id=profile_id),
            )
        result = await self.db.execute(
            select(ContainerRecord).where(ContainerRecord.version_id == version),
        )
        rows = list(result.scalars().all())
        assigned = containers_for_profile(
            [row.to_domain() for row in rows], profile_id, version,
        )
        if assigned and not force:
            raise ProfileInUseError(profile_id, container_ids(assigned))
        for row in rows:
            if profile_id in (row.profile_ids or []):
                row.profile_ids = [p for p in row.profile_ids if p != profile_id]
        await self.db.delete(record)
        await self.db.commit()
        logger.info(
            f"Profile {profile_id} removed from {len(assigned)} container(s)",
            extra={"version_id": version, "profile_id": profile_id},
        )

    async def get_overlay_profile(self, profile: Profile) -> Profile:
        siblings = {p.id: p for p in await self.get_profiles(profile.version)}
        return derive_overlay(profile, siblings.get)
