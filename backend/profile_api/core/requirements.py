"""Requirements — declarative deployment constraints keyed by profile id.

Invariants:
    - FabricRequirements holds at most one ProfileRequirements per profile id
    - get_or_create_profile_requirement() mutates the container when the record is missing
    - add_or_update_profile_requirements() fully replaces the named record, others untouched

Design Decisions:
    - Mutable dataclass for the container: the read-then-write flow hands the same
      object back to the directory (ADR: two separate calls, last write wins)
"""

from dataclasses import dataclass, field, asdict


@dataclass
class ProfileRequirements:
    """Deployment constraints for one profile."""
    profile: str
    minimum_instances: int | None = None
    maximum_instances: int | None = None
    maximum_instances_per_host: int | None = None
    dependent_profiles: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileRequirements":
        return cls(
            profile=data["profile"],
            minimum_instances=data.get("minimum_instances"),
            maximum_instances=data.get("maximum_instances"),
            maximum_instances_per_host=data.get("maximum_instances_per_host"),
            dependent_profiles=list(data.get("dependent_profiles") or []),
        )


@dataclass
class FabricRequirements:
    """The requirements container shared by every profile."""
    profile_requirements: list[ProfileRequirements] = field(default_factory=list)

    def find_profile_requirements(self, profile_id: str) -> ProfileRequirements | None:
        for requirement in self.profile_requirements:
            if requirement.profile == profile_id:
                return requirement
        return None

    def get_or_create_profile_requirement(self, profile_id: str) -> ProfileRequirements:
        requirement = self.find_profile_requirements(profile_id)
        if requirement is None:
            requirement = ProfileRequirements(profile=profile_id)
            self.profile_requirements.append(requirement)
        return requirement

    def add_or_update_profile_requirements(self, requirement: ProfileRequirements) -> None:
        self.profile_requirements = [
            r for r in self.profile_requirements if r.profile != requirement.profile
        ]
        self.profile_requirements.append(requirement)

    def to_dict(self) -> dict:
        return {
            "profile_requirements": [r.to_dict() for r in self.profile_requirements],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FabricRequirements":
        return cls(profile_requirements=[
            ProfileRequirements.from_dict(r)
            for r in data.get("profile_requirements", [])
        ])
