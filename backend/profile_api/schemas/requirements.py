"""Requirements Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Instance counts are non-negative
    - minimum_instances <= maximum_instances when both are set
    - dependent_profiles entries are stripped and non-empty

Design Decisions:
    - profile is optional on write: the addressed profile fills it in
    - to_domain()/from_domain() keep core dataclasses free of pydantic
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from profile_api.core.requirements import ProfileRequirements


class ProfileRequirementsPayload(BaseModel):
    """Requirement record as read and written over HTTP."""
    profile: str | None = Field(None, min_length=1, max_length=255)
    minimum_instances: int | None = Field(None, ge=0)
    maximum_instances: int | None = Field(None, ge=0)
    maximum_instances_per_host: int | None = Field(None, ge=0)
    dependent_profiles: list[str] = Field(default_factory=list)

    @field_validator("dependent_profiles")
    @classmethod
    def strip_dependent_profiles(cls, v: list[str]) -> list[str]:
        stripped = [p.strip() for p in v]
        if any(not p for p in stripped):
            raise ValueError("dependent_profiles cannot contain empty ids")
        return stripped

    @model_validator(mode="after")
    def check_instance_bounds(self) -> "ProfileRequirementsPayload":
        low, high = self.minimum_instances, self.maximum_instances
        if low is not None and high is not None and low > high:
            raise ValueError("minimum_instances cannot exceed maximum_instances")
        return self

    def to_domain(self, profile_id: str) -> ProfileRequirements:
        return ProfileRequirements(
            profile=profile_id,
            minimum_instances=self.minimum_instances,
            maximum_instances=self.maximum_instances,
            maximum_instances_per_host=self.maximum_instances_per_host,
            dependent_profiles=list(self.dependent_profiles),
        )

    @classmethod
    def from_domain(cls, record: ProfileRequirements) -> "ProfileRequirementsPayload":
        return cls(**record.to_dict())
