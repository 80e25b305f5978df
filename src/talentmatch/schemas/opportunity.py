"""Organization and opportunity records supplied by the data layer."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from .profile import RECORD_CONFIG, Location, coerce_date_string


class RequiredSkill(BaseModel):
    """Skill requested by an organization or opportunity."""

    name: str | None = None
    level: str | None = None
    category: str | None = None
    is_required: bool = Field(
        default=False,
        validation_alias=AliasChoices("isRequired", "is_required", "required"),
    )

    model_config = RECORD_CONFIG


class PreferredInterest(BaseModel):
    """Interest an organization looks for; importance resolved by the engine."""

    name: str | None = None
    category: str | None = None
    importance: str | None = None

    model_config = RECORD_CONFIG


class CandidatePreferences(BaseModel):
    experience_level: str | None = "any"
    education_level: str | None = "any"
    work_mode: list[str] = Field(default_factory=list)

    model_config = RECORD_CONFIG


class OrganizationRequirements(BaseModel):
    preferred_skills: list[RequiredSkill] = Field(default_factory=list)
    preferred_interests: list[PreferredInterest] = Field(default_factory=list)
    candidate_preferences: CandidatePreferences = Field(
        default_factory=CandidatePreferences
    )

    model_config = RECORD_CONFIG


class Organization(BaseModel):
    """Read-only organization profile view."""

    id: str | None = Field(default=None, validation_alias=AliasChoices("_id", "id"))
    name: str | None = None
    industry: str | None = None
    location: Location | None = None
    requirements: OrganizationRequirements = Field(
        default_factory=OrganizationRequirements
    )
    created_at: str | None = None

    model_config = RECORD_CONFIG

    @field_validator("created_at", mode="before")
    @classmethod
    def coerce_created_at(cls, value: Any) -> Any:
        return coerce_date_string(value)

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: Any) -> Any:
        return str(value) if value is not None else None


class EducationRequirement(BaseModel):
    level: str | None = None
    field: str | None = None

    model_config = RECORD_CONFIG


class ExperienceRequirement(BaseModel):
    min_years: float | None = 0
    max_years: float | None = None

    model_config = RECORD_CONFIG


class OpportunityRequirements(BaseModel):
    skills: list[RequiredSkill] = Field(default_factory=list)
    education: list[EducationRequirement] = Field(default_factory=list)
    experience: ExperienceRequirement = Field(default_factory=ExperienceRequirement)

    model_config = RECORD_CONFIG


class OpportunityLocation(Location):
    """Opportunity site; ``work_mode`` is the stored ``type`` field."""

    work_mode: str | None = Field(
        default=None,
        validation_alias=AliasChoices("type", "workMode", "work_mode"),
    )


class Opportunity(BaseModel):
    """Read-only opportunity view, optionally with its organization populated."""

    id: str | None = Field(default=None, validation_alias=AliasChoices("_id", "id"))
    title: str | None = None
    type: str | None = None
    category: str | None = None
    organization: Organization | None = None
    requirements: OpportunityRequirements = Field(
        default_factory=OpportunityRequirements
    )
    location: OpportunityLocation | None = None
    status: str = "active"
    visibility: str = "public"
    created_at: str | None = None

    model_config = RECORD_CONFIG

    @field_validator("organization", mode="before")
    @classmethod
    def expand_reference(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"id": value}
        return value

    @field_validator("created_at", mode="before")
    @classmethod
    def coerce_created_at(cls, value: Any) -> Any:
        return coerce_date_string(value)

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: Any) -> Any:
        return str(value) if value is not None else None

    @property
    def work_mode(self) -> str | None:
        return self.location.work_mode if self.location else None
