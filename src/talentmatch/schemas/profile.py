"""Employee-side records supplied by the profile store."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="ignore",
)


def coerce_date_string(value: Any) -> Any:
    """Keep date-like values as ISO strings; pendulum parses them later."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class Skill(BaseModel):
    """Skill held by an employee."""

    name: str
    level: str | None = "intermediate"
    category: str | None = None
    years_of_experience: float = 0

    model_config = RECORD_CONFIG


class Interest(BaseModel):
    """Interest held by an employee."""

    name: str
    category: str | None = None
    level: str | None = "moderate"

    model_config = RECORD_CONFIG


class Coordinates(BaseModel):
    latitude: float | None = None
    longitude: float | None = None

    model_config = RECORD_CONFIG


class Location(BaseModel):
    """Postal location of an employee or organization."""

    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    coordinates: Coordinates | None = None

    model_config = RECORD_CONFIG


class ExperienceEntry(BaseModel):
    """Employment history entry."""

    title: str = ""
    company: str = ""
    start_date: str | None = None
    end_date: str | None = None
    is_current: bool = False

    model_config = RECORD_CONFIG

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def coerce_dates(cls, value: Any) -> Any:
        return coerce_date_string(value)


class EducationEntry(BaseModel):
    """Education history entry."""

    degree: str | None = None
    field_of_study: str | None = None
    institution: str | None = None

    model_config = RECORD_CONFIG


class EmployeePreferences(BaseModel):
    """Job search preferences of an employee."""

    industries: list[str] = Field(default_factory=list)
    work_mode: list[str] = Field(default_factory=list)
    job_types: list[str] = Field(default_factory=list)

    model_config = RECORD_CONFIG


class Employee(BaseModel):
    """Read-only employee profile view."""

    id: str | None = Field(default=None, validation_alias=AliasChoices("_id", "id"))
    name: str | None = None
    location: Location | None = None
    skills: list[Skill] = Field(default_factory=list)
    interests: list[Interest] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    preferences: EmployeePreferences = Field(default_factory=EmployeePreferences)
    is_active: bool = True
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
