"""Normalized view of the requirements side of a match."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..schemas import (
    Location,
    Opportunity,
    Organization,
    PreferredInterest,
    RequiredSkill,
)
from .scales import EXPERIENCE_LEVEL_MIN_YEARS

# Organizations have no single site, so they are matched as hybrid workplaces.
ORGANIZATION_WORK_MODE = "hybrid"

Subject = Union[Opportunity, Organization]


@dataclass(frozen=True, slots=True)
class MatchTarget:
    """What an employee is scored against.

    ``location`` is the organization's location, ``site_location`` the
    opportunity's own site; the two scoring presets read different ones.
    """

    subject: Subject
    required_skills: tuple[RequiredSkill, ...] = ()
    preferred_interests: tuple[PreferredInterest, ...] = ()
    location: Location | None = None
    site_location: Location | None = None
    work_mode: str | None = None
    industry: str | None = None
    min_years: float | None = None
    education_level: str | None = None
    created_at: str | None = None
    subject_id: str | None = None

    @classmethod
    def from_opportunity(cls, opportunity: Opportunity) -> MatchTarget:
        organization = opportunity.organization
        requirements = opportunity.requirements
        education_level = (
            requirements.education[0].level if requirements.education else None
        )
        return cls(
            subject=opportunity,
            required_skills=tuple(requirements.skills),
            preferred_interests=tuple(
                organization.requirements.preferred_interests if organization else ()
            ),
            location=organization.location if organization else None,
            site_location=opportunity.location,
            work_mode=opportunity.work_mode,
            industry=organization.industry if organization else None,
            min_years=requirements.experience.min_years,
            education_level=education_level,
            created_at=opportunity.created_at,
            subject_id=opportunity.id,
        )

    @classmethod
    def from_organization(cls, organization: Organization) -> MatchTarget:
        requirements = organization.requirements
        preferences = requirements.candidate_preferences
        experience_level = (preferences.experience_level or "any").strip().lower()
        return cls(
            subject=organization,
            required_skills=tuple(requirements.preferred_skills),
            preferred_interests=tuple(requirements.preferred_interests),
            location=organization.location,
            site_location=organization.location,
            work_mode=ORGANIZATION_WORK_MODE,
            industry=organization.industry,
            min_years=EXPERIENCE_LEVEL_MIN_YEARS.get(experience_level),
            education_level=preferences.education_level,
            created_at=organization.created_at,
            subject_id=organization.id,
        )

    @classmethod
    def build(cls, subject: Subject | MatchTarget) -> MatchTarget:
        if isinstance(subject, MatchTarget):
            return subject
        if isinstance(subject, Opportunity):
            return cls.from_opportunity(subject)
        if isinstance(subject, Organization):
            return cls.from_organization(subject)
        raise TypeError(f"Cannot match against {type(subject).__name__}")
