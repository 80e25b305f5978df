"""Pydantic schema definitions for the records the matching engine consumes."""

from __future__ import annotations

from .application import Application
from .opportunity import (
    CandidatePreferences,
    EducationRequirement,
    ExperienceRequirement,
    Opportunity,
    OpportunityLocation,
    OpportunityRequirements,
    Organization,
    OrganizationRequirements,
    PreferredInterest,
    RequiredSkill,
)
from .profile import (
    Coordinates,
    EducationEntry,
    Employee,
    EmployeePreferences,
    ExperienceEntry,
    Interest,
    Location,
    Skill,
)

__all__ = [
    "Application",
    "CandidatePreferences",
    "Coordinates",
    "EducationEntry",
    "EducationRequirement",
    "Employee",
    "EmployeePreferences",
    "ExperienceEntry",
    "ExperienceRequirement",
    "Interest",
    "Location",
    "Opportunity",
    "OpportunityLocation",
    "OpportunityRequirements",
    "Organization",
    "OrganizationRequirements",
    "PreferredInterest",
    "RequiredSkill",
    "Skill",
]
