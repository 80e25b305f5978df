"""Matching engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .analytics import EmployeeAnalytics, MatchAnalytics, OrganizationAnalytics
from .matchers import (
    ExperienceMatchConfig,
    ExperienceMatcher,
    InterestMatchConfig,
    InterestMatcher,
    LocationMatchConfig,
    LocationMatcher,
    SkillMatchConfig,
    SkillMatcher,
)
from .reasons import ReasonGenerator
from .recommend import RecommendationEntry, RecommendationFilters, Recommender
from .scoring import (
    PRESETS,
    PROFILE_WEIGHTED,
    REQUIREMENT_WEIGHTED,
    MatchingEngine,
    MatchScoreResult,
    ScoringPreset,
    get_preset,
)
from .target import MatchTarget

__all__ = [
    "EmployeeAnalytics",
    "ExperienceMatchConfig",
    "ExperienceMatcher",
    "InterestMatchConfig",
    "InterestMatcher",
    "LocationMatchConfig",
    "LocationMatcher",
    "MatchAnalytics",
    "MatchScoreResult",
    "MatchTarget",
    "MatchingEngine",
    "OrganizationAnalytics",
    "PRESETS",
    "PROFILE_WEIGHTED",
    "REQUIREMENT_WEIGHTED",
    "ReasonGenerator",
    "RecommendationEntry",
    "RecommendationFilters",
    "Recommender",
    "ScoringPreset",
    "SkillMatchConfig",
    "SkillMatcher",
    "get_preset",
]
