"""Component matchers used by the matching engine."""

from .experience import ExperienceMatchConfig, ExperienceMatcher
from .interests import InterestMatchConfig, InterestMatcher
from .location import LocationMatchConfig, LocationMatcher
from .skills import MatchMode, SkillMatchConfig, SkillMatcher

__all__ = [
    "ExperienceMatchConfig",
    "ExperienceMatcher",
    "InterestMatchConfig",
    "InterestMatcher",
    "LocationMatchConfig",
    "LocationMatcher",
    "MatchMode",
    "SkillMatchConfig",
    "SkillMatcher",
]
