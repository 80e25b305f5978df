"""Ordinal scales shared by every matcher."""

from __future__ import annotations

import math
from typing import Literal

SkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]
InterestLevel = Literal["casual", "moderate", "passionate", "professional"]
Importance = Literal["nice-to-have", "preferred", "important", "critical"]
EducationLevel = Literal["high-school", "associate", "bachelor", "master", "phd"]
WorkMode = Literal["remote", "on-site", "hybrid"]

SKILL_LEVELS: dict[str, int] = {
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
    "expert": 4,
}

INTEREST_LEVELS: dict[str, int] = {
    "casual": 1,
    "moderate": 2,
    "passionate": 3,
    "professional": 4,
}

IMPORTANCE_LEVELS: dict[str, int] = {
    "nice-to-have": 1,
    "preferred": 2,
    "important": 3,
    "critical": 4,
}

# Index position is rank.
EDUCATION_LEVELS: tuple[str, ...] = ("high-school", "associate", "bachelor", "master", "phd")

# Lower bound in years for each band, highest first.
EXPERIENCE_BANDS: tuple[tuple[str, float], ...] = (
    ("executive", 10.0),
    ("senior", 5.0),
    ("mid-level", 2.0),
    ("entry-level", 0.0),
)

EXPERIENCE_LEVEL_MIN_YEARS: dict[str, float | None] = {
    "entry-level": 0.0,
    "mid-level": 2.0,
    "senior": 5.0,
    "executive": 10.0,
    "any": None,
}

STRONG_SKILL_LEVEL = SKILL_LEVELS["intermediate"]
MAX_INTEREST_LEVEL = max(INTEREST_LEVELS.values())
MAX_IMPORTANCE = max(IMPORTANCE_LEVELS.values())


def _normalize(value: str | None) -> str:
    return value.strip().lower() if value else ""


def skill_level_ordinal(level: str | None) -> int:
    return SKILL_LEVELS.get(_normalize(level), 0)


def interest_level_ordinal(level: str | None) -> int:
    return INTEREST_LEVELS.get(_normalize(level), 0)


def importance_ordinal(importance: str | None, default: int) -> int:
    """Map an importance label, falling back to ``default`` when missing or unknown."""
    return IMPORTANCE_LEVELS.get(_normalize(importance), default)


def education_rank(degree: str | None) -> int:
    """Rank on the education ladder, -1 for unknown labels such as ``any``."""
    try:
        return EDUCATION_LEVELS.index(_normalize(degree))
    except ValueError:
        return -1


def experience_band(years: float) -> str:
    for band, lower_bound in EXPERIENCE_BANDS:
        if years >= lower_bound:
            return band
    return EXPERIENCE_BANDS[-1][0]


def round_half_up(value: float) -> int:
    """Round halves upward (2.5 -> 3), unlike the builtin ``round``."""
    if math.isnan(value):
        return 0
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(max(value, low), high)
