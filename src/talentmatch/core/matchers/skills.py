"""Skill set matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from rapidfuzz import fuzz

from ...schemas import RequiredSkill, Skill
from ..scales import STRONG_SKILL_LEVEL, skill_level_ordinal

MatchMode = Literal["exact", "fuzzy", "similarity"]


@dataclass
class SkillMatchConfig:
    """Configuration for skill matching.

    ``exact`` compares names case-insensitively, ``fuzzy`` also accepts
    substring containment in either direction and ``similarity`` accepts
    names whose token set ratio reaches ``min_similarity``.
    """

    mode: MatchMode = "exact"
    required_weight: float = 2.0
    optional_weight: float = 1.0
    min_similarity: float = 85.0


class SkillMatcher:
    """Score an employee's skills against requested skills."""

    method = "skills"

    def __init__(self, *, config: SkillMatchConfig | None = None) -> None:
        self._config = config or SkillMatchConfig()

    @property
    def mode(self) -> MatchMode:
        return self._config.mode

    def score(self, possessed: Sequence[Skill], required: Sequence[RequiredSkill]) -> float:
        """Level-weighted score in [0, 100]; 0 when nothing is requested."""
        if not required:
            return 0.0

        total_score = 0.0
        max_possible_score = 0.0
        for requirement in required:
            weight = (
                self._config.required_weight
                if requirement.is_required
                else self._config.optional_weight
            )
            skill = self.find(possessed, requirement.name)
            if skill is None:
                # Missing mandatory skills only widen the denominator.
                if requirement.is_required:
                    max_possible_score += self._config.required_weight
                continue
            total_score += self._level_ratio(skill, requirement) * weight
            max_possible_score += weight

        if max_possible_score <= 0:
            return 0.0
        return total_score / max_possible_score * 100

    def coverage(self, possessed: Sequence[Skill], required: Sequence[RequiredSkill]) -> float:
        """Fraction of requested skill names present, ignoring levels."""
        if not required:
            return 0.0
        return len(self.matched_requirements(possessed, required)) / len(required)

    def matched_requirements(
        self,
        possessed: Sequence[Skill],
        required: Sequence[RequiredSkill],
    ) -> list[RequiredSkill]:
        return [req for req in required if self.find(possessed, req.name) is not None]

    def strong_matches(
        self,
        possessed: Sequence[Skill],
        required: Sequence[RequiredSkill],
    ) -> list[Skill]:
        """Possessed skills at intermediate level or above that match a request."""
        return [
            skill
            for skill in possessed
            if skill_level_ordinal(skill.level) >= STRONG_SKILL_LEVEL
            and any(self.names_match(skill.name, req.name) for req in required)
        ]

    def find(self, possessed: Sequence[Skill], name: str | None) -> Skill | None:
        for skill in possessed:
            if self.names_match(skill.name, name):
                return skill
        return None

    def names_match(self, left: str | None, right: str | None) -> bool:
        left_key = (left or "").strip().lower()
        right_key = (right or "").strip().lower()
        if not left_key or not right_key:
            return False
        if left_key == right_key:
            return True
        if self._config.mode == "fuzzy":
            return left_key in right_key or right_key in left_key
        if self._config.mode == "similarity":
            return fuzz.token_set_ratio(left_key, right_key) >= self._config.min_similarity
        return False

    @staticmethod
    def _level_ratio(skill: Skill, requirement: RequiredSkill) -> float:
        possessed_level = skill_level_ordinal(skill.level)
        required_level = skill_level_ordinal(requirement.level)
        if possessed_level >= required_level:
            return 1.0
        if required_level == 0:
            return 0.0
        return possessed_level / required_level
