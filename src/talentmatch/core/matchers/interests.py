"""Interest matching against organization preferences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...schemas import Interest, PreferredInterest
from ..scales import (
    IMPORTANCE_LEVELS,
    MAX_IMPORTANCE,
    MAX_INTEREST_LEVEL,
    importance_ordinal,
    interest_level_ordinal,
)


@dataclass
class InterestMatchConfig:
    """Configuration for interest matching."""

    default_importance: int = IMPORTANCE_LEVELS["preferred"]
    missing_penalty: float = 0.25
    match_on_category: bool = True


class InterestMatcher:
    """Score an employee's interests against preferred interests."""

    method = "interests"

    def __init__(self, *, config: InterestMatchConfig | None = None) -> None:
        self._config = config or InterestMatchConfig()

    @property
    def default_importance(self) -> int:
        return self._config.default_importance

    def score(
        self,
        possessed: Sequence[Interest],
        preferred: Sequence[PreferredInterest],
    ) -> float:
        """Importance-weighted score in [0, 100]; 0 when either side is empty."""
        if not possessed or not preferred:
            return 0.0

        total_score = 0.0
        max_possible_score = 0.0
        for preference in preferred:
            interest = self.find(possessed, preference)
            if interest is None:
                max_possible_score += self._config.missing_penalty
                continue
            importance = (
                importance_ordinal(preference.importance, self._config.default_importance)
                / MAX_IMPORTANCE
            )
            level = interest_level_ordinal(interest.level) / MAX_INTEREST_LEVEL
            total_score += level * importance
            max_possible_score += importance

        if max_possible_score <= 0:
            return 0.0
        return total_score / max_possible_score * 100

    def shared(
        self,
        possessed: Sequence[Interest],
        preferred: Sequence[PreferredInterest],
    ) -> list[Interest]:
        return [
            interest
            for interest in possessed
            if any(self.matches(interest, preference) for preference in preferred)
        ]

    def find(
        self,
        possessed: Sequence[Interest],
        preference: PreferredInterest,
    ) -> Interest | None:
        for interest in possessed:
            if self.matches(interest, preference):
                return interest
        return None

    def matches(self, interest: Interest, preference: PreferredInterest) -> bool:
        name = (interest.name or "").strip().lower()
        if name and name == (preference.name or "").strip().lower():
            return True
        if not self._config.match_on_category:
            return False
        return bool(interest.category) and interest.category == preference.category
