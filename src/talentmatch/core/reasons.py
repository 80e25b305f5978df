"""Human-readable match explanations."""

from __future__ import annotations

from typing import Literal

from ..schemas import Employee
from .matchers import InterestMatcher, LocationMatcher, SkillMatcher
from .target import MatchTarget

ReasonStyle = Literal["itemized", "banded"]

DEFAULT_BANDS: tuple[tuple[int, str], ...] = (
    (80, "Excellent match"),
    (60, "Good match"),
    (40, "Moderate match"),
)
FALLBACK_BAND = "Basic match"


class ReasonGenerator:
    """Build an ordered reason list: skills, then interests, then location."""

    def __init__(
        self,
        *,
        skill_matcher: SkillMatcher,
        interest_matcher: InterestMatcher,
        location_matcher: LocationMatcher,
        bands: tuple[tuple[int, str], ...] = DEFAULT_BANDS,
    ) -> None:
        self._skills = skill_matcher
        self._interests = interest_matcher
        self._location = location_matcher
        self._bands = bands

    def generate(
        self,
        employee: Employee,
        target: MatchTarget,
        *,
        overall: int,
        style: ReasonStyle,
    ) -> list[str]:
        if style == "banded":
            return self._banded(employee, target, overall)
        return self._itemized(employee, target)

    def band(self, overall: int) -> str:
        for threshold, label in self._bands:
            if overall >= threshold:
                return label
        return FALLBACK_BAND

    def _itemized(self, employee: Employee, target: MatchTarget) -> list[str]:
        reasons: list[str] = []

        strong = self._skills.strong_matches(employee.skills, target.required_skills)
        if strong:
            reasons.append(f"Strong skills in: {', '.join(s.name for s in strong)}")

        shared = self._interests.shared(employee.interests, target.preferred_interests)
        if shared:
            reasons.append(f"Shared interests: {', '.join(i.name for i in shared)}")

        if self._location.same_city(employee.location, target.location):
            reasons.append(f"Same location ({employee.location.city})")
        elif target.work_mode == "remote":
            reasons.append("Remote work opportunity")

        return reasons

    def _banded(self, employee: Employee, target: MatchTarget, overall: int) -> list[str]:
        reasons = [self.band(overall)]

        matched = self._skills.matched_requirements(employee.skills, target.required_skills)
        if matched:
            reasons.append(f"{len(matched)} matching skills")

        if target.work_mode == "remote" and "remote" in employee.preferences.work_mode:
            reasons.append("Remote work preference match")

        return reasons
