"""Weighted aggregation of component scores."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Literal, Mapping

import structlog

from ..schemas import Employee
from .matchers import (
    ExperienceMatcher,
    InterestMatchConfig,
    InterestMatcher,
    LocationMatcher,
    MatchMode,
    SkillMatchConfig,
    SkillMatcher,
)
from .reasons import ReasonGenerator, ReasonStyle
from .scales import IMPORTANCE_LEVELS, clamp_score, round_half_up
from .target import MatchTarget, Subject

Accumulation = Literal["weighted_average", "points"]

ACCUMULATION_COMPONENTS: dict[str, frozenset[str]] = {
    "weighted_average": frozenset({"skills", "interests", "location"}),
    "points": frozenset(
        {"skills", "interests", "location", "experience", "education", "industry"}
    ),
}


@dataclass(frozen=True, slots=True)
class ScoringPreset:
    """Named weighting scheme.

    ``weighted_average`` multiplies 0-100 component scores by fractional
    weights. ``points`` adds each component's earned share of its weight
    (skills up to 40 points, ...) and divides by the total weight.
    ``requires_organization`` leaves opportunities without a populated
    organization out of recommendations.
    """

    name: str
    accumulation: Accumulation
    weights: Mapping[str, float]
    skill_match_mode: MatchMode
    reason_style: ReasonStyle
    level_weighted_skills: bool = True
    relevance_cutoff: float | None = None
    default_importance: int = IMPORTANCE_LEVELS["preferred"]
    requires_organization: bool = False

    @property
    def components(self) -> frozenset[str]:
        """Components a weight may be assigned to under this accumulation."""
        return ACCUMULATION_COMPONENTS[self.accumulation]


PROFILE_WEIGHTED = ScoringPreset(
    name="profile",
    accumulation="weighted_average",
    weights={"skills": 0.5, "interests": 0.3, "location": 0.2},
    skill_match_mode="exact",
    reason_style="itemized",
    relevance_cutoff=30,
    requires_organization=True,
)

REQUIREMENT_WEIGHTED = ScoringPreset(
    name="requirement",
    accumulation="points",
    weights={
        "skills": 40,
        "experience": 25,
        "location": 15,
        "education": 10,
        "industry": 10,
    },
    skill_match_mode="fuzzy",
    reason_style="banded",
    level_weighted_skills=False,
)

PRESETS: dict[str, ScoringPreset] = {
    preset.name: preset for preset in (PROFILE_WEIGHTED, REQUIREMENT_WEIGHTED)
}


def get_preset(name: str) -> ScoringPreset:
    try:
        return PRESETS[name]
    except KeyError as exc:
        raise KeyError(f"Unknown scoring preset: {name!r}") from exc


@dataclass(slots=True)
class MatchScoreResult:
    """Scores for one employee/target pair, all integers in [0, 100]."""

    overall: int
    skills: int
    interests: int
    location: int
    experience: int | None = None
    education: int | None = None
    industry: int | None = None
    reasons: list[str] = field(default_factory=list)
    preset: str = PROFILE_WEIGHTED.name

    @classmethod
    def empty(cls, preset: str) -> MatchScoreResult:
        return cls(overall=0, skills=0, interests=0, location=0, preset=preset)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class MatchingEngine:
    """Stateless scorer combining the component matchers under one preset."""

    def __init__(
        self,
        *,
        preset: ScoringPreset = PROFILE_WEIGHTED,
        weights: Mapping[str, float] | None = None,
        skill_matcher: SkillMatcher | None = None,
        interest_matcher: InterestMatcher | None = None,
        location_matcher: LocationMatcher | None = None,
        experience_matcher: ExperienceMatcher | None = None,
    ) -> None:
        if weights:
            unknown = sorted(set(weights) - preset.components)
            if unknown:
                raise ValueError(
                    f"Unknown weight components for preset {preset.name!r}: {unknown}"
                )
            preset = replace(preset, weights={**preset.weights, **weights})
        self._preset = preset
        self._skills = skill_matcher or SkillMatcher(
            config=SkillMatchConfig(mode=preset.skill_match_mode)
        )
        self._interests = interest_matcher or InterestMatcher(
            config=InterestMatchConfig(default_importance=preset.default_importance)
        )
        self._location = location_matcher or LocationMatcher()
        self._experience = experience_matcher or ExperienceMatcher()
        self._reasons = ReasonGenerator(
            skill_matcher=self._skills,
            interest_matcher=self._interests,
            location_matcher=self._location,
        )
        self._logger = structlog.get_logger(__name__)

    @property
    def preset(self) -> ScoringPreset:
        return self._preset

    @property
    def experience_matcher(self) -> ExperienceMatcher:
        return self._experience

    def score(
        self,
        employee: Employee,
        target: Subject | MatchTarget,
        *,
        as_of: Any | None = None,
    ) -> MatchScoreResult:
        match_target = MatchTarget.build(target)
        if self._preset.accumulation == "points":
            result = self._score_points(employee, match_target, as_of)
        else:
            result = self._score_weighted_average(employee, match_target)

        self._logger.debug(
            "match.scored",
            preset=self._preset.name,
            employee_id=employee.id,
            subject_id=match_target.subject_id,
            overall=result.overall,
        )
        return result

    def _score_weighted_average(self, employee: Employee, target: MatchTarget) -> MatchScoreResult:
        components = {
            "skills": self._skill_score(employee, target),
            "interests": self._interests.score(employee.interests, target.preferred_interests),
            "location": float(
                self._location.score(employee.location, target.location, target.work_mode)
            ),
        }
        weighted = sum(
            components.get(name, 0.0) * weight
            for name, weight in self._preset.weights.items()
        )
        overall = round_half_up(clamp_score(weighted))
        return MatchScoreResult(
            overall=overall,
            skills=round_half_up(components["skills"]),
            interests=round_half_up(components["interests"]),
            location=round_half_up(components["location"]),
            reasons=self._reasons.generate(
                employee, target, overall=overall, style=self._preset.reason_style
            ),
            preset=self._preset.name,
        )

    def _score_points(
        self,
        employee: Employee,
        target: MatchTarget,
        as_of: Any | None,
    ) -> MatchScoreResult:
        weights = self._preset.weights
        shares = self._component_shares(employee, target, as_of)
        points = {name: shares.get(name, 0.0) * weight for name, weight in weights.items()}

        total_weight = sum(weights.values())
        overall_raw = sum(points.values()) / total_weight * 100 if total_weight > 0 else 0.0
        overall = round_half_up(clamp_score(overall_raw))

        def share_score(name: str) -> int:
            return round_half_up(clamp_score(shares.get(name, 0.0) * 100))

        return MatchScoreResult(
            overall=overall,
            skills=share_score("skills"),
            interests=share_score("interests"),
            location=share_score("location"),
            experience=share_score("experience"),
            education=share_score("education"),
            industry=share_score("industry"),
            reasons=self._reasons.generate(
                employee, target, overall=overall, style=self._preset.reason_style
            ),
            preset=self._preset.name,
        )

    def _component_shares(
        self,
        employee: Employee,
        target: MatchTarget,
        as_of: Any | None,
    ) -> dict[str, float]:
        """Fraction of each component's weight earned, each in [0, 1]."""
        experience = self._experience.experience_fraction(
            employee.experience, target.min_years, as_of
        )
        education = self._experience.education_met(employee.education, target.education_level)
        industries = employee.preferences.industries
        return {
            "skills": self._skill_score(employee, target) / 100,
            "experience": experience or 0.0,
            "location": self._location.site_fraction(
                employee.location,
                target.site_location,
                target.work_mode,
                employee.preferences.work_mode,
            ),
            "education": 1.0 if education else 0.0,
            "industry": 1.0 if target.industry and target.industry in industries else 0.0,
            "interests": self._interests.score(employee.interests, target.preferred_interests) / 100,
        }

    def _skill_score(self, employee: Employee, target: MatchTarget) -> float:
        if self._preset.level_weighted_skills:
            return self._skills.score(employee.skills, target.required_skills)
        return self._skills.coverage(employee.skills, target.required_skills) * 100
