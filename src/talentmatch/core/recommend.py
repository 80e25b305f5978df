"""Ranked recommendation lists over externally supplied candidate pools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field

from ..schemas import Employee, Opportunity, Organization
from .matchers.experience import ExperienceMatcher
from .scales import experience_band
from .scoring import MatchingEngine, MatchScoreResult

Anchor = Union[Employee, Opportunity, Organization]
RecommendationSubject = Union[Employee, Opportunity, Organization]


class RecommendationFilters(BaseModel):
    """Optional narrowing applied to a candidate pool."""

    min_match_score: float | None = None
    type: str | None = None
    category: str | None = None
    work_mode: str | None = None
    experience_level: str | None = None
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


@dataclass(slots=True)
class RecommendationEntry:
    """A scored pool member, built per request."""

    subject: RecommendationSubject
    score: MatchScoreResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject": self.subject.model_dump(mode="json", by_alias=True),
            "score": self.score.to_dict(),
        }


class Recommender:
    """Score, filter, sort and truncate a candidate pool for one anchor."""

    DEFAULT_LIMIT = 10
    SEARCH_WINDOW = 50

    def __init__(
        self,
        engine: MatchingEngine,
        *,
        default_limit: int | None = None,
    ) -> None:
        self._engine = engine
        self._default_limit = self.DEFAULT_LIMIT if default_limit is None else default_limit
        self._logger = structlog.get_logger(__name__)

    @property
    def engine(self) -> MatchingEngine:
        return self._engine

    def recommend(
        self,
        anchor: Anchor,
        pool: Iterable[RecommendationSubject],
        *,
        limit: int | None = None,
        filters: RecommendationFilters | None = None,
        as_of: Any | None = None,
    ) -> list[RecommendationEntry]:
        filters = filters or RecommendationFilters()
        limit = self._default_limit if limit is None else limit

        scored = self._score_pool(anchor, pool, filters, as_of)
        relevant = [entry for entry in scored if self._is_relevant(entry.score, filters)]
        ranked = self._rank(relevant)[: max(limit, 0)]

        self._logger.info(
            "recommend.completed",
            preset=self._engine.preset.name,
            anchor_id=anchor.id,
            scored=len(scored),
            relevant=len(relevant),
            returned=len(ranked),
        )
        return ranked

    def search(
        self,
        anchor: Anchor,
        pool: Iterable[RecommendationSubject],
        *,
        filters: RecommendationFilters | None = None,
        as_of: Any | None = None,
    ) -> list[RecommendationEntry]:
        """Return every filtered pool member; only the top relevant ones keep scores."""
        filters = filters or RecommendationFilters()
        scored = self._score_pool(anchor, pool, filters, as_of)
        relevant = self._rank(
            [entry for entry in scored if self._is_relevant(entry.score, filters)]
        )[: self.SEARCH_WINDOW]
        kept = {id(entry) for entry in relevant}

        results = [
            entry
            if id(entry) in kept
            else RecommendationEntry(
                subject=entry.subject,
                score=MatchScoreResult.empty(self._engine.preset.name),
            )
            for entry in scored
        ]
        return self._rank(results)

    def _score_pool(
        self,
        anchor: Anchor,
        pool: Iterable[RecommendationSubject],
        filters: RecommendationFilters,
        as_of: Any | None,
    ) -> list[RecommendationEntry]:
        entries: list[RecommendationEntry] = []
        requires_organization = self._engine.preset.requires_organization
        for candidate in pool:
            if not self._passes_filters(candidate, filters, as_of):
                continue
            if (
                requires_organization
                and isinstance(candidate, Opportunity)
                and candidate.organization is None
            ):
                continue
            if isinstance(anchor, Employee):
                score = self._engine.score(anchor, candidate, as_of=as_of)
            elif isinstance(candidate, Employee):
                score = self._engine.score(candidate, anchor, as_of=as_of)
            else:
                raise TypeError(
                    f"Cannot pair {type(anchor).__name__} with {type(candidate).__name__}"
                )
            entries.append(RecommendationEntry(subject=candidate, score=score))
        return entries

    def _is_relevant(self, score: MatchScoreResult, filters: RecommendationFilters) -> bool:
        cutoff = self._engine.preset.relevance_cutoff
        if cutoff is not None and score.overall <= cutoff:
            return False
        minimum = filters.min_match_score if filters.min_match_score is not None else 0
        return score.overall >= minimum

    def _passes_filters(
        self,
        candidate: RecommendationSubject,
        filters: RecommendationFilters,
        as_of: Any | None,
    ) -> bool:
        if isinstance(candidate, Opportunity):
            return self._opportunity_matches(candidate, filters)
        if isinstance(candidate, Employee):
            return self._employee_matches(candidate, filters, as_of)
        return True

    @staticmethod
    def _opportunity_matches(opportunity: Opportunity, filters: RecommendationFilters) -> bool:
        if filters.type and opportunity.type != filters.type:
            return False
        if filters.category and opportunity.category != filters.category:
            return False
        if filters.work_mode and opportunity.work_mode != filters.work_mode:
            return False
        return True

    def _employee_matches(
        self,
        employee: Employee,
        filters: RecommendationFilters,
        as_of: Any | None,
    ) -> bool:
        if filters.experience_level and filters.experience_level != "any":
            years = self._experience.total_years(employee.experience, as_of)
            if experience_band(years) != filters.experience_level:
                return False
        if filters.skills and not _any_name(filters.skills, (s.name for s in employee.skills)):
            return False
        if filters.interests and not _any_name(
            filters.interests, (i.name for i in employee.interests)
        ):
            return False
        return True

    @property
    def _experience(self) -> ExperienceMatcher:
        return self._engine.experience_matcher

    def _rank(self, entries: Sequence[RecommendationEntry]) -> list[RecommendationEntry]:
        parse = self._experience.parse_date

        def sort_key(entry: RecommendationEntry) -> tuple[int, float]:
            created = parse(getattr(entry.subject, "created_at", None))
            recency = created.timestamp() if created is not None else float("-inf")
            return (-entry.score.overall, -recency)

        return sorted(entries, key=sort_key)


def _any_name(wanted: Iterable[str], names: Iterable[str]) -> bool:
    available = {name.strip().lower() for name in names if name}
    return any(item.strip().lower() in available for item in wanted if item)
