"""Aggregate match statistics over historical applications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import structlog

from ..schemas import Application, Employee
from .scales import round_half_up
from .scoring import MatchingEngine


@dataclass(slots=True)
class OrganizationAnalytics:
    total_opportunities: int
    total_applications: int
    average_match_score: int
    match_rate: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalOpportunities": self.total_opportunities,
            "totalApplications": self.total_applications,
            "averageMatchScore": self.average_match_score,
            "matchRate": self.match_rate,
        }


@dataclass(slots=True)
class EmployeeAnalytics:
    total_applications: int
    accepted_applications: int
    average_match_score: int
    success_rate: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalApplications": self.total_applications,
            "acceptedApplications": self.accepted_applications,
            "averageMatchScore": self.average_match_score,
            "successRate": self.success_rate,
        }


def _percentage(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


class MatchAnalytics:
    """Score historical pairs with the same engine used for recommendations."""

    def __init__(self, engine: MatchingEngine) -> None:
        self._engine = engine
        self._logger = structlog.get_logger(__name__)

    def average_score(
        self,
        pairs: Iterable[tuple[Any, Any]],
        *,
        as_of: Any | None = None,
    ) -> float:
        """Mean overall score of (anchor, candidate) pairs in either orientation."""
        scores = [self._score_pair(anchor, candidate, as_of) for anchor, candidate in pairs]
        if not scores:
            return 0.0
        return sum(scores) / len(scores)

    def organization_summary(
        self,
        *,
        opportunity_count: int,
        applications: Sequence[Application],
        as_of: Any | None = None,
    ) -> OrganizationAnalytics:
        active = [app for app in applications if app.is_active]
        average = self.average_score(_application_pairs(active), as_of=as_of)
        summary = OrganizationAnalytics(
            total_opportunities=opportunity_count,
            total_applications=len(active),
            average_match_score=round_half_up(average),
            match_rate=_percentage(len(active), opportunity_count),
        )
        self._logger.info("analytics.organization", **summary.to_dict())
        return summary

    def employee_summary(
        self,
        employee: Employee,
        applications: Sequence[Application],
        *,
        as_of: Any | None = None,
    ) -> EmployeeAnalytics:
        active = [app for app in applications if app.is_active]
        pairs = [
            (employee, app.opportunity) for app in active if app.opportunity is not None
        ]
        accepted = sum(1 for app in active if app.is_accepted)
        average = self.average_score(pairs, as_of=as_of)
        summary = EmployeeAnalytics(
            total_applications=len(active),
            accepted_applications=accepted,
            average_match_score=round_half_up(average),
            success_rate=_percentage(accepted, len(active)),
        )
        self._logger.info("analytics.employee", **summary.to_dict())
        return summary

    def _score_pair(self, anchor: Any, candidate: Any, as_of: Any | None) -> int:
        if isinstance(anchor, Employee):
            employee, target = anchor, candidate
        elif isinstance(candidate, Employee):
            employee, target = candidate, anchor
        else:
            raise TypeError("Each analytics pair must include an Employee")
        return self._engine.score(employee, target, as_of=as_of).overall


def _application_pairs(applications: Iterable[Application]) -> list[tuple[Any, Any]]:
    return [
        (app.opportunity, app.employee)
        for app in applications
        if app.opportunity is not None and app.employee is not None
    ]
