"""Experience tenure and education level matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

import pendulum
from pendulum.parsing.exceptions import ParserError

from ...schemas import EducationEntry, ExperienceEntry
from ..scales import EDUCATION_LEVELS, education_rank

SECONDS_PER_YEAR = 60 * 60 * 24 * 365


@dataclass
class ExperienceMatchConfig:
    """Configuration for experience and education matching."""

    baseline_education: str = EDUCATION_LEVELS[0]


class ExperienceMatcher:
    """Derive experience years and highest education, then check requirements.

    Overlapping roles are summed as-is, so concurrent positions overstate
    total years.
    """

    method = "experience"

    def __init__(
        self,
        *,
        config: ExperienceMatchConfig | None = None,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        self._config = config or ExperienceMatchConfig()
        self._now_provider = now_provider or pendulum.now

    def total_years(
        self,
        entries: Iterable[ExperienceEntry],
        as_of: Any | None = None,
    ) -> float:
        reference = self.resolve_as_of(as_of)
        return sum(self._years_for_entry(entry, reference) for entry in entries)

    def experience_fraction(
        self,
        entries: Iterable[ExperienceEntry],
        min_years: float | None,
        as_of: Any | None = None,
    ) -> float | None:
        """Share of the required tenure held, or None when nothing is required."""
        if not min_years or min_years <= 0:
            return None
        years = self.total_years(entries, as_of)
        if years >= min_years:
            return 1.0
        return years / min_years

    def highest_education(self, entries: Iterable[EducationEntry]) -> str:
        highest = self._config.baseline_education
        for entry in entries:
            if education_rank(entry.degree) > education_rank(highest):
                highest = (entry.degree or "").strip().lower()
        return highest

    def education_met(
        self,
        entries: Iterable[EducationEntry],
        required_level: str | None,
    ) -> bool | None:
        """Binary education check; None when no level is required."""
        if not required_level:
            return None
        return education_rank(self.highest_education(entries)) >= education_rank(
            required_level
        )

    def resolve_as_of(self, as_of: Any | None) -> pendulum.DateTime:
        default_now = self._now_provider()
        if as_of is None:
            return default_now
        if isinstance(as_of, pendulum.DateTime):
            return as_of
        parsed = self.parse_date(str(as_of), default=default_now)
        return parsed or default_now

    def _years_for_entry(self, entry: ExperienceEntry, as_of: pendulum.DateTime) -> float:
        start = self.parse_date(entry.start_date)
        if start is None:
            return 0.0
        end = as_of if entry.is_current else self.parse_date(entry.end_date, default=as_of)
        seconds = (end - start).total_seconds()
        return max(0.0, seconds / SECONDS_PER_YEAR)

    @staticmethod
    def parse_date(
        value: str | None,
        *,
        default: pendulum.DateTime | None = None,
    ) -> pendulum.DateTime | None:
        if not value:
            return default
        try:
            if len(value) == 7 and value[4] == "-":
                return pendulum.datetime(int(value[:4]), int(value[5:7]), 1)
            parsed = pendulum.parse(value)
        except (ValueError, ParserError):
            return default
        if not isinstance(parsed, pendulum.DateTime):
            return default
        return parsed
