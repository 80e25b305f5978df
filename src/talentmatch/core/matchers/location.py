"""Geographic and work-mode compatibility."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...schemas import Location


@dataclass
class LocationMatchConfig:
    """Discrete score ladder for location matching."""

    neutral_score: int = 50
    remote_score: int = 100
    same_city_score: int = 100
    same_state_score: int = 80
    same_country_score: int = 60
    elsewhere_score: int = 30


def _same(left: str | None, right: str | None) -> bool:
    left_key = (left or "").strip().lower()
    right_key = (right or "").strip().lower()
    return bool(left_key) and left_key == right_key


class LocationMatcher:
    """Score location compatibility between an employee and a workplace."""

    method = "location"

    def __init__(self, *, config: LocationMatchConfig | None = None) -> None:
        self._config = config or LocationMatchConfig()

    def score(
        self,
        employee_location: Location | None,
        org_location: Location | None,
        work_mode: str | None,
    ) -> int:
        config = self._config
        if employee_location is None or org_location is None:
            return config.neutral_score
        if work_mode == "remote":
            return config.remote_score
        if self.same_city(employee_location, org_location):
            return config.same_city_score
        if _same(employee_location.state, org_location.state):
            return config.same_state_score
        if _same(employee_location.country, org_location.country):
            return config.same_country_score
        return config.elsewhere_score

    def site_fraction(
        self,
        employee_location: Location | None,
        site_location: Location | None,
        work_mode: str | None,
        preferred_work_modes: Sequence[str],
    ) -> float:
        """Share of the location weight earned for a specific site.

        On-site roles with a city step down city, state, country (1, 2/3,
        1/3). Remote roles earn the full share only when the employee prefers
        remote work. Anything else earns nothing.
        """
        if work_mode == "on-site" and site_location is not None and site_location.city:
            if employee_location is None:
                return 0.0
            if self.same_city(employee_location, site_location):
                return 1.0
            if _same(employee_location.state, site_location.state):
                return 2 / 3
            if _same(employee_location.country, site_location.country):
                return 1 / 3
            return 0.0
        if work_mode == "remote" and "remote" in preferred_work_modes:
            return 1.0
        return 0.0

    @staticmethod
    def same_city(left: Location | None, right: Location | None) -> bool:
        if left is None or right is None:
            return False
        return _same(left.city, right.city)
