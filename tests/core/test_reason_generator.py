from __future__ import annotations

from typing import Any

import pytest

from talentmatch.core import (
    InterestMatcher,
    LocationMatcher,
    MatchTarget,
    ReasonGenerator,
    SkillMatchConfig,
    SkillMatcher,
)
from talentmatch.schemas import Employee, Opportunity


@pytest.fixture
def generator() -> ReasonGenerator:
    return ReasonGenerator(
        skill_matcher=SkillMatcher(config=SkillMatchConfig(mode="fuzzy")),
        interest_matcher=InterestMatcher(),
        location_matcher=LocationMatcher(),
    )


def build_employee(**kwargs: Any) -> Employee:
    defaults: dict[str, Any] = {
        "_id": "E-010",
        "skills": [
            {"name": "Python", "level": "advanced"},
            {"name": "Go", "level": "beginner"},
        ],
        "location": {"city": "Denver", "state": "CO"},
    }
    defaults.update(kwargs)
    return Employee.model_validate(defaults)


def build_target(work_mode: str = "remote", **org: Any) -> MatchTarget:
    organization = {"_id": "ORG-10", "location": {"city": "Chicago", "state": "IL"}, **org}
    opportunity = Opportunity.model_validate(
        {
            "_id": "O-010",
            "organization": organization,
            "requirements": {"skills": [{"name": "Python"}, {"name": "Go"}]},
            "location": {"type": work_mode},
        }
    )
    return MatchTarget.build(opportunity)


@pytest.mark.parametrize(
    ("overall", "label"),
    [(100, "Excellent match"), (80, "Excellent match"), (79, "Good match"), (40, "Moderate match"), (39, "Basic match")],
)
def test_band_thresholds(generator: ReasonGenerator, overall: int, label: str):
    assert generator.band(overall) == label


def test_itemized_reasons_for_remote_role(generator: ReasonGenerator):
    reasons = generator.generate(build_employee(), build_target("remote"), overall=50, style="itemized")

    assert reasons == ["Strong skills in: Python", "Remote work opportunity"]


def test_itemized_same_city_wins_over_remote(generator: ReasonGenerator):
    employee = build_employee(
        interests=[{"name": "Cycling"}],
        location={"city": "chicago", "state": "IL"},
    )
    target = build_target(
        "remote",
        requirements={"preferredInterests": [{"name": "cycling"}]},
    )

    reasons = generator.generate(employee, target, overall=50, style="itemized")

    assert reasons == [
        "Strong skills in: Python",
        "Shared interests: Cycling",
        "Same location (chicago)",
    ]


def test_itemized_reasons_can_be_empty(generator: ReasonGenerator):
    employee = build_employee(skills=[], location=None)

    assert generator.generate(employee, build_target("on-site"), overall=10, style="itemized") == []


def test_banded_reasons(generator: ReasonGenerator):
    employee = build_employee(preferences={"workMode": ["remote"]})

    reasons = generator.generate(employee, build_target("remote"), overall=65, style="banded")

    assert reasons == ["Good match", "2 matching skills", "Remote work preference match"]


def test_banded_reasons_skip_remote_without_preference(generator: ReasonGenerator):
    reasons = generator.generate(build_employee(skills=[]), build_target("remote"), overall=20, style="banded")

    assert reasons == ["Basic match"]
