from __future__ import annotations

from typing import Any

import pytest

from talentmatch.core import (
    REQUIREMENT_WEIGHTED,
    MatchingEngine,
    RecommendationFilters,
    Recommender,
)
from talentmatch.schemas import Employee, Opportunity, Organization

AS_OF = "2024-01-01"


def build_employee(_id: str = "E-001", **kwargs: Any) -> Employee:
    defaults: dict[str, Any] = {
        "_id": _id,
        "skills": [{"name": "Python", "level": "expert"}],
    }
    defaults.update(kwargs)
    return Employee.model_validate(defaults)


def build_opportunity(_id: str, skills: list[str], **kwargs: Any) -> Opportunity:
    payload: dict[str, Any] = {
        "_id": _id,
        "organization": {"_id": "ORG-1", "name": "Acme"},
        "requirements": {
            "skills": [{"name": name, "isRequired": True} for name in skills],
        },
    }
    payload.update(kwargs)
    return Opportunity.model_validate(payload)


@pytest.fixture
def pool() -> list[Opportunity]:
    # The employee has no location, so location is neutral (10 points); the
    # organization prefers no interests, so interests score 0.
    return [
        build_opportunity("A", ["Python"], createdAt="2024-01-01T00:00:00Z", location={"type": "remote"}),
        build_opportunity("B", ["Python", "Java"], createdAt="2024-03-01T00:00:00Z"),
        build_opportunity("C", ["COBOL"], createdAt="2024-05-01T00:00:00Z"),
        build_opportunity("D", ["python"], createdAt="2024-06-01T00:00:00Z", type="internship"),
    ]


@pytest.fixture
def recommender() -> Recommender:
    return Recommender(MatchingEngine())


def test_recommendations_sorted_and_below_cutoff_dropped(recommender: Recommender, pool):
    entries = recommender.recommend(build_employee(), pool)

    assert [entry.subject.id for entry in entries] == ["D", "A", "B"]
    assert [entry.score.overall for entry in entries] == [60, 60, 35]
    assert all(entry.score.overall > 30 for entry in entries)


def test_limit_truncates_after_sorting(recommender: Recommender, pool):
    entries = recommender.recommend(build_employee(), pool, limit=2)

    assert [entry.subject.id for entry in entries] == ["D", "A"]


def test_zero_limit_returns_nothing(pool):
    assert Recommender(MatchingEngine(), default_limit=0).recommend(build_employee(), pool) == []


def test_min_match_score_filter(recommender: Recommender, pool):
    filters = RecommendationFilters(min_match_score=50)

    entries = recommender.recommend(build_employee(), pool, filters=filters)

    assert [entry.subject.id for entry in entries] == ["D", "A"]


def test_opportunity_attribute_filters(recommender: Recommender, pool):
    by_mode = recommender.recommend(
        build_employee(), pool, filters=RecommendationFilters(work_mode="remote")
    )
    by_type = recommender.recommend(
        build_employee(), pool, filters=RecommendationFilters(type="internship")
    )

    assert [entry.subject.id for entry in by_mode] == ["A"]
    assert [entry.subject.id for entry in by_type] == ["D"]


def test_search_returns_every_member_with_zeroed_tail(recommender: Recommender, pool):
    entries = recommender.search(build_employee(), pool)

    assert [entry.subject.id for entry in entries] == ["D", "A", "B", "C"]
    assert entries[-1].score.overall == 0
    assert entries[-1].score.reasons == []


def test_search_window_limits_scored_entries(pool):
    recommender = Recommender(MatchingEngine())
    recommender.SEARCH_WINDOW = 1

    entries = recommender.search(build_employee(), pool)

    assert entries[0].subject.id == "D"
    assert entries[0].score.overall == 60
    assert [entry.score.overall for entry in entries[1:]] == [0, 0, 0]


def test_profile_preset_skips_opportunities_without_organization(recommender: Recommender):
    orphan = build_opportunity("O-X", ["Python"], organization=None)
    owned = build_opportunity("O-Y", ["Python"])

    entries = recommender.recommend(build_employee(), [orphan, owned])
    searched = recommender.search(build_employee(), [orphan, owned])

    assert [entry.subject.id for entry in entries] == ["O-Y"]
    assert [entry.subject.id for entry in searched] == ["O-Y"]


def test_requirement_preset_keeps_opportunities_without_organization():
    recommender = Recommender(MatchingEngine(preset=REQUIREMENT_WEIGHTED))
    orphan = build_opportunity("O-X", ["Python"], organization=None)

    entries = recommender.recommend(build_employee(), [orphan], as_of=AS_OF)

    assert [entry.subject.id for entry in entries] == ["O-X"]
    assert entries[0].score.overall == 40


def test_equal_scores_sort_newest_first_with_missing_timestamp_last(recommender: Recommender):
    pool = [
        build_opportunity("undated", ["Python"]),
        build_opportunity("date-only", ["Python"], createdAt="2024-05-01"),
        # 03:00 UTC
        build_opportunity("tokyo", ["Python"], createdAt="2024-05-01T12:00:00+09:00"),
        # 06:00 UTC
        build_opportunity("chicago", ["Python"], createdAt="2024-05-01T01:00:00-05:00"),
    ]

    entries = recommender.recommend(build_employee(), pool)

    assert {entry.score.overall for entry in entries} == {60}
    assert [entry.subject.id for entry in entries] == ["chicago", "tokyo", "date-only", "undated"]


def test_organization_anchor_ranks_employees_with_filters():
    recommender = Recommender(MatchingEngine())
    organization = Organization.model_validate(
        {
            "_id": "ORG-1",
            "location": {"city": "Austin", "state": "TX"},
            "requirements": {"preferredSkills": [{"name": "Python"}]},
        }
    )
    seasoned = build_employee(
        "E-1",
        experience=[{"startDate": "2019-01-01", "endDate": "2022-01-01"}],
        interests=[{"name": "Chess"}],
    )
    junior = build_employee("E-2")
    unskilled = build_employee("E-3", skills=[])
    pool = [seasoned, junior, unskilled]

    everyone = recommender.recommend(organization, pool, as_of=AS_OF)
    mid_level = recommender.recommend(
        organization,
        pool,
        filters=RecommendationFilters(experience_level="mid-level"),
        as_of=AS_OF,
    )
    chess = recommender.recommend(
        organization, pool, filters=RecommendationFilters(interests=["chess"])
    )

    assert {entry.subject.id for entry in everyone} == {"E-1", "E-2"}
    assert [entry.subject.id for entry in mid_level] == ["E-1"]
    assert [entry.subject.id for entry in chess] == ["E-1"]


def test_skill_filter_matches_any_listed_skill():
    recommender = Recommender(MatchingEngine())
    opportunity = build_opportunity("O-1", ["Python"])
    pool = [
        build_employee("E-1"),
        build_employee("E-2", skills=[{"name": "Python"}, {"name": "Rust"}]),
    ]

    entries = recommender.recommend(
        opportunity, pool, filters=RecommendationFilters(skills=["rust", "haskell"])
    )

    assert [entry.subject.id for entry in entries] == ["E-2"]


def test_invalid_pairing_raises(recommender: Recommender, pool):
    with pytest.raises(TypeError):
        recommender.recommend(pool[0], pool[1:])


def test_entry_serialization_uses_record_aliases(recommender: Recommender, pool):
    entry = recommender.recommend(build_employee(), pool, limit=1)[0]

    payload = entry.to_dict()

    assert payload["subject"]["id"] == "D"
    assert payload["subject"]["createdAt"] == "2024-06-01T00:00:00Z"
    assert payload["score"]["overall"] == 60
