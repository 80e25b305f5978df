from __future__ import annotations

import pendulum
import pytest

from talentmatch.core.matchers import ExperienceMatchConfig, ExperienceMatcher
from talentmatch.schemas import EducationEntry, ExperienceEntry


def build_entries(*spans: dict) -> list[ExperienceEntry]:
    return [ExperienceEntry(title="Engineer", company="Acme", **span) for span in spans]


def test_total_years_uses_365_day_years():
    matcher = ExperienceMatcher()
    entries = build_entries({"start_date": "2019-01-01", "end_date": "2022-01-01"})

    # 2020 is a leap year: 1096 days
    assert matcher.total_years(entries, "2024-01-01") == pytest.approx(1096 / 365)


def test_experience_fraction_below_requirement():
    matcher = ExperienceMatcher()
    entries = build_entries({"start_date": "2019-01-01", "end_date": "2022-01-01"})

    fraction = matcher.experience_fraction(entries, 5, "2024-01-01")

    assert fraction == pytest.approx(1096 / 365 / 5)
    assert fraction * 25 == pytest.approx(15.0137, abs=1e-3)


def test_experience_fraction_caps_at_one():
    matcher = ExperienceMatcher()
    entries = build_entries({"start_date": "2010-01-01", "end_date": "2020-01-01"})

    assert matcher.experience_fraction(entries, 5, "2024-01-01") == pytest.approx(1.0)


def test_experience_fraction_is_none_without_requirement():
    matcher = ExperienceMatcher()
    entries = build_entries({"start_date": "2010-01-01", "end_date": "2020-01-01"})

    assert matcher.experience_fraction(entries, 0) is None
    assert matcher.experience_fraction(entries, None) is None


def test_current_and_open_ended_roles_run_until_as_of():
    matcher = ExperienceMatcher()
    entries = build_entries(
        {"start_date": "2020-01-01", "end_date": "2020-06-01", "is_current": True},
        {"start_date": "2022-01-01"},
    )

    years = matcher.total_years(entries, "2023-01-01")

    assert years == pytest.approx((1096 + 365) / 365)


def test_unparseable_start_counts_nothing():
    matcher = ExperienceMatcher()
    entries = build_entries(
        {"start_date": "not a date", "end_date": "2020-01-01"},
        {"start_date": None, "end_date": "2020-01-01"},
    )

    assert matcher.total_years(entries, "2024-01-01") == pytest.approx(0.0)


def test_year_month_dates_are_accepted():
    matcher = ExperienceMatcher()
    entries = build_entries({"start_date": "2020-01", "end_date": "2021-01"})

    assert matcher.total_years(entries, "2024-01") == pytest.approx(366 / 365)


def test_now_provider_is_used_without_as_of():
    fixed = pendulum.datetime(2021, 1, 1)
    matcher = ExperienceMatcher(now_provider=lambda: fixed)
    entries = build_entries({"start_date": "2020-01-01", "is_current": True})

    assert matcher.total_years(entries) == pytest.approx(366 / 365)
    assert matcher.resolve_as_of("garbage") == fixed


def test_highest_education_has_high_school_baseline():
    matcher = ExperienceMatcher()

    assert matcher.highest_education([]) == "high-school"
    assert matcher.highest_education(
        [EducationEntry(degree="Bachelor"), EducationEntry(degree="master")]
    ) == "master"
    assert matcher.highest_education([EducationEntry(degree="bootcamp")]) == "high-school"


def test_baseline_education_is_configurable():
    matcher = ExperienceMatcher(config=ExperienceMatchConfig(baseline_education="associate"))

    assert matcher.highest_education([]) == "associate"


def test_education_met():
    matcher = ExperienceMatcher()
    master = [EducationEntry(degree="master")]

    assert matcher.education_met(master, "bachelor") is True
    assert matcher.education_met(master, "phd") is False
    assert matcher.education_met([], "any") is True
    assert matcher.education_met([], "high-school") is True
    assert matcher.education_met(master, None) is None
