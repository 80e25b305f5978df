from __future__ import annotations

import json
from pathlib import Path

import pytest

from talentmatch.pipeline import RecordLoadError, RecordLoader
from talentmatch.schemas import Employee, Opportunity


def test_record_loader_reads_json_array(tmp_path: Path):
    path = tmp_path / "employees.json"
    path.write_text(json.dumps([{"_id": "E-1"}, {"_id": "E-2"}]), encoding="utf-8")

    employees = RecordLoader().load(path, Employee)

    assert [employee.id for employee in employees] == ["E-1", "E-2"]


def test_record_loader_reads_jsonl_and_reports_invalid_lines(tmp_path: Path):
    path = tmp_path / "employees.jsonl"
    path.write_text('{"_id": "E-1"}\n\n{invalid}', encoding="utf-8")

    with pytest.raises(RecordLoadError) as exc:
        RecordLoader().load(path, Employee)
    error = exc.value
    assert "invalid JSON" in error.errors[0]
    assert error.errors[0].startswith("line 3")
    assert [employee.id for employee in error.partial] == ["E-1"]


def test_record_loader_skips_invalid_records_and_reports(tmp_path: Path):
    path = tmp_path / "opportunities.json"
    path.write_text(
        json.dumps([{"_id": "O-1"}, {"_id": "O-2", "requirements": {"skills": "nope"}}, 7]),
        encoding="utf-8",
    )

    with pytest.raises(RecordLoadError) as exc:
        RecordLoader().load(path, Opportunity)
    error = exc.value
    assert error.errors[0].startswith("item 2")
    assert "expected a JSON object" in error.errors[1]
    assert len(error.partial) == 1


def test_record_loader_empty_file(tmp_path: Path):
    path = tmp_path / "empty.jsonl"
    path.write_text("\n", encoding="utf-8")

    assert RecordLoader().load(path, Employee) == []


def test_load_one_requires_single_record(tmp_path: Path):
    single = tmp_path / "employee.json"
    single.write_text(json.dumps({"_id": "E-1"}), encoding="utf-8")
    many = tmp_path / "employees.json"
    many.write_text(json.dumps([{"_id": "E-1"}, {"_id": "E-2"}]), encoding="utf-8")
    loader = RecordLoader()

    assert loader.load_one(single, Employee).id == "E-1"
    with pytest.raises(ValueError):
        loader.load_one(many, Employee)


def test_record_loader_keeps_opportunity_with_unnamed_skill(tmp_path: Path):
    path = tmp_path / "opportunities.json"
    path.write_text(
        json.dumps([{"_id": "O-1", "requirements": {"skills": [{"level": "expert"}, {"name": "Python"}]}}]),
        encoding="utf-8",
    )

    opportunities = RecordLoader().load(path, Opportunity)

    assert [opportunity.id for opportunity in opportunities] == ["O-1"]
