"""File-backed host pipeline around the matching engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal, TypeVar

import pendulum
import structlog
from pydantic import BaseModel, ValidationError

from . import __version__
from .core import MatchAnalytics, RecommendationFilters, Recommender
from .schemas import Application, Employee, Opportunity, Organization

RecordKind = Literal["employee", "opportunity", "organization"]

MODELS: dict[str, type[BaseModel]] = {
    "employee": Employee,
    "opportunity": Opportunity,
    "organization": Organization,
    "application": Application,
}

ModelT = TypeVar("ModelT", bound=BaseModel)


class RecordLoadError(ValueError):
    """Raised when record loading encounters invalid entries."""

    def __init__(self, errors: list[str], partial: list[BaseModel]):
        super().__init__("Record loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Record loading failed: {self.errors}"


class RecordLoader:
    """Load records exported by the data layer as JSON, a JSON array or JSONL."""

    def load(self, path: Path, model: type[ModelT]) -> list[ModelT]:
        records: list[ModelT] = []
        errors: list[str] = []
        for label, raw in self._iter_raw(path, errors):
            if not isinstance(raw, dict):
                errors.append(f"{label}: expected a JSON object")
                continue
            try:
                records.append(model.model_validate(raw))
            except ValidationError as exc:
                errors.append(f"{label}: {exc}")
        if errors:
            raise RecordLoadError(errors, records)
        return records

    def load_one(self, path: Path, model: type[ModelT]) -> ModelT:
        records = self.load(path, model)
        if len(records) != 1:
            raise ValueError(f"Expected exactly one record in {path}, found {len(records)}")
        return records[0]

    @staticmethod
    def _iter_raw(path: Path, errors: list[str]) -> list[tuple[str, Any]]:
        text = path.read_text(encoding="utf-8").strip()
        if not text:
            return []
        try:
            document = json.loads(text)
        except json.JSONDecodeError:
            pass
        else:
            if isinstance(document, list):
                return [(f"item {idx}", item) for idx, item in enumerate(document, start=1)]
            return [("document", document)]

        rows: list[tuple[str, Any]] = []
        for idx, line in enumerate(text.splitlines(), start=1):
            raw = line.strip()
            if not raw:
                continue
            try:
                rows.append((f"line {idx}", json.loads(raw)))
            except json.JSONDecodeError as exc:
                errors.append(f"line {idx}: invalid JSON ({exc})")
        return rows


class OutputWriter:
    """Persist matching results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


class MatchingPipeline:
    """Load records, run the engine and write a JSON report."""

    def __init__(
        self,
        *,
        recommender: Recommender,
        analytics: MatchAnalytics,
        loader: RecordLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._recommender = recommender
        self._analytics = analytics
        self._loader = loader or RecordLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def recommend(
        self,
        *,
        anchor_path: Path,
        anchor_kind: RecordKind,
        pool_path: Path,
        output_path: Path,
        pool_kind: RecordKind | None = None,
        limit: int | None = None,
        filters: RecommendationFilters | None = None,
        search: bool = False,
        as_of: str | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> list[dict]:
        anchor = self._loader.load_one(anchor_path, MODELS[anchor_kind])
        pool_kind = pool_kind or ("opportunity" if anchor_kind == "employee" else "employee")
        pool, load_errors = self._load_partial(pool_path, MODELS[pool_kind])

        if search:
            entries = self._recommender.search(anchor, pool, filters=filters, as_of=as_of)
        else:
            entries = self._recommender.recommend(
                anchor, pool, limit=limit, filters=filters, as_of=as_of
            )
        results = [entry.to_dict() for entry in entries]

        if audit_logger:
            for entry in entries:
                audit_logger.append(
                    {
                        "anchor_id": anchor.id,
                        "subject_id": entry.subject.id,
                        "preset": entry.score.preset,
                        "overall": entry.score.overall,
                        "reasons": entry.score.reasons,
                    }
                )

        self._write(
            output_path,
            results,
            anchor_id=anchor.id,
            anchor_kind=anchor_kind,
            pool_size=len(pool),
            errors=load_errors,
        )
        return results

    def score(
        self,
        *,
        employee_path: Path,
        target_path: Path,
        target_kind: RecordKind,
        output_path: Path,
        as_of: str | None = None,
    ) -> dict:
        employee = self._loader.load_one(employee_path, Employee)
        target = self._loader.load_one(target_path, MODELS[target_kind])
        result = self._recommender.engine.score(employee, target, as_of=as_of).to_dict()
        self._write(output_path, result, employee_id=employee.id, target_id=target.id, errors=[])
        return result

    def analytics(
        self,
        *,
        applications_path: Path,
        output_path: Path,
        employee_path: Path | None = None,
        opportunity_count: int | None = None,
        as_of: str | None = None,
    ) -> dict:
        applications, load_errors = self._load_partial(applications_path, Application)
        if employee_path is not None:
            employee = self._loader.load_one(employee_path, Employee)
            summary = self._analytics.employee_summary(employee, applications, as_of=as_of)
        else:
            count = opportunity_count
            if count is None:
                count = len({app.opportunity.id for app in applications if app.opportunity})
            summary = self._analytics.organization_summary(
                opportunity_count=count, applications=applications, as_of=as_of
            )
        result = summary.to_dict()
        self._write(output_path, result, errors=load_errors)
        return result

    def _load_partial(self, path: Path, model: type[ModelT]) -> tuple[list[ModelT], list[str]]:
        try:
            return self._loader.load(path, model), []
        except RecordLoadError as exc:
            self._logger.warning("records.partial_load", path=str(path), errors=exc.errors)
            return list(exc.partial), exc.errors

    def _write(self, path: Path, results: Any, *, errors: list[str], **metadata: Any) -> None:
        payload = {
            "metadata": {
                **metadata,
                "preset": self._recommender.engine.preset.name,
                "errors": errors,
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "results": results,
        }
        self._writer.write(path, payload)
        self._logger.info("pipeline.written", path=str(path), errors=len(errors))
