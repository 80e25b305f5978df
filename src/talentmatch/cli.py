"""Typer CLI entrypoint for the matching engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

import typer
from pydantic import ValidationError

from .config import ConfigManager
from .container import create_container
from .core import RecommendationFilters
from .logging import bind_command, configure_logging
from .pipeline import AuditLogger
from .schemas.config import load_config

app = typer.Typer(help="Employee and opportunity matching CLI.")

KINDS = ("employee", "opportunity", "organization")
TARGET_KINDS = ("opportunity", "organization")


def _load_settings(
    config: Optional[Path],
    preset: Optional[str],
    *,
    default_preset: Optional[str] = None,
) -> dict[str, Any]:
    raw: dict[str, Any] = {}
    if config:
        try:
            raw = ConfigManager.read(config)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc
    engine = raw.get("engine") or {}
    if not isinstance(engine, dict):
        raise typer.BadParameter("engine section must be a mapping", param_name="config")
    raw["engine"] = engine
    if preset:
        engine["preset"] = preset
    elif default_preset:
        engine.setdefault("preset", default_preset)
    try:
        return load_config(raw).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc


def _check_kind(value: str) -> str:
    if value not in KINDS:
        raise typer.BadParameter(f"Expected one of {', '.join(KINDS)}")
    return value


def _check_target_kind(value: str) -> str:
    if value not in TARGET_KINDS:
        raise typer.BadParameter(f"Expected one of {', '.join(TARGET_KINDS)}")
    return value


@app.command()
def recommend(
    anchor: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Anchor record JSON path."),
    pool: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidate pool JSON/JSONL path."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    anchor_kind: str = typer.Option("employee", callback=_check_kind, help="employee, opportunity or organization."),
    pool_kind: Optional[str] = typer.Option(None, help="Pool record kind; inferred from the anchor when omitted."),
    preset: Optional[str] = typer.Option(None, help="Scoring preset: profile or requirement."),
    limit: Optional[int] = typer.Option(None, min=0, help="Maximum number of recommendations."),
    min_match_score: Optional[float] = typer.Option(None, help="Minimum overall score to keep."),
    opportunity_type: Optional[str] = typer.Option(None, "--type", help="Only opportunities of this type."),
    category: Optional[str] = typer.Option(None, help="Only opportunities in this category."),
    work_mode: Optional[str] = typer.Option(None, help="Only opportunities with this work mode."),
    experience_level: Optional[str] = typer.Option(None, help="Only employees in this experience band."),
    skill: List[str] = typer.Option([], help="Only employees holding any of these skills."),
    interest: List[str] = typer.Option([], help="Only employees with any of these interests."),
    search: bool = typer.Option(False, help="Return every pool member, unranked ones with zero scores."),
    as_of: Optional[str] = typer.Option(None, help="Reference date for experience calculations."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Rank a candidate pool against an anchor record."""
    if pool_kind is not None:
        _check_kind(pool_kind)
    settings = _load_settings(config, preset)
    configure_logging(log_level)
    bind_command("recommend", anchor=str(anchor))

    container = create_container(settings=settings)
    pipeline = container.pipeline()
    filters = RecommendationFilters(
        min_match_score=min_match_score,
        type=opportunity_type,
        category=category,
        work_mode=work_mode,
        experience_level=experience_level,
        skills=skill,
        interests=interest,
    )

    results = pipeline.recommend(
        anchor_path=anchor,
        anchor_kind=anchor_kind,
        pool_path=pool,
        pool_kind=pool_kind,
        output_path=output,
        limit=limit,
        filters=filters,
        search=search,
        as_of=as_of,
        audit_logger=AuditLogger(audit_log) if audit_log else None,
    )
    typer.echo(f"Ranked {len(results)} candidates. Results saved to {output}.")


@app.command()
def score(
    employee: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Employee record JSON path."),
    target: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Opportunity or organization JSON path."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    target_kind: str = typer.Option("opportunity", callback=_check_target_kind, help="opportunity or organization."),
    preset: Optional[str] = typer.Option(None, help="Scoring preset: profile or requirement."),
    as_of: Optional[str] = typer.Option(None, help="Reference date for experience calculations."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Score a single employee against one opportunity or organization."""
    settings = _load_settings(config, preset)
    configure_logging(log_level)
    bind_command("score")

    pipeline = create_container(settings=settings).pipeline()
    result = pipeline.score(
        employee_path=employee,
        target_path=target,
        target_kind=target_kind,
        output_path=output,
        as_of=as_of,
    )
    typer.echo(f"Overall match {result['overall']}. Result saved to {output}.")


@app.command()
def analytics(
    applications: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Applications JSON/JSONL path."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    employee: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Employee record for a per-employee summary."),
    opportunity_count: Optional[int] = typer.Option(None, min=0, help="Active opportunity count for the organization summary."),
    preset: Optional[str] = typer.Option(None, help="Scoring preset: profile or requirement."),
    as_of: Optional[str] = typer.Option(None, help="Reference date for experience calculations."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Summarize match scores over historical applications."""
    settings = _load_settings(config, preset, default_preset="requirement")
    configure_logging(log_level)
    bind_command("analytics")

    pipeline = create_container(settings=settings).pipeline()
    result = pipeline.analytics(
        applications_path=applications,
        output_path=output,
        employee_path=employee,
        opportunity_count=opportunity_count,
        as_of=as_of,
    )
    typer.echo(f"Average match {result['averageMatchScore']}. Summary saved to {output}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
