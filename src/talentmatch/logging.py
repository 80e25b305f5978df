"""Structured logging for the matching engine and its CLI.

Events are JSON lines with dotted names: ``match.scored`` (debug, one per
pair), ``recommend.completed``, ``analytics.organization``,
``analytics.employee``, ``records.partial_load`` and ``pipeline.written``.
CLI commands bind ``command`` into context variables so every event of a run
carries it.
"""

from __future__ import annotations

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog with JSON output."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=log_level, format="%(message)s")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )


def bind_command(name: str, **context: object) -> None:
    """Reset context variables and tag subsequent events with the CLI command."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=name, **context)
