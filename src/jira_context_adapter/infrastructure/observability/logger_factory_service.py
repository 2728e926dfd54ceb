"""Logging setup for the adapter.

structlog renders everything: the adapter's own loggers directly, and stdlib
records (uvicorn, httpx, fastapi) through ProcessorFormatter on the root
handler, so both share the EventSchemaProcessor shape.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from jira_context_adapter.infrastructure.configuration.app_settings import AppSettings
from jira_context_adapter.infrastructure.observability.logging.event_schema_processor import (
    EventSchemaProcessor,
)

JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})

_configured = False


def select_renderer(log_format: str | None, env: str) -> Any:
    """Explicit LOG_FORMAT wins; otherwise deployed environments get JSON."""
    log_format = (log_format or "").lower()
    if log_format == "json" or (not log_format and env.lower() in JSON_ENVIRONMENTS):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(settings: AppSettings) -> None:
    """Only the first call takes effect."""
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    renderer = select_renderer(settings.log_format, settings.env)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        EventSchemaProcessor(service=settings.service_name, environment=settings.env),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(settings.log_level.upper())),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *shared_processors, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())
