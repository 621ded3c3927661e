"""
Centralized logging configuration for the customer-service orchestrator.

This module sets up structured logging with:
- Settings-based configuration (LoggingSettings, env driven)
- JSON formatting for production, pretty console for development
- Redaction of credentials (bearer tokens, API keys) before rendering
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import structlog
from structlog.types import EventDict, Processor

from config import LoggingSettings

# Sensitive fields to redact from logs
REDACTED_FIELDS = {
    "api_key",
    "n8n_api_key",
    "authorization",
    "token",
    "secret",
    "password",
}

_PROTECTED_KEYS = {"level", "event", "timestamp", "logger"}


def add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO format timestamp to event dict."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key in _PROTECTED_KEYS:
            continue
        lowered = key.lower()
        if lowered in REDACTED_FIELDS or any(
            sensitive in lowered for sensitive in ("token", "key", "secret")
        ):
            event_dict[key] = "***REDACTED***"
    return event_dict


def configure_structlog(log_format: str = "console") -> None:
    """
    Configure structlog with appropriate processors for the output format.

    json: one JSON object per line
    console: pretty coloured output for development
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True, pad_event=15, sort_keys=False
        )

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging(log_level: str = "INFO") -> None:
    """Route stdlib logging to stdout at the configured level."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    # httpx logs every request at INFO; delivery events already cover that
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Initialize logging for the process.

    Called once by the service wiring helpers; library code only calls
    get_logger().
    """
    settings = settings or LoggingSettings()
    configure_stdlib_logging(settings.log_level)
    configure_structlog(settings.log_format)

    structlog.get_logger(__name__).info(
        "logging_initialized",
        log_level=settings.log_level,
        log_format=settings.log_format,
    )
