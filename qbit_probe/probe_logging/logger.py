"""
Structured logging for the probe: JSON lines with timestamp, level, event_type, message.

LOG_LEVEL and LOG_FORMAT are resolved once here. The same validated level
name configures structlog and is handed to uvicorn, so an unknown value
degrades to the default with a warning instead of failing at startup.

Uses only Python stdlib logging and structlog; no other qbit_probe imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

# Names accepted by both logging and uvicorn's --log-level
LOG_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}
LOG_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}
DEFAULT_LOG_LEVEL = "info"

LOG_FORMATS = ("json", "console")
DEFAULT_LOG_FORMAT = "json"


def resolve_log_level(raw: str | None) -> str | None:
    """Canonical level name for raw, DEFAULT_LOG_LEVEL when unset, None when unrecognised."""
    if raw is None:
        return DEFAULT_LOG_LEVEL
    name = raw.strip().lower()
    name = LOG_LEVEL_ALIASES.get(name, name)
    return name if name in LOG_LEVELS else None


def resolve_log_format(raw: str | None) -> str | None:
    """json | console, DEFAULT_LOG_FORMAT when unset, None when unrecognised."""
    if raw is None:
        return DEFAULT_LOG_FORMAT
    name = raw.strip().lower()
    return name if name in LOG_FORMATS else None


def uvicorn_log_level(raw: str | None = None) -> str:
    """Validated level name for uvicorn.run(log_level=...); reads LOG_LEVEL when raw is None."""
    if raw is None:
        raw = os.getenv("LOG_LEVEL")
    return resolve_log_level(raw) or DEFAULT_LOG_LEVEL


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; default message to the event name."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def build_processors(log_format: str) -> list[Any]:
    """Processor chain ending in a JSON or (ANSI-free) console renderer."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.JSONRenderer())
    return processors


def configure_structlog(log_level: str, log_format: str) -> None:
    structlog.configure(
        processors=build_processors(log_format),
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVELS[log_level]),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

    Log with event_type (first arg) and optional fields:
        logger = get_logger(__name__)
        logger.info("liveness_torrents_progressing", resumed_count=5, stalled_count=2)
    Output (JSON): {"event_type": "liveness_torrents_progressing", "resumed_count": 5, "stalled_count": 2, "timestamp": "...", "level": "info", "logger": "module.name"}
    """
    return structlog.get_logger(name).bind(logger=name)


_RAW_LOG_LEVEL = os.getenv("LOG_LEVEL")
_RAW_LOG_FORMAT = os.getenv("LOG_FORMAT")

LOG_LEVEL = resolve_log_level(_RAW_LOG_LEVEL) or DEFAULT_LOG_LEVEL
LOG_FORMAT = resolve_log_format(_RAW_LOG_FORMAT) or DEFAULT_LOG_FORMAT

# One-time configuration on first import
if not structlog.is_configured():
    configure_structlog(LOG_LEVEL, LOG_FORMAT)
    if resolve_log_level(_RAW_LOG_LEVEL) is None:
        get_logger(__name__).warning(
            "logging_level_invalid",
            value=_RAW_LOG_LEVEL,
            default=DEFAULT_LOG_LEVEL,
            allowed=sorted(LOG_LEVELS),
            message="LOG_LEVEL is not a known level, using default value instead",
        )
    if resolve_log_format(_RAW_LOG_FORMAT) is None:
        get_logger(__name__).warning(
            "logging_format_invalid",
            value=_RAW_LOG_FORMAT,
            default=DEFAULT_LOG_FORMAT,
            message="LOG_FORMAT must be json or console, using default value instead",
        )
