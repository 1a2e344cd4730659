"""Structured JSON logging for the wardrobe stylist service.

Every record is rendered as a single JSON line carrying the service name and
the correlation id of the request being served. Wardrobe owners, their
locations and image links never reach the log stream: fields with those
names are masked and free text is scrubbed of e-mail addresses and URLs.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import time
import uuid
from typing import Any, Dict, Iterable, Iterator, List, Optional

SERVICE_NAME = "wardrobe-stylist"

CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("correlation_id", default=None)

SENSITIVE_FIELDS = frozenset(
    {
        "user_id",
        "owner_id",
        "email",
        "city",
        "location",
        "image_url",
        "latitude",
        "longitude",
    }
)
MASK = "[redacted]"

_EMAIL = re.compile(r"[\w.\-]+@[\w.\-]+")
_URL = re.compile(r"^https?://", re.IGNORECASE)

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_STANDARD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render a record, plus anything passed through ``extra``, as JSON."""

    def __init__(self, service: str = SERVICE_NAME) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        entry.update(
            (name, redact_for_log(value))
            for name, value in vars(record).items()
            if name not in _STANDARD_ATTRIBUTES and name not in entry
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: int | str | None = None) -> logging.Handler:
    """Install the JSON handler on the root logger, replacing a previous one."""

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, JsonFormatter):
            root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    root.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Module logger; configures JSON output if nothing else has."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def redact_for_log(value: Any) -> Any:
    """Mask sensitive fields and scrub free text, recursing into containers."""

    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        if _URL.match(value):
            return "[redacted-url]"
        return _EMAIL.sub("[redacted-email]", value)
    if isinstance(value, dict):
        return {key: MASK if key in SENSITIVE_FIELDS else redact_for_log(inner) for key, inner in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [redact_for_log(inner) for inner in value]
    return str(value)


def summarize_suggestions(suggestions: Iterable[Any]) -> List[Dict[str, Any]]:
    """Compact ``{"item_ids", "score"}`` view of ranked outfits for log lines."""

    return [{"item_ids": list(suggestion.item_ids), "score": suggestion.score} for suggestion in suggestions]


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Adopt ``correlation_id``, or keep the active one, or start a new one."""

    active = correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex
    if active != CORRELATION_ID.get():
        CORRELATION_ID.set(active)
    return active


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Run a block under its own correlation id, restoring the outer one after."""

    token = CORRELATION_ID.set(correlation_id or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with redacted structured fields and the correlation id."""

    exc_info = fields.pop("exc_info", None)
    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    extra = redact_for_log(fields)
    extra.update(event=event, correlation_id=correlation_id)
    logger.log(level, event, exc_info=exc_info, extra=extra)


@contextlib.contextmanager
def operation_context(name: str, logger: logging.Logger | None = None, **attributes: Any) -> Iterator[str]:
    """Scope a correlation id around one operation and log its duration at DEBUG."""

    requested = attributes.pop("correlation_id", None) or CORRELATION_ID.get()
    started = time.perf_counter()
    with correlation_context(requested) as scoped_id:
        try:
            yield scoped_id
        finally:
            if logger is not None:
                log_event(
                    logger,
                    logging.DEBUG,
                    "operation_finished",
                    operation=name,
                    correlation_id=scoped_id,
                    duration_ms=round((time.perf_counter() - started) * 1000, 2),
                    **attributes,
                )


__all__ = [
    "SERVICE_NAME",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
    "summarize_suggestions",
]
