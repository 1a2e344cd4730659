"""Call instrumentation for collaborators outside the ranking engine."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, Optional, ParamSpec, TypeVar

from stylist_app.logging_config import ensure_correlation_id, get_logger, log_event

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")

MAX_LOGGED_ARGUMENTS = 6


def _argument_preview(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    names = list(kwargs)
    preview = {name: kwargs[name] for name in names[:MAX_LOGGED_ARGUMENTS]}
    if len(names) > MAX_LOGGED_ARGUMENTS:
        preview["truncated"] = True
    return preview


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def instrument_tool(
    tool_name: str,
    summarize: Optional[Callable[[Any], Any]] = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log start, outcome and latency of each call to the wrapped function.

    A ``None`` result is logged as ``tool_call_degraded``: collaborators such
    as the weather lookup report an unavailable upstream that way. When
    ``summarize`` is given, its view of the result is attached to the
    completion event.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()
            started = time.perf_counter()
            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_started",
                tool=tool_name,
                correlation_id=correlation_id,
                arguments=_argument_preview(kwargs),
            )
            try:
                result = func(*args, **kwargs)
            except Exception:
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "tool_call_failed",
                    tool=tool_name,
                    correlation_id=correlation_id,
                    duration_ms=_elapsed_ms(started),
                    exc_info=True,
                )
                raise

            if result is None:
                log_event(
                    LOGGER,
                    logging.WARNING,
                    "tool_call_degraded",
                    tool=tool_name,
                    correlation_id=correlation_id,
                    duration_ms=_elapsed_ms(started),
                )
                return result
            fields: Dict[str, Any] = {"duration_ms": _elapsed_ms(started)}
            if summarize is not None:
                fields["result"] = summarize(result)
            log_event(LOGGER, logging.INFO, "tool_call_completed", tool=tool_name, correlation_id=correlation_id, **fields)
            return result

        return wrapper

    return decorator


__all__ = ["instrument_tool"]
