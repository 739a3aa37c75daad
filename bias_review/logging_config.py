"""
Structured JSON logging for request and pipeline observability.

Provides structured logging with trace IDs for correlating logs across
pipeline stages of one request, plus a context manager that times a stage.
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

# Context variables for trace correlation
trace_id_var: ContextVar[str | None] = ContextVar("trace_id", default=None)
stage_var: ContextVar[str | None] = ContextVar("stage", default=None)
component_var: ContextVar[str | None] = ContextVar("component", default=None)

# Extra record attributes copied into the JSON payload
EXTRA_FIELDS = (
    "event",
    "duration_ms",
    "sections",
    "phrases",
    "entries",
    "segments",
    "highlights",
    "content_chars",
    "method",
    "path",
    "status_code",
    "cache_hit",
)


# -----------------------------------------------------------------------------
# JSON Formatter
# -----------------------------------------------------------------------------


class JSONFormatter(logging.Formatter):
    """
    Format log records as single-line JSON.

    Output format:
    {"timestamp": "...", "level": "INFO", "message": "...", "trace_id": "...", ...}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add trace context if available
        trace_id = trace_id_var.get()
        if trace_id:
            log_data["trace_id"] = trace_id

        stage = stage_var.get()
        if stage:
            log_data["stage"] = stage

        component = component_var.get()
        if component:
            log_data["component"] = component

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: str = "INFO") -> None:
    """
    Configure logging for deployed or local runs.

    Args:
        json_format: If True, use JSON format. If False, use human-readable format.
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# -----------------------------------------------------------------------------
# Pipeline Logger
# -----------------------------------------------------------------------------


class PipelineLogger:
    """
    Event-typed logger shared by the engine and the request middleware.

    Every record carries an `event` name plus any counters passed as kwargs.
    """

    def __init__(self, name: str = "pipeline"):
        self._logger = logging.getLogger(name)

    def set_context(self, trace_id: str, component: str | None = None) -> None:
        """Set the trace id (and optionally the component) for the current request."""
        trace_id_var.set(trace_id)
        if component:
            component_var.set(component)

    def clear_context(self) -> None:
        """Clear the request context. Stage is scoped by log_stage."""
        trace_id_var.set(None)
        component_var.set(None)

    def debug(self, event: str, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, event, message, **kwargs)

    def _log(self, level: int, event: str, message: str, **kwargs: Any) -> None:
        """Internal logging method that adds extra fields."""
        extra = {"event": event}
        extra.update(kwargs)
        self._logger.log(level, message, extra=extra)


# Global pipeline logger instance
pipeline_logger = PipelineLogger()


# -----------------------------------------------------------------------------
# Context Managers
# -----------------------------------------------------------------------------


@contextmanager
def log_stage(stage: str, trace_id: str | None = None, level: int = logging.INFO):
    """
    Context manager for stage-level logging.

    Logs stage start and end with duration, automatically tracks timing.

    Usage:
        with log_stage("build_segments", level=logging.DEBUG):
            # ... stage logic ...
    """
    if trace_id:
        trace_id_var.set(trace_id)
    token = stage_var.set(stage)

    start_time = time.perf_counter()
    logger = logging.getLogger("pipeline")

    logger.log(level, f"Stage {stage} started", extra={"event": "stage_start"})

    try:
        yield
        duration_ms = int((time.perf_counter() - start_time) * 1000)
        logger.log(
            level,
            f"Stage {stage} completed",
            extra={"event": "stage_complete", "duration_ms": duration_ms},
        )
    except Exception as e:
        duration_ms = int((time.perf_counter() - start_time) * 1000)
        logger.error(
            f"Stage {stage} failed: {e}",
            extra={"event": "stage_failed", "duration_ms": duration_ms},
            exc_info=True,
        )
        raise
    finally:
        stage_var.reset(token)
