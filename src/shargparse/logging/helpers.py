from __future__ import annotations

"""Logging helpers shared by every shargparse component.

This module provides:
    - JsonLogFormatter: one JSON object per record with a fixed schema.
    - setup_base_logger: one-time configuration of the 'shargparse' logger.
    - get_logger: namespaced logger factory ('shargparse.*').
    - trace_io: debug tracing of script reads/writes gated by SHARGPARSE_TRACE_IO.

Diagnostics always go to stderr; stdout is reserved for the merged script.
"""

import logging
import os
import sys
from typing import Optional, TextIO

BASE_LOGGER_NAME = "shargparse"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'shargparse.collector').
        - msg: Formatted message string.
        - version: shargparse.__version__.
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import: the package __init__ imports this module.
            from shargparse import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("SHARGPARSE_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'shargparse' logger once and return it.

    A second call keeps the existing handlers and only adjusts level and
    format, unless *stream* is given, in which case the handler is rebuilt
    (tests use this to capture output).
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(level)
    if base.handlers and stream is None:
        for handler in base.handlers:
            handler.setFormatter(_formatter(json_logs))
        return base

    base.handlers.clear()
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_formatter(json_logs))
    base.addHandler(handler)
    return base


def _formatter(json_logs: bool) -> logging.Formatter:
    return JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'shargparse'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


def is_trace_io_enabled() -> bool:
    return os.getenv("SHARGPARSE_TRACE_IO") == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit a debug trace for file I/O, only when SHARGPARSE_TRACE_IO=1."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
