# src/logging/logger.py — v3
"""Log formatters and setup for the fotocore CLI and library.

JSON records are flat: the session context (``session_id``, ``empresa``,
``operation``) sits beside ``message`` so log shippers can filter by
company or export step without unpacking a nested object. Timestamps come
from the record itself, not from the moment of formatting.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from fotocore.logging.context import LogContext, get_context

ROOT_LOGGER_NAME = "fotocore"


def _record_time(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JsonFormatter(logging.Formatter):
    """One flat JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": _record_time(record).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in get_context().as_dict().items():
            log_entry.setdefault(key, value)

        # logger.info(..., extra={"data": {"count": 3}})
        data = getattr(record, "data", None)
        if data:
            log_entry["data"] = data

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Single-line terminal output: ``time [LEVEL] logger [empresa] (operation) - msg``."""

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            _record_time(record).strftime("%Y-%m-%d %H:%M:%S"),
            f"[{record.levelname:8s}]",
            record.name,
            *_context_tags(get_context()),
            f"- {record.getMessage()}",
        ]
        text = " ".join(parts)
        if record.exc_info and record.exc_info[1] is not None:
            text += "\n" + self.formatException(record.exc_info)
        return text


def _context_tags(ctx: LogContext) -> list[str]:
    tags = []
    if ctx.empresa:
        tags.append(f"[{ctx.empresa}]")
    if ctx.operation:
        tags.append(f"({ctx.operation})")
    return tags


def get_logger(name: str) -> logging.Logger:
    """Return ``fotocore.<name>``; handlers come from setup_logging()."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: str | None = None,
    rotation: str = "10MB",
    retention: int = 30,
) -> None:
    """Attach a stderr handler (and optionally a rotating file) to ``fotocore``.

    Safe to call more than once; earlier handlers are closed and replaced.

    Args:
        level: Log level name; unknown names fall back to INFO.
        log_format: "json" for flat JSON lines, anything else for text.
        log_file: Optional log file path, rotated by size.
        rotation: Max file size before rotation (e.g. "10MB").
        retention: Number of rotated files to keep.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

    formatter: logging.Formatter = (
        JsonFormatter() if log_format == "json" else TextFormatter()
    )

    # stdout is reserved for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        from fotocore.logging.handlers import create_rotating_handler

        file_handler = create_rotating_handler(
            log_file, rotation=rotation, retention=retention
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
