# src/logging/context.py — v2
"""Contextual logging support — attach session, empresa and operation to log records."""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

# Context variables for structured logging, set once per working session.
_session_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "session_id", default=None
)
_empresa: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "empresa", default=None
)
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    session_id: str | None = None
    empresa: str | None = None
    operation: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        session_id=_session_id.get(),
        empresa=_empresa.get(),
        operation=_operation.get(),
    )


def set_session_context(session_id: str, empresa: str | None = None) -> None:
    """Set session-level context (called once per working session)."""
    _session_id.set(session_id)
    _empresa.set(empresa)


@contextmanager
def operation_context(operation: str) -> Iterator[None]:
    """Tag records emitted inside the block with an operation name."""
    token = _operation.set(operation)
    try:
        yield
    finally:
        _operation.reset(token)


def clear_context() -> None:
    """Reset all context variables."""
    _session_id.set(None)
    _empresa.set(None)
    _operation.set(None)
