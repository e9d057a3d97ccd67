# src/cache/models.py — v3
"""Cache domain models: CacheEntry, CacheStats."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, field_validator

from fotocore.core.models import ProcessingResult


class CacheEntry(BaseModel):
    """Single cache entry linking a content fingerprint to an analysis result.

    ``timestamp`` is always timezone-aware UTC. Slots written by older
    builds may carry epoch milliseconds or naive ISO strings; both are
    read as UTC.
    """

    hash: str
    result: ProcessingResult
    timestamp: datetime

    @field_validator("timestamp", mode="before")
    @classmethod
    def epoch_millis_to_datetime(cls, v: Any) -> Any:  # noqa: N805
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return datetime.fromtimestamp(v / 1000, tz=timezone.utc)
        return v

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:  # noqa: N805
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class CacheStats(BaseModel):
    """Read-only cache introspection."""

    count: int
    size_bytes: int
    size_label: str
