# src/session/serializer.py — v1
"""Session snapshot save/load and merge.

A snapshot is the JSON object ``{version, savedAt, empresa, results}``.
Loading is all-or-nothing: a malformed snapshot is rejected as a whole.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any

from pydantic import ValidationError

from fotocore.core.errors import SessionFormatError
from fotocore.core.models import (
    DEFAULT_EMPRESA,
    SESSION_FORMAT_VERSION,
    ProcessingResult,
    SavedSession,
)

logger = logging.getLogger(__name__)

SESSION_FILENAME_PREFIX = "obraphoto_sessao"


@dataclass(frozen=True)
class LoadedSession:
    """Results and context label recovered from a snapshot."""

    results: list[ProcessingResult]
    empresa: str


def save_session(
    results: list[ProcessingResult],
    empresa: str,
    saved_at: datetime | None = None,
) -> SavedSession:
    """Wrap results and context in a snapshot stamped with the current version."""
    return SavedSession(
        version=SESSION_FORMAT_VERSION,
        saved_at=saved_at or datetime.now(timezone.utc),
        empresa=empresa,
        results=list(results),
    )


def dump_session(session: SavedSession) -> str:
    """Pretty-printed JSON with the on-disk key spellings."""
    data = session.model_dump(mode="json", by_alias=True, exclude_none=False)
    return json.dumps(data, ensure_ascii=False, indent=2)


def session_filename(today: date | None = None) -> str:
    """Download name for a snapshot, e.g. ``obraphoto_sessao_2026-10-18.json``."""
    today = today or datetime.now(timezone.utc).date()
    return f"{SESSION_FILENAME_PREFIX}_{today.isoformat()}.json"


def load_session(payload: bytes | str) -> LoadedSession:
    """Parse a snapshot.

    Raises:
        SessionFormatError: If the payload is not JSON, is not an object,
            lacks ``version``, lacks an array ``results``, or contains
            results that do not validate.
    """
    try:
        data: Any = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SessionFormatError(f"Session is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SessionFormatError("Session must be a JSON object")
    if not data.get("version"):
        raise SessionFormatError("Session is missing 'version'")
    if not isinstance(data.get("results"), list):
        raise SessionFormatError("Session is missing a 'results' array")

    try:
        results = [ProcessingResult.model_validate(r) for r in data["results"]]
    except ValidationError as e:
        raise SessionFormatError(f"Session contains invalid results: {e}") from e

    empresa = data.get("empresa") or DEFAULT_EMPRESA
    logger.info("Loaded session with %d result(s) for %s", len(results), empresa)
    return LoadedSession(results=results, empresa=empresa)


def try_load_session(payload: bytes | str) -> LoadedSession | None:
    """Like ``load_session`` but reports failure as None."""
    try:
        return load_session(payload)
    except SessionFormatError as e:
        logger.error("Failed to import session: %s", e)
        return None


def merge_results(
    existing: list[ProcessingResult], imported: list[ProcessingResult],
) -> list[ProcessingResult]:
    """Merge imported results into existing ones by filename.

    New filenames are appended in imported order; a filename already present
    is replaced wholesale by the imported record (last import wins).
    """
    merged = list(existing)
    index_by_name: dict[str, int] = {}
    for i, r in enumerate(merged):
        index_by_name.setdefault(r.filename, i)

    for result in imported:
        idx = index_by_name.get(result.filename)
        if idx is None:
            index_by_name[result.filename] = len(merged)
            merged.append(result)
        else:
            merged[idx] = result

    return merged
