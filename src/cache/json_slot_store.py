# src/cache/json_slot_store.py — v2
"""JSON file-based slot store (default CACHE_BACKEND=json).

Stores each slot as an individual ``<key>.json`` file under CACHE_ROOT.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fotocore.cache.base_slot_store import BaseSlotStore

logger = logging.getLogger(__name__)


class JsonSlotStore(BaseSlotStore):
    """File-based slot store using one JSON file per key."""

    def __init__(self, cache_root: Path | str) -> None:
        self._root = Path(cache_root).expanduser()
        self._root.mkdir(parents=True, exist_ok=True)

    def read(self, key: str) -> str | None:
        """Return the raw file content for ``key``."""
        path = self._slot_path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, payload: str) -> None:
        """Write through a sibling temp file so readers never see half a payload."""
        path = self._slot_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(payload, encoding="utf-8")
        tmp_path.replace(path)

    def remove(self, key: str) -> None:
        """Delete the slot file."""
        path = self._slot_path(key)
        if path.exists():
            path.unlink()
            logger.debug("Removed slot %s", key)

    def _slot_path(self, key: str) -> Path:
        """Return file path for a slot key."""
        safe_key = key.replace("/", "_").replace("\\", "_")
        return self._root / f"{safe_key}.json"
