# src/cache/image_cache.py — v2
"""Content-addressed cache of analysis results with 24 h lazy expiry.

The in-memory map (fingerprint -> CacheEntry) is the source of truth for the
running process; the durable slot is read once at construction and fully
rewritten after every mutation. Expired entries are dropped at load time and
evicted when a lookup touches them; there is no background sweep.

Every mutation, including the eviction write triggered by a lookup, runs to
completion without an ``await``, so on a single event loop a lookup-evict can
never interleave with a store for the same hash.

Example:
    cache = ImageCache(JsonSlotStore("~/.fotocore/cache"))
    key = await fingerprint(data)
    result = cache.lookup(key)
    if result is None:
        result = await analyze(data)
        cache.store(key, result)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone

from fotocore.cache.base_slot_store import BaseSlotStore
from fotocore.cache.models import CacheEntry, CacheStats
from fotocore.core.models import ProcessingResult

logger = logging.getLogger(__name__)

CACHE_TTL = timedelta(hours=24)
DEFAULT_SLOT_NAME = "obraphoto_image_cache"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ImageCache:
    """Fingerprint-keyed cache of ProcessingResult values."""

    def __init__(
        self,
        slot_store: BaseSlotStore,
        slot_name: str = DEFAULT_SLOT_NAME,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = slot_store
        self._slot_name = slot_name
        self._clock = clock
        self._entries: dict[str, CacheEntry] = self._load()

    def __len__(self) -> int:
        return len(self._entries)

    # --- Lookup ---

    def lookup(self, key: str) -> ProcessingResult | None:
        """Return the cached result for ``key`` if present and fresh.

        An expired entry is evicted (and the slot rewritten) as a side effect.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if not self._is_fresh(entry):
            logger.debug("Cache entry %s expired, evicting", key)
            del self._entries[key]
            self._persist()
            return None

        return entry.result

    # --- Mutations ---

    def store(self, key: str, result: ProcessingResult) -> None:
        """Upsert a single entry stamped with the current time."""
        self._entries[key] = CacheEntry(hash=key, result=result, timestamp=self._clock())
        self._persist()

    def store_many(self, entries: Iterable[tuple[str, ProcessingResult]]) -> int:
        """Upsert several entries with one durable write.

        Returns:
            Number of entries stored.
        """
        now = self._clock()
        count = 0
        for key, result in entries:
            self._entries[key] = CacheEntry(hash=key, result=result, timestamp=now)
            count += 1
        self._persist()
        logger.info("Cached %d result(s) in bulk", count)
        return count

    def evict(self, key: str) -> None:
        """Remove one entry (no-op for unknown keys apart from the rewrite)."""
        self._entries.pop(key, None)
        self._persist()

    def clear(self) -> None:
        """Drop every entry and delete the durable slot itself."""
        self._entries.clear()
        try:
            self._store.remove(self._slot_name)
        except Exception as e:
            logger.warning("Failed to remove cache slot %s: %s", self._slot_name, e)

    def close(self) -> None:
        """Release the slot store (closes the SQLite connection)."""
        self._store.close()

    # --- Introspection ---

    def stats(self) -> CacheStats:
        """Entry count plus an estimate of the persisted payload size.

        The estimate counts two bytes per character of the serialized slot,
        so it is an order of magnitude, not an exact byte count.
        """
        try:
            payload = self._store.read(self._slot_name) or ""
        except Exception as e:
            logger.warning("Failed to read cache slot %s: %s", self._slot_name, e)
            payload = self._serialize()
        size_bytes = len(payload) * 2
        return CacheStats(
            count=len(self._entries),
            size_bytes=size_bytes,
            size_label=_format_size(size_bytes),
        )

    # --- Persistence ---

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.timestamp < CACHE_TTL

    def _load(self) -> dict[str, CacheEntry]:
        """Read the slot once; expired, corrupt or unreadable data yields nothing."""
        try:
            payload = self._store.read(self._slot_name)
        except Exception as e:
            logger.warning("Failed to read cache slot %s: %s", self._slot_name, e)
            return {}
        if not payload:
            return {}

        try:
            pairs = json.loads(payload)
            entries = {
                key: CacheEntry.model_validate(data) for key, data in pairs
            }
            fresh = {key: entry for key, entry in entries.items() if self._is_fresh(entry)}
        except Exception as e:
            logger.warning("Discarding corrupt cache slot %s: %s", self._slot_name, e)
            return {}

        dropped = len(entries) - len(fresh)
        if dropped:
            logger.info("Dropped %d expired cache entries on load", dropped)
        return fresh

    def _serialize(self) -> str:
        pairs = [
            [key, entry.model_dump(mode="json")] for key, entry in self._entries.items()
        ]
        return json.dumps(pairs, ensure_ascii=False)

    def _persist(self) -> bool:
        """Rewrite the whole slot from the in-memory map.

        Returns:
            False when the write failed; the in-memory map is kept either way.
        """
        try:
            self._store.write(self._slot_name, self._serialize())
        except Exception as e:
            logger.warning("Failed to save cache slot %s: %s", self._slot_name, e)
            return False
        return True


def _format_size(size_bytes: int) -> str:
    size_kb = size_bytes / 1024
    if size_kb > 1024:
        return f"{size_kb / 1024:.1f} MB"
    return f"{size_kb:.1f} KB"
