# src/cache/dedup.py — v2
"""Upload deduplicator — fingerprint every upload and check the image cache.

Decision flow per upload:
  1. Compute the content fingerprint of the raw bytes
  2. Lookup in the image cache:
     - HIT  → reuse the cached result under the upload's own filename
     - MISS → queue for the remote analysis API
After analysis, ``record`` stores the fresh results with one bulk write.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from fotocore.cache.fingerprint import fingerprint
from fotocore.core.models import ProcessingResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fotocore.cache.image_cache import ImageCache

logger = logging.getLogger(__name__)


class PendingUpload(BaseModel):
    """An upload that still needs the remote analysis call."""

    filename: str
    data: bytes
    hash: str


class DedupPartition(BaseModel):
    """Uploads split into cache hits and pending work."""

    cached: list[ProcessingResult] = Field(default_factory=list)
    pending: list[PendingUpload] = Field(default_factory=list)


class UploadDeduplicator:
    """Check uploads against the image cache before remote analysis."""

    def __init__(self, cache: ImageCache) -> None:
        self._cache = cache

    async def partition(self, uploads: Iterable[tuple[str, bytes]]) -> DedupPartition:
        """Fingerprint each ``(filename, bytes)`` upload and split hits from misses.

        A hit is content-addressed, so the cached result is re-bound to the
        filename it was uploaded under this time.
        """
        result = DedupPartition()
        for filename, data in uploads:
            key = await fingerprint(data)
            cached = self._cache.lookup(key)
            if cached is not None:
                logger.debug("Cache hit: %s → %s", filename, key)
                result.cached.append(cached.model_copy(update={"filename": filename}))
            else:
                result.pending.append(PendingUpload(filename=filename, data=data, hash=key))

        logger.info(
            "Dedup complete: %d cached, %d to process",
            len(result.cached), len(result.pending),
        )
        return result

    def record(
        self, pending: Iterable[PendingUpload], results: Iterable[ProcessingResult],
    ) -> int:
        """Store analysed results under the hash of the upload they came from.

        Results are matched by the ``hash`` the API echoes back, falling back
        to the filename. Error results and unmatched results are skipped.

        Returns:
            Number of results cached.
        """
        pending = list(pending)
        by_hash = {p.hash: p for p in pending}
        by_name = {p.filename: p for p in pending}

        to_store: list[tuple[str, ProcessingResult]] = []
        for r in results:
            if r.is_error:
                continue
            upload = by_hash.get(r.hash) if r.hash else None
            if upload is None:
                upload = by_name.get(r.filename)
            if upload is None:
                logger.debug("No pending upload for result %s, not caching", r.filename)
                continue
            to_store.append((upload.hash, r))

        if not to_store:
            return 0
        return self._cache.store_many(to_store)
