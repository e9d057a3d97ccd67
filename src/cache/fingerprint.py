# src/cache/fingerprint.py — v3
"""Content fingerprint used as the image cache key.

SHA-256 over the full file bytes, truncated to a short hex prefix. The
prefix is a dedup key, not an identity: two different images sharing a
prefix would share a cache slot, and nothing here tries to detect that.
"""

from __future__ import annotations

import asyncio
import hashlib

FINGERPRINT_LENGTH = 16


def compute_fingerprint(raw_bytes: bytes) -> str:
    """Return the truncated SHA-256 hex digest of ``raw_bytes``."""
    return hashlib.sha256(raw_bytes).hexdigest()[:FINGERPRINT_LENGTH]


async def fingerprint(raw_bytes: bytes) -> str:
    """Compute the fingerprint off the event loop.

    Cancelling the awaiting task simply drops the digest; nothing is stored.
    """
    return await asyncio.to_thread(compute_fingerprint, raw_bytes)
