# tests/unit/cache/test_cache_models.py — v3
"""Tests for cache/models.py."""

from __future__ import annotations

from datetime import datetime, timezone

from fotocore.cache.models import CacheEntry, CacheStats


class TestCacheEntry:
    def test_json_round_trip(self, sample_result):
        entry = CacheEntry(
            hash="0123456789abcdef",
            result=sample_result,
            timestamp=datetime(2026, 3, 10, 9, tzinfo=timezone.utc),
        )
        restored = CacheEntry.model_validate_json(entry.model_dump_json())
        assert restored == entry
        assert restored.timestamp.tzinfo is not None

    def test_result_extra_fields_preserved(self):
        entry = CacheEntry.model_validate({
            "hash": "h",
            "result": {"filename": "x.jpg", "status": "Sucesso", "lote": 7},
            "timestamp": "2026-03-10T09:00:00+00:00",
        })
        assert entry.result.model_dump()["lote"] == 7

    def test_naive_timestamp_assumed_utc(self):
        entry = CacheEntry.model_validate({
            "hash": "h", "result": {"filename": "x.jpg"},
            "timestamp": "2026-03-10T09:00:00",
        })
        assert entry.timestamp == datetime(2026, 3, 10, 9, tzinfo=timezone.utc)

    def test_epoch_millis_timestamp(self):
        entry = CacheEntry.model_validate({
            "hash": "h", "result": {"filename": "x.jpg"}, "timestamp": 1773133200000,
        })
        assert entry.timestamp == datetime(2026, 3, 10, 9, tzinfo=timezone.utc)


class TestCacheStats:
    def test_fields(self):
        stats = CacheStats(count=2, size_bytes=2048, size_label="2.0 KB")
        assert stats.count == 2
        assert stats.size_label == "2.0 KB"
