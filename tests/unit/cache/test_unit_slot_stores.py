# tests/unit/cache/test_unit_slot_stores.py — v3
"""Tests for the JSON-file and SQLite slot stores."""

from __future__ import annotations

import sqlite3

import pytest

from fotocore.cache.json_slot_store import JsonSlotStore
from fotocore.cache.sqlite_slot_store import SqliteSlotStore


@pytest.fixture(params=["json", "sqlite"])
def store(request, tmp_path):
    if request.param == "json":
        yield JsonSlotStore(tmp_path / "slots")
    else:
        s = SqliteSlotStore(tmp_path / "slots" / "cache.db")
        yield s
        s.close()


class TestSlotStoreContract:
    def test_missing_key(self, store):
        assert store.read("nothing") is None

    def test_write_read(self, store):
        store.write("k", '[["a", {}]]')
        assert store.read("k") == '[["a", {}]]'

    def test_overwrite(self, store):
        store.write("k", "first")
        store.write("k", "second")
        assert store.read("k") == "second"

    def test_remove(self, store):
        store.write("k", "payload")
        store.remove("k")
        assert store.read("k") is None

    def test_remove_missing_is_noop(self, store):
        store.remove("never-written")
        assert store.read("never-written") is None

    def test_unicode_payload(self, store):
        store.write("k", "Análise técnica — ponte")
        assert store.read("k") == "Análise técnica — ponte"

    def test_keys_are_independent(self, store):
        store.write("a", "1")
        store.write("b", "2")
        store.remove("a")
        assert store.read("b") == "2"


class TestJsonSlotStore:
    def test_creates_root(self, tmp_path):
        root = tmp_path / "deep" / "cache"
        JsonSlotStore(root)
        assert root.is_dir()

    def test_one_file_per_slot(self, tmp_path):
        store = JsonSlotStore(tmp_path)
        store.write("obraphoto_image_cache", "[]")
        assert (tmp_path / "obraphoto_image_cache.json").read_text(encoding="utf-8") == "[]"
        assert not list(tmp_path.glob("*.tmp"))

    def test_path_separators_sanitised(self, tmp_path):
        store = JsonSlotStore(tmp_path)
        store.write("a/b", "x")
        assert (tmp_path / "a_b.json").exists()
        assert store.read("a/b") == "x"


class TestSqliteSlotStore:
    def test_persists_across_connections(self, tmp_path):
        db = tmp_path / "cache.db"
        first = SqliteSlotStore(db)
        first.write("k", "payload")
        first.close()

        second = SqliteSlotStore(db)
        assert second.read("k") == "payload"
        second.close()

    def test_close_releases_connection(self, tmp_path):
        store = SqliteSlotStore(tmp_path / "cache.db")
        store.close()
        with pytest.raises(sqlite3.ProgrammingError):
            store.read("k")


class TestJsonSlotStoreClose:
    def test_close_is_noop(self, tmp_path):
        store = JsonSlotStore(tmp_path)
        store.write("k", "x")
        store.close()
        assert store.read("k") == "x"
