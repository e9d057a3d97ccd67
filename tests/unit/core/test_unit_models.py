# tests/unit/core/test_unit_models.py — v2
"""Tests for core/models.py — shared Pydantic models.

Also covers version.py import validation.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from fotocore.core.errors import FotocoreError, ImageConversionError, SessionFormatError
from fotocore.core.models import (
    DEFAULT_EMPRESA,
    SESSION_FORMAT_VERSION,
    GPSPoint,
    ProcessingResult,
    SavedSession,
)
from fotocore.version import __version__


# === VERSION ===


class TestVersion:
    def test_version_format(self):
        assert len(__version__.split(".")) == 3


# === PROCESSING RESULT ===


class TestProcessingResult:
    def test_minimal(self):
        r = ProcessingResult(filename="a.jpg")
        assert r.status == ""
        assert r.confidence is None
        assert not r.is_success
        assert not r.is_error

    def test_filename_required(self):
        with pytest.raises(ValidationError):
            ProcessingResult()  # type: ignore[call-arg]

    def test_frozen(self, sample_result):
        with pytest.raises(ValidationError):
            sample_result.status = "Erro"  # type: ignore[misc]

    def test_status_flags(self, sample_result, error_result):
        assert sample_result.is_success
        assert not sample_result.is_error
        assert error_result.is_error
        assert not error_result.is_success

    def test_has_gps(self, exif_result, sample_result):
        assert exif_result.has_gps
        assert not sample_result.has_gps

    def test_zero_coordinate_counts_as_missing(self):
        assert not ProcessingResult(filename="a.jpg", gps_lat=0.0, gps_lon=-46.6).has_gps

    def test_unknown_fields_kept(self):
        r = ProcessingResult.model_validate({"filename": "a.jpg", "obra": "Lote 2"})
        assert r.model_dump()["obra"] == "Lote 2"


# === GPS POINT ===


class TestGPSPoint:
    def test_defaults(self):
        p = GPSPoint(name="P", lat=-1.0, lng=2.0)
        assert p.description == ""
        assert p.date is None


# === SESSION ===


class TestSavedSession:
    def test_alias_round_trip(self, sample_result):
        s = SavedSession(
            saved_at=datetime(2026, 3, 10, tzinfo=timezone.utc),
            results=[sample_result],
        )
        data = s.model_dump(mode="json", by_alias=True)
        assert "savedAt" in data
        assert data["version"] == SESSION_FORMAT_VERSION
        assert data["empresa"] == DEFAULT_EMPRESA
        assert SavedSession.model_validate(data) == s


# === ERRORS ===


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(SessionFormatError, FotocoreError)
        assert issubclass(ImageConversionError, FotocoreError)
