# tests/conftest.py — v2
"""Shared test fixtures for all unit and integration tests.

Provides sample results (plain, EXIF-geolocated, OCR-geolocated), a
controllable clock and temp directories. No external dependencies.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from fotocore.core.models import ProcessingResult


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


# === FIXTURES: Sample data ===


@pytest.fixture
def sample_result() -> ProcessingResult:
    """Successful classification with no location data."""
    return ProcessingResult(
        filename="IMG_0001.jpg",
        status="Sucesso",
        portico="PONTE_RIO_PINHEIROS",
        disciplina="ESTRUTURA",
        service="CONCRETAGEM",
        method="heuristica",
        confidence=0.874,
        dest="OBRA/ESTRUTURA/PONTE_RIO_PINHEIROS/03_MARCO",
        tecnico="Concretagem da laje do tabuleiro.",
        data_detectada="15/03/2025",
    )


@pytest.fixture
def exif_result() -> ProcessingResult:
    """Result with an EXIF GPS pair."""
    return ProcessingResult(
        filename="IMG_0002.jpg",
        status="Sucesso",
        portico="DRENAGEM_KM12",
        disciplina="DRENAGEM",
        service="SARJETA",
        method="ia_forcada",
        confidence=0.91,
        gps_lat=-23.5505,
        gps_lon=-46.6333,
        rodovia="SP-280",
        km_inicio="12+300",
        data_detectada="02/04/2025",
    )


@pytest.fixture
def ocr_result() -> ProcessingResult:
    """Result whose only location is a DMS stamp in the OCR text."""
    return ProcessingResult(
        filename="IMG_0003.jpg",
        status="Sucesso",
        service="TERRAPLENAGEM",
        method="ia_fallback",
        confidence=0.66,
        ocr_text="Timemark 10/05/2025 14:02 23°32'46\"S 47°28'59\"W Alt 742m",
    )


@pytest.fixture
def error_result() -> ProcessingResult:
    """Failed analysis."""
    return ProcessingResult(
        filename="IMG_0004.jpg",
        status="Erro: timeout na análise",
    )


@pytest.fixture
def sample_results(
    sample_result: ProcessingResult,
    exif_result: ProcessingResult,
    ocr_result: ProcessingResult,
    error_result: ProcessingResult,
) -> list[ProcessingResult]:
    return [sample_result, exif_result, ocr_result, error_result]


# === FIXTURES: Clock ===


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 3, 10, 9, 0, 0, tzinfo=timezone.utc))


# === FIXTURES: Temp dirs ===


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Temporary export directory."""
    out = tmp_path / "exports"
    out.mkdir()
    return out


@pytest.fixture
def tmp_cache_dir(tmp_path: Path) -> Path:
    """Temporary cache directory."""
    cache = tmp_path / "cache"
    cache.mkdir()
    return cache
