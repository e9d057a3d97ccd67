# src/core/models.py — v2
"""Shared Pydantic domain models used across modules.

No module redefines these types — all imports come from core.models.
ProcessingResult is produced by the remote analysis API and consumed here
as an immutable value.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

SESSION_FORMAT_VERSION = "1.0"
DEFAULT_EMPRESA = "EMPRESA"
SUCCESS_STATUS = "Sucesso"
ERROR_MARKER = "Erro"


# === ANALYSIS RESULTS ===


class ProcessingResult(BaseModel):
    """Classification of one uploaded photo, keyed by filename."""

    model_config = ConfigDict(frozen=True, extra="allow")

    # --- Identity ---
    filename: str
    hash: str | None = None

    # --- Classification ---
    status: str = ""
    portico: str | None = None
    disciplina: str | None = None
    service: str | None = None
    method: str | None = None
    confidence: float | None = None
    dest: str | None = None
    tecnico: str | None = None

    # --- Location and date hints ---
    gps_lat: float | None = None
    gps_lon: float | None = None
    ocr_text: str | None = None
    data_detectada: str | None = None
    rodovia: str | None = None
    km_inicio: str | None = None
    km_fim: str | None = None

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS_STATUS

    @property
    def is_error(self) -> bool:
        return ERROR_MARKER in self.status

    @property
    def has_gps(self) -> bool:
        """True when the EXIF pair is usable (zero counts as missing)."""
        return bool(self.gps_lat) and bool(self.gps_lon)


# === GEOSPATIAL ===


class GPSPoint(BaseModel):
    """Point derived from a result for a single geospatial export."""

    name: str
    lat: float
    lng: float
    description: str = ""
    date: str | None = None


# === SESSION ===


class SavedSession(BaseModel):
    """Recoverable snapshot of the working set."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = SESSION_FORMAT_VERSION
    saved_at: datetime = Field(alias="savedAt")
    empresa: str = DEFAULT_EMPRESA
    results: list[ProcessingResult]
