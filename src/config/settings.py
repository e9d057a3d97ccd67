# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for all deployment-specific settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_EXPORT_FORMATS = ("csv", "xls", "kml", "gpx")


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Cache ===
    cache_enabled: bool = True
    cache_backend: Literal["json", "sqlite"] = "json"
    cache_root: Path = Path("~/.fotocore/cache")
    cache_slot_name: str = "obraphoto_image_cache"

    # === Export ===
    export_formats: str = "csv,xls,kml,gpx"
    export_dir: Path = Path("./exports")
    export_base_name: str = "fotos_gps"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("cache_slot_name")
    @classmethod
    def strip_slot_name(cls, v: str) -> str:  # noqa: N805
        return v.strip()

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.cache_enabled and not self.cache_slot_name:
            errors.append("CACHE_SLOT_NAME must not be empty")

        unknown = [
            f for f in self.export_formats_list if f not in SUPPORTED_EXPORT_FORMATS
        ]
        if unknown:
            errors.append(f"EXPORT_FORMATS has unknown formats: {', '.join(unknown)}")

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def export_formats_list(self) -> list[str]:
        """Parse comma-separated export formats."""
        return [
            f.strip().lower() for f in self.export_formats.split(",") if f.strip()
        ]


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or one-off CLI runs).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
