# src/export/exporter_factory.py — v1
"""Factory for result exporter instantiation."""

from __future__ import annotations

import importlib
from datetime import date

from fotocore.config.settings import Settings
from fotocore.export.base_exporter import BaseExporter

_EXPORTERS: dict[str, str] = {
    "csv": "fotocore.export.csv_exporter.CsvExporter",
    "xls": "fotocore.export.xls_exporter.XlsExporter",
    "kml": "fotocore.export.kml_exporter.KmlExporter",
    "gpx": "fotocore.export.gpx_exporter.GpxExporter",
}

_TABULAR_BASE_NAME = "resultados_obraphoto"


def available_formats() -> list[str]:
    return sorted(_EXPORTERS)


def create_exporter(format_name: str) -> BaseExporter:
    """Instantiate one exporter by format name.

    Raises:
        ValueError: If the format is unknown.
    """
    fqcn = _EXPORTERS.get(format_name.lower())
    if fqcn is None:
        raise ValueError(f"Unsupported export format: {format_name!r}")
    module_path, class_name = fqcn.rsplit(".", 1)
    mod = importlib.import_module(module_path)
    cls = getattr(mod, class_name)
    return cls()


def create_exporters(settings: Settings | None = None) -> list[BaseExporter]:
    """Create all configured exporters (all formats when no settings given)."""
    formats = available_formats() if settings is None else settings.export_formats_list
    return [create_exporter(fmt) for fmt in sorted(set(formats))]


def default_export_filename(
    exporter: BaseExporter, base_name: str | None = None, today: date | None = None,
) -> str:
    """File name offered for a download.

    Tabular exports share one fixed base name; geospatial ones use
    ``base_name`` (the settings' export base name).
    """
    if exporter.format_name in ("csv", "xls"):
        stem = _TABULAR_BASE_NAME
    else:
        stem = base_name or "fotos_gps"
    if today is not None:
        stem = f"{stem}_{today.isoformat()}"
    return f"{stem}{exporter.file_extension}"
