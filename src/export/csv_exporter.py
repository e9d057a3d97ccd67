# src/export/csv_exporter.py — v1
"""Semicolon-delimited CSV export for spreadsheet tools.

Every cell is quoted and embedded quotes are doubled. The text starts with
a UTF-8 byte-order mark so Excel detects the encoding.
"""

from __future__ import annotations

import csv
import io

from fotocore.core.models import ProcessingResult
from fotocore.export.base_exporter import BaseExporter, ExportDocument
from fotocore.export.columns import HEADERS, result_row

BOM = "\ufeff"
DELIMITER = ";"


def to_delimited_text(results: list[ProcessingResult]) -> str:
    """Serialize results as BOM-prefixed, fully quoted ``;``-separated text."""
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=DELIMITER,
        quotechar='"',
        quoting=csv.QUOTE_ALL,
        doublequote=True,
        lineterminator="\n",
    )
    writer.writerow(HEADERS)
    for r in results:
        writer.writerow(result_row(r))
    return BOM + buffer.getvalue()


class CsvExporter(BaseExporter):
    """Export results to ``;``-separated CSV."""

    @property
    def format_name(self) -> str:
        return "csv"

    @property
    def file_extension(self) -> str:
        return ".csv"

    @property
    def media_type(self) -> str:
        return "text/csv;charset=utf-8"

    def render(self, results: list[ProcessingResult]) -> ExportDocument:
        return ExportDocument(content=to_delimited_text(results), count=len(results))
