# src/export/xls_exporter.py — v1
"""Excel 2003 XML Spreadsheet export (``.xls``).

One worksheet with a styled header row followed by one row per result,
using the same columns as the CSV export.
"""

from __future__ import annotations

from fotocore.core.models import ProcessingResult
from fotocore.export.base_exporter import BaseExporter, ExportDocument
from fotocore.export.columns import HEADERS, result_row
from fotocore.export.xml_utils import escape_xml

WORKSHEET_NAME = "Resultados"

_WORKBOOK_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<?mso-application progid="Excel.Sheet"?>
<Workbook xmlns="urn:schemas-microsoft-com:office:spreadsheet"
  xmlns:ss="urn:schemas-microsoft-com:office:spreadsheet">
  <Styles>
    <Style ss:ID="Header">
      <Font ss:Bold="1" ss:Color="#FFFFFF"/>
      <Interior ss:Color="#4A90A4" ss:Pattern="Solid"/>
    </Style>
  </Styles>
  <Worksheet ss:Name="{sheet_name}">
    <Table>
{rows}
    </Table>
  </Worksheet>
</Workbook>
"""


def _cell(value: str, style: str | None = None) -> str:
    style_attr = f' ss:StyleID="{style}"' if style else ""
    return f'<Cell{style_attr}><Data ss:Type="String">{escape_xml(value)}</Data></Cell>'


def _row(cells: list[str], style: str | None = None) -> str:
    return "      <Row>" + "".join(_cell(c, style) for c in cells) + "</Row>"


def to_spreadsheet_markup(results: list[ProcessingResult]) -> str:
    """Serialize results as an Excel-compatible XML workbook."""
    rows = [_row(HEADERS, style="Header")]
    rows.extend(_row(result_row(r)) for r in results)
    return _WORKBOOK_TEMPLATE.format(
        sheet_name=escape_xml(WORKSHEET_NAME), rows="\n".join(rows),
    )


class XlsExporter(BaseExporter):
    """Export results to Excel XML Spreadsheet."""

    @property
    def format_name(self) -> str:
        return "xls"

    @property
    def file_extension(self) -> str:
        return ".xls"

    @property
    def media_type(self) -> str:
        return "application/vnd.ms-excel;charset=utf-8"

    def render(self, results: list[ProcessingResult]) -> ExportDocument:
        return ExportDocument(content=to_spreadsheet_markup(results), count=len(results))
