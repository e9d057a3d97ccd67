# src/export/columns.py — v1
"""Fixed tabular layout shared by the CSV and spreadsheet exporters.

Headers and row cells are positional; both lists must stay in step.
"""

from __future__ import annotations

from fotocore.core.models import ProcessingResult

HEADERS: list[str] = [
    "Arquivo",
    "Status",
    "Frente de Serviço",
    "Disciplina",
    "Serviço",
    "Data",
    "Método",
    "Confiança (%)",
    "Caminho Destino",
    "Análise Técnica",
]

METHOD_LABELS: dict[str, str] = {
    "heuristica": "Manual",
    "ia_forcada": "IA",
    "ia_fallback": "IA (fallback)",
}


def method_label(method: str | None) -> str:
    """Display label for a classification method; unknown codes pass through."""
    if not method:
        return ""
    return METHOD_LABELS.get(method, method)


def confidence_percent(confidence: float | None) -> str:
    """Integer percentage of a 0..1 confidence, ``"0"`` when absent."""
    if not confidence:
        return "0"
    # halves round up
    return str(int(confidence * 100 + 0.5))


def result_row(result: ProcessingResult) -> list[str]:
    """Cells for one result, in HEADERS order."""
    return [
        result.filename or "",
        result.status or "",
        result.portico or "",
        result.disciplina or "",
        result.service or "",
        result.data_detectada or "",
        method_label(result.method),
        confidence_percent(result.confidence),
        result.dest or "",
        result.tecnico or "",
    ]
