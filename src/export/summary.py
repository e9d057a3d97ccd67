# src/export/summary.py — v1
"""Human-readable processing report.

Aggregates totals, success/error counts, mean confidence, GPS coverage and
breakdowns by category, discipline and location tag.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime

from fotocore.core.models import ProcessingResult
from fotocore.export.categories import category_for_portico, category_name

UNCLASSIFIED = "NAO_IDENTIFICADO"


def mean_confidence(results: list[ProcessingResult]) -> float:
    """Mean confidence as a percentage over results that report one, else 0."""
    confidences = [r.confidence for r in results if r.confidence]
    if not confidences:
        return 0.0
    return sum(confidences) / len(confidences) * 100


def _pct(part: int, total: int) -> str:
    return f"{(part / total * 100) if total else 0.0:.1f}"


def _section(title: str) -> list[str]:
    return ["", title, "-" * len(title)]


def summary_report(
    results: list[ProcessingResult], generated_at: datetime | None = None,
) -> str:
    """Build the plain-text summary report.

    Args:
        results: Result collection to summarize.
        generated_at: Report timestamp (defaults to now).

    Returns:
        Formatted report text.
    """
    generated_at = generated_at or datetime.now()
    total = len(results)
    success = sum(1 for r in results if r.is_success)
    errors = sum(1 for r in results if r.is_error)
    with_gps = sum(1 for r in results if r.has_gps)

    by_category = Counter(
        category_name(category_for_portico(r.portico)) for r in results
    )
    by_discipline = Counter(r.disciplina or UNCLASSIFIED for r in results)
    by_portico = Counter(r.portico or UNCLASSIFIED for r in results)

    lines: list[str] = [
        "RELATÓRIO DE PROCESSAMENTO - ObraPhoto AI",
        "==========================================",
        f"Data: {generated_at.strftime('%d/%m/%Y %H:%M:%S')}",
        *_section("RESUMO GERAL"),
        f"Total de fotos: {total}",
        f"Processadas com sucesso: {success} ({_pct(success, total)}%)",
        f"Erros: {errors} ({_pct(errors, total)}%)",
        f"Confiança média: {mean_confidence(results):.1f}%",
        f"Fotos com GPS: {with_gps} ({_pct(with_gps, total)}%)",
        *_section("FOTOS POR CATEGORIA"),
    ]
    for name, count in by_category.most_common():
        lines.append(f"{name}: {count} foto(s) ({_pct(count, total)}%)")

    lines.extend(_section("FOTOS POR DISCIPLINA"))
    for name, count in by_discipline.most_common():
        lines.append(f"{name}: {count} foto(s)")

    lines.extend(_section("FOTOS POR FRENTE DE SERVIÇO"))
    for name, count in by_portico.most_common():
        lines.append(f"{name}: {count} foto(s)")

    return "\n".join(lines) + "\n"
