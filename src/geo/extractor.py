# src/geo/extractor.py — v1
"""Derive a GPSPoint from a ProcessingResult.

Precedence: EXIF GPS pair, then DMS coordinates recovered from OCR text.
Nothing is guessed or interpolated; no source means no point.
"""

from __future__ import annotations

from fotocore.core.models import GPSPoint, ProcessingResult
from fotocore.geo.dms import parse_dms_coordinates


def extract_coordinates(result: ProcessingResult) -> tuple[float, float] | None:
    """Return ``(lat, lng)`` for a result, or None."""
    if result.has_gps:
        return result.gps_lat, result.gps_lon  # type: ignore[return-value]
    if result.ocr_text:
        return parse_dms_coordinates(result.ocr_text)
    return None


def extract_gps_point(result: ProcessingResult) -> GPSPoint | None:
    """Build the named, described point for one result."""
    coords = extract_coordinates(result)
    if coords is None:
        return None
    lat, lng = coords

    return GPSPoint(
        name=_point_name(result),
        lat=lat,
        lng=lng,
        description=_point_description(result),
        date=result.data_detectada,
    )


def extract_gps_points(results: list[ProcessingResult]) -> list[GPSPoint]:
    """Extract points for every geolocatable result, in input order."""
    points: list[GPSPoint] = []
    for r in results:
        point = extract_gps_point(r)
        if point is not None:
            points.append(point)
    return points


def _point_name(result: ProcessingResult) -> str:
    if not result.service:
        return result.filename
    if result.portico:
        return f"{result.service} - {result.portico}"
    return result.service


def _point_description(result: ProcessingResult) -> str:
    labelled = [
        ("Disciplina", result.disciplina),
        ("Rodovia", result.rodovia),
        ("KM", result.km_inicio),
        ("Data", result.data_detectada),
    ]
    return "\n".join(f"{label}: {value}" for label, value in labelled if value)
