# src/export/gpx_exporter.py — v2
"""GPX 1.1 waypoint export.

Each waypoint carries a timestamp: the detected ``DD/MM/YYYY`` date at noon
UTC when it parses, otherwise the export time. This is a best-available
date, not a capture time.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from fotocore.core.models import GPSPoint, ProcessingResult
from fotocore.export.base_exporter import BaseExporter, ExportDocument
from fotocore.export.xml_utils import escape_xml, format_coordinate
from fotocore.geo.extractor import extract_gps_points

DEFAULT_TRACK_NAME = "Fotos GPS"
CREATOR = "ObraPhoto AI"

_DATE_PATTERN = re.compile(r"(\d{2})/(\d{2})/(\d{4})")


def _iso(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def gpx_time(date_str: str | None, now: datetime) -> str:
    """Timestamp for a waypoint from a detected date, falling back to ``now``."""
    detected = _parse_detected_date(date_str) if date_str else None
    return _iso(detected or now)


def _parse_detected_date(date_str: str) -> datetime | None:
    match = _DATE_PATTERN.search(date_str)
    if match is None:
        return None
    day, month, year = (int(g) for g in match.groups())
    try:
        return datetime(year, month, day, 12, tzinfo=timezone.utc)
    except ValueError:
        return None


def _waypoint(point: GPSPoint, now: datetime) -> str:
    return f"""  <wpt lat="{format_coordinate(point.lat)}" lon="{format_coordinate(point.lng)}">
    <name>{escape_xml(point.name)}</name>
    <desc>{escape_xml(point.description)}</desc>
    <time>{gpx_time(point.date, now)}</time>
    <sym>Camera</sym>
  </wpt>"""


def generate_gpx(
    points: list[GPSPoint],
    track_name: str = DEFAULT_TRACK_NAME,
    now: datetime | None = None,
) -> str:
    """Build a GPX document from already-extracted points."""
    now = now or datetime.now(timezone.utc)
    waypoints = "\n".join(_waypoint(p, now) for p in points)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="{CREATOR}"
  xmlns="http://www.topografix.com/GPX/1/1"
  xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
  xsi:schemaLocation="http://www.topografix.com/GPX/1/1 http://www.topografix.com/GPX/1/1/gpx.xsd">
  <metadata>
    <name>{escape_xml(track_name)}</name>
    <desc>Exportado do ObraPhoto AI</desc>
    <time>{_iso(now)}</time>
  </metadata>
{waypoints}
</gpx>
"""


def to_gpx(
    results: list[ProcessingResult],
    track_name: str = DEFAULT_TRACK_NAME,
    now: datetime | None = None,
) -> tuple[str, int]:
    """Return ``(markup, count)``; ``("", 0)`` when nothing is geolocatable."""
    points = extract_gps_points(results)
    if not points:
        return "", 0
    return generate_gpx(points, track_name, now), len(points)


class GpxExporter(BaseExporter):
    """Export geolocated results to GPX waypoints."""

    def __init__(self, track_name: str = DEFAULT_TRACK_NAME) -> None:
        self._track_name = track_name

    @property
    def format_name(self) -> str:
        return "gpx"

    @property
    def file_extension(self) -> str:
        return ".gpx"

    @property
    def media_type(self) -> str:
        return "application/gpx+xml"

    def render(self, results: list[ProcessingResult]) -> ExportDocument:
        content, count = to_gpx(results, self._track_name)
        return ExportDocument(content=content, count=count)
