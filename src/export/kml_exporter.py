# src/export/kml_exporter.py — v2
"""KML 2.2 placemark export (Google Earth and most GIS tools).

Results without recoverable coordinates are skipped; when none remain the
export is empty and no file is produced.
"""

from __future__ import annotations

from datetime import datetime

from fotocore.core.models import GPSPoint, ProcessingResult
from fotocore.export.base_exporter import BaseExporter, ExportDocument
from fotocore.export.xml_utils import cdata, escape_xml, format_coordinate
from fotocore.geo.extractor import extract_gps_points

DEFAULT_DOCUMENT_NAME = "Fotos GPS"
_ICON_BASE = "http://maps.google.com/mapfiles/kml/paddle"


def _placemark(point: GPSPoint, index: int) -> str:
    return f"""    <Placemark>
      <name>{escape_xml(point.name)}</name>
      <description>{cdata(point.description)}</description>
      <Point>
        <coordinates>{format_coordinate(point.lng)},{format_coordinate(point.lat)},0</coordinates>
      </Point>
      <Style>
        <IconStyle>
          <Icon>
            <href>{_ICON_BASE}/{index + 1}.png</href>
          </Icon>
        </IconStyle>
      </Style>
    </Placemark>"""


def generate_kml(
    points: list[GPSPoint],
    document_name: str = DEFAULT_DOCUMENT_NAME,
    now: datetime | None = None,
) -> str:
    """Build a KML document from already-extracted points."""
    exported_on = (now or datetime.now()).strftime("%d/%m/%Y")
    placemarks = "\n".join(_placemark(p, i) for i, p in enumerate(points))
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2">
  <Document>
    <name>{escape_xml(document_name)}</name>
    <description>Exportado do ObraPhoto AI em {exported_on}</description>
    <Style id="photoStyle">
      <IconStyle>
        <Icon>
          <href>{_ICON_BASE}/camera.png</href>
        </Icon>
      </IconStyle>
    </Style>
{placemarks}
  </Document>
</kml>
"""


def to_kml(
    results: list[ProcessingResult],
    document_name: str = DEFAULT_DOCUMENT_NAME,
    now: datetime | None = None,
) -> tuple[str, int]:
    """Return ``(markup, count)``; ``("", 0)`` when nothing is geolocatable."""
    points = extract_gps_points(results)
    if not points:
        return "", 0
    return generate_kml(points, document_name, now), len(points)


class KmlExporter(BaseExporter):
    """Export geolocated results to KML."""

    def __init__(self, document_name: str = DEFAULT_DOCUMENT_NAME) -> None:
        self._document_name = document_name

    @property
    def format_name(self) -> str:
        return "kml"

    @property
    def file_extension(self) -> str:
        return ".kml"

    @property
    def media_type(self) -> str:
        return "application/vnd.google-earth.kml+xml"

    def render(self, results: list[ProcessingResult]) -> ExportDocument:
        content, count = to_kml(results, self._document_name)
        return ExportDocument(content=content, count=count)
