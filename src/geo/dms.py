# src/geo/dms.py — v1
"""Degree-minute-second coordinate parsing from free-form OCR text.

Camera overlays stamp positions like ``23°32'46"S 47°28'59"W``. Only the
first coordinate pair in the text is used.
"""

from __future__ import annotations

import re

_DMS_PATTERN = re.compile(
    r"(\d{1,3})°(\d{1,2})'(\d{1,2})\"?\s*([NS])"
    r"\s*(\d{1,3})°(\d{1,2})'(\d{1,2})\"?\s*([EWO])",
    re.IGNORECASE,
)


def dms_to_decimal(degrees: int, minutes: int, seconds: int) -> float:
    """Convert unsigned DMS components to decimal degrees."""
    return degrees + minutes / 60 + seconds / 3600


def parse_dms_coordinates(text: str) -> tuple[float, float] | None:
    """Return ``(lat, lng)`` in signed decimal degrees, or None if no match.

    South latitudes and west longitudes (``W`` or Portuguese ``O``) are
    negative.
    """
    if not text:
        return None
    match = _DMS_PATTERN.search(text)
    if match is None:
        return None

    lat_deg, lat_min, lat_sec = (int(g) for g in match.group(1, 2, 3))
    lng_deg, lng_min, lng_sec = (int(g) for g in match.group(5, 6, 7))
    lat_dir = match.group(4).upper()
    lng_dir = match.group(8).upper()

    lat = dms_to_decimal(lat_deg, lat_min, lat_sec)
    lng = dms_to_decimal(lng_deg, lng_min, lng_sec)

    if lat_dir == "S":
        lat = -lat
    if lng_dir in ("W", "O"):
        lng = -lng

    return lat, lng
