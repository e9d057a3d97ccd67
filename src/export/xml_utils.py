# src/export/xml_utils.py — v2
"""Escaping and number formatting helpers shared by the XML-based exporters."""

from __future__ import annotations

import re
from decimal import Decimal
from xml.sax.saxutils import escape

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# Code points XML 1.0 forbids even when escaped (OCR output can carry them).
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def strip_invalid_xml_chars(text: str) -> str:
    """Drop control characters that no XML 1.0 parser accepts."""
    return _INVALID_XML_CHARS.sub("", text)


def escape_xml(text: str | None) -> str:
    """Escape ``& < > " '`` for element text and attribute values."""
    if not text:
        return ""
    return escape(strip_invalid_xml_chars(text), _QUOTE_ENTITIES)


def cdata(text: str | None) -> str:
    """Wrap text in a CDATA section, splitting any embedded terminator."""
    body = strip_invalid_xml_chars(text or "").replace("]]>", "]]]]><![CDATA[>")
    return f"<![CDATA[{body}]]>"


def format_coordinate(value: float) -> str:
    """Render a degree value in plain positional notation.

    ``str(0.00001)`` is ``1e-05``, which GPX and KML readers reject; the
    shortest round-tripping digits are kept, only the exponent is expanded.
    """
    return format(Decimal(repr(float(value))), "f")
