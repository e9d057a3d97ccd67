# tests/unit/export/test_unit_columns.py — v1
"""Tests for export/columns.py — shared tabular layout."""

from __future__ import annotations

import pytest

from fotocore.core.models import ProcessingResult
from fotocore.export.columns import (
    HEADERS,
    confidence_percent,
    method_label,
    result_row,
)


class TestMethodLabel:
    @pytest.mark.parametrize("code,label", [
        ("heuristica", "Manual"),
        ("ia_forcada", "IA"),
        ("ia_fallback", "IA (fallback)"),
        ("outro", "outro"),
        (None, ""),
        ("", ""),
    ])
    def test_labels(self, code, label):
        assert method_label(code) == label


class TestConfidencePercent:
    @pytest.mark.parametrize("value,expected", [
        (0.874, "87"),
        (0.875, "88"),
        (1.0, "100"),
        (0.01, "1"),
        (0.0, "0"),
        (None, "0"),
    ])
    def test_rounding(self, value, expected):
        assert confidence_percent(value) == expected


class TestResultRow:
    def test_matches_header_width(self, sample_results):
        for r in sample_results:
            assert len(result_row(r)) == len(HEADERS)

    def test_cell_order(self, sample_result):
        row = result_row(sample_result)
        assert row[0] == "IMG_0001.jpg"
        assert row[2] == "PONTE_RIO_PINHEIROS"
        assert row[5] == "15/03/2025"
        assert row[6] == "Manual"
        assert row[7] == "87"

    def test_absent_fields_blank(self):
        row = result_row(ProcessingResult(filename="x.jpg"))
        assert row == ["x.jpg", "", "", "", "", "", "", "0", "", ""]
