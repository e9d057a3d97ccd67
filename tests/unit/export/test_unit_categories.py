# tests/unit/export/test_unit_categories.py — v1
"""Tests for export/categories.py — location tag grouping."""

from __future__ import annotations

import pytest

from fotocore.export.categories import (
    CATEGORY_NAMES,
    OTHER_CATEGORY,
    category_for_portico,
    category_name,
)


class TestCategoryForPortico:
    @pytest.mark.parametrize("portico,code", [
        ("PONTE_RIO_PINHEIROS", "OAE"),
        ("viaduto_km_40", "OAE"),
        ("MURO_ARRIMO_03", "CONTENCAO"),
        ("PORTICO_P12", "RODOVIARIA"),
        ("RECAPE_PISTA_SUL", "PAVIMENTACAO"),
        ("ATERRO_KM5", "TERRAPLENAGEM"),
        ("DRENAGEM_KM12", "DRENAGEM"),
        ("DEFENSA_METALICA", "SINALIZACAO"),
        ("ETE_NORTE", "SANEAMENTO"),
        ("SUBESTACAO_01", "ELETRICA"),
        ("FUNDACAO_BLOCO_B", "EDIFICACAO"),
    ])
    def test_known_keywords(self, portico, code):
        assert category_for_portico(portico) == code

    def test_first_category_wins(self):
        # matches OAE (GALERIA) and DRENAGEM (DRENAG)
        assert category_for_portico("GALERIA_DRENAGEM") == "OAE"

    @pytest.mark.parametrize("portico", [None, "", "CANTEIRO_CENTRAL"])
    def test_other(self, portico):
        assert category_for_portico(portico) == OTHER_CATEGORY


class TestCategoryName:
    def test_every_code_named(self):
        for code in CATEGORY_NAMES:
            assert category_name(code)

    def test_unknown_passes_through(self):
        assert category_name("XYZ") == "XYZ"
