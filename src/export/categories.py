# src/export/categories.py — v1
"""Work-category grouping derived from the location tag (pórtico).

Keyword lists are checked in order; the first matching category wins.
"""

from __future__ import annotations

OTHER_CATEGORY = "OUTROS"

_CATEGORY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("OAE", ("PONTE", "VIADUTO", "PASSARELA", "TUNEL", "GALERIA", "OAE", "BUEIRO")),
    ("CONTENCAO", (
        "CORTINA", "MURO", "GABIAO", "TALUDE", "TIRANTE", "SOLO_GRAMPEADO",
        "TERRA_ARMADA",
    )),
    ("RODOVIARIA", (
        "BSO", "PORTICO", "FREE_FLOW", "PRACA", "PMV", "CCO", "SAU", "RETORNO",
        "ROTATORIA", "TREVO", "ACESSO",
    )),
    ("PAVIMENTACAO", ("PAVIMENT", "RECAPE", "FRESAG", "CBUQ", "MICRO", "TAPA_BURACO")),
    ("TERRAPLENAGEM", ("TERRAPL", "ATERRO", "CORTE", "BOTA_FORA", "JAZIDA")),
    ("DRENAGEM", (
        "DRENAG", "SARJETA", "VALETA", "DESCIDA", "CAIXA_COLETA", "POCO_VISITA",
        "DRENO", "DISSIPADOR",
    )),
    ("SINALIZACAO", ("SINALIZ", "DEFENSA", "BARREIRA", "TACHA", "SEMAFORO")),
    ("SANEAMENTO", (
        "REDE_AGUA", "REDE_ESGOTO", "ETE", "ETA", "RESERVATORIO", "ELEVATORIA",
        "ADUTORA",
    )),
    ("ELETRICA", ("ELETRIC", "SUBESTACAO", "ILUMINAC", "POSTE", "TELECOM", "FIBRA")),
    ("EDIFICACAO", (
        "FUNDAC", "ESTRUTURA", "ALVENARIA", "COBERTURA", "REVESTIM", "INSTALAC",
        "ESTACA", "SAPATA",
    )),
]

CATEGORY_NAMES: dict[str, str] = {
    "OAE": "Obras de Arte Especiais",
    "CONTENCAO": "Obras de Contenção",
    "RODOVIARIA": "Infraestrutura Rodoviária",
    "PAVIMENTACAO": "Pavimentação",
    "TERRAPLENAGEM": "Terraplenagem",
    "DRENAGEM": "Drenagem",
    "SINALIZACAO": "Sinalização",
    "SANEAMENTO": "Saneamento",
    "ELETRICA": "Elétrica e Telecom",
    "EDIFICACAO": "Edificações",
    OTHER_CATEGORY: "Outros",
}


def category_for_portico(portico: str | None) -> str:
    """Return the category code for a location tag."""
    if not portico:
        return OTHER_CATEGORY
    upper = portico.upper()
    for code, keywords in _CATEGORY_KEYWORDS:
        if any(k in upper for k in keywords):
            return code
    return OTHER_CATEGORY


def category_name(code: str) -> str:
    return CATEGORY_NAMES.get(code, code)
