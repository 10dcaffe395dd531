# src/symbol_table/report.py
"""
Reporte JSON de una SymbolTable (útil para el IDE o logging).

Mismo contenido que SymbolTable.dump(): scopes del actual al global, claves
en orden ascendente, claves y valores convertidos a str.
"""
from __future__ import annotations
from typing import Dict, List

from pydantic import BaseModel

from .symbol_table import OptionLike, ScopeOption, SymbolTable


class ScopeReport(BaseModel):
    name: str
    symbols: Dict[str, str] = {}


class TableReport(BaseModel):
    option: str
    num_scopes: int
    num_symbols: int
    scopes: List[ScopeReport] = []


def build_report(table: SymbolTable, option: OptionLike = ScopeOption.ALL) -> TableReport:
    option = ScopeOption.parse(option)
    scopes = [
        ScopeReport(name=s.name, symbols={str(k): str(v) for k, v in s.items()})
        for s in table.scopes(option)
    ]
    return TableReport(
        option=option.label,
        num_scopes=table.num_scopes(),
        num_symbols=table.size(),
        scopes=scopes,
    )


def dump_table_json(table: SymbolTable, option: OptionLike = ScopeOption.ALL, indent: int = 2) -> str:
    """Return the table serialized as JSON."""
    return build_report(table, option).model_dump_json(indent=indent)
