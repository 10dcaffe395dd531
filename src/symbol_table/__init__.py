"""
Tabla de símbolos con scopes anidados.
Exporta SymbolTable, Scope, ScopeOption, Symbol y EmptyStackError.
"""

from .errors import EmptyStackError
from .symbol_table import Scope, ScopeOption, SymbolTable
from .symbols import Symbol
from .report import ScopeReport, TableReport, build_report, dump_table_json

__all__ = [
    'SymbolTable',
    'Scope',
    'ScopeOption',
    'Symbol',
    'EmptyStackError',

    # Reporte JSON
    'ScopeReport',
    'TableReport',
    'build_report',
    'dump_table_json',
]
