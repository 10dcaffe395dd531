# src/symbol_table/symbols.py

from typing import Any, Dict, Optional


class Symbol:
    def __init__(self, name: str, sym_type: Any, metadata: Optional[Dict[str, Any]] = None):
        self.name = name
        self.type = sym_type
        self.metadata = metadata or {}

    def __str__(self):
        # en el dump solo se muestra el tipo: "x: int"
        return str(self.type)

    def __repr__(self):
        return f"Symbol(name={self.name!r}, type={self.type!r}, metadata={self.metadata})"

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return (self.name, self.type, self.metadata) == (other.name, other.type, other.metadata)

    def __hash__(self):
        return hash((self.name, self.type))
