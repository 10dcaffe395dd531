# src/symbol_table/symbol_table.py
"""
SymbolTable: pila de scopes léxicos usada por el front end de un compilador.

Características:
- enter_scope(name) / exit_scope() => push / pop estricto (LIFO)
- insert(key, value) => define o reemplaza en el scope actual
- lookup(key, option) => busca en el scope actual, en el global o en todos
  (del más interno al global, gana el primero encontrado)
- size() / num_scopes() => O(1), el total de símbolos se mantiene incrementalmente
- dump(output, option) => reporte textual determinista (claves en orden ascendente)

El primer scope que se abre es el GLOBAL. Sin scopes abiertos la tabla está
"vacía" y toda operación que necesite un scope lanza EmptyStackError.
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Dict, Generic, Iterable, Iterator, List, Optional, TextIO, Tuple, TypeVar, Union
from collections import deque
import io
import logging
import sys

from .errors import EmptyStackError

log = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

BANNER = "*" * 50
TITLE_PAD = "*" * 15


class ScopeOption(Enum):
    ALL = "ALL"
    CURRENT = "CUR"
    GLOBAL = "GBL"

    @property
    def label(self) -> str:
        """Short label shown in the dump header."""
        return self.value

    @classmethod
    def parse(cls, text: Union[str, "ScopeOption"]) -> "ScopeOption":
        """Accept a member, its name ('current') or its label ('cur')."""
        if isinstance(text, cls):
            return text
        key = str(text).strip().upper()
        for opt in cls:
            if key in (opt.name, opt.value):
                return opt
        raise ValueError(f"Invalid scope option '{text}'")


OptionLike = Union[str, ScopeOption]


@dataclass
class Scope(Generic[K, V]):
    name: str = ""
    symbols: Dict[K, V] = field(default_factory=dict)

    def keys(self) -> List[K]:
        return sorted(self.symbols)

    def items(self) -> List[Tuple[K, V]]:
        """Bindings in ascending key order."""
        return [(k, self.symbols[k]) for k in sorted(self.symbols)]

    def copy(self) -> "Scope[K, V]":
        return Scope(self.name, dict(self.symbols))

    def __contains__(self, key) -> bool:
        return key in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)


class SymbolTable(Generic[K, V]):
    def __init__(self):
        # scopes[0] es el actual, scopes[-1] el global
        self._scopes: Deque[Scope[K, V]] = deque()
        self._size = 0

    # ---------- introspection ----------

    def size(self) -> int:
        """Total # of symbols across all open scopes."""
        return self._size

    def num_scopes(self) -> int:
        """# of open scopes."""
        return len(self._scopes)

    def __len__(self) -> int:
        return self._size

    # ---------- scope management ----------

    def enter_scope(self, name: str) -> None:
        """Push a new, empty scope. The first one entered is the GLOBAL scope."""
        self._scopes.appendleft(Scope(name))
        log.debug("enter scope %r (depth=%d)", name, len(self._scopes))

    def exit_scope(self) -> Scope[K, V]:
        """Pop the current scope, discarding its symbols. Returns the discarded scope."""
        if not self._scopes:
            raise EmptyStackError("exit_scope")
        scope = self._scopes.popleft()
        self._size -= len(scope)
        log.debug("exit scope %r (dropped %d symbols, depth=%d)", scope.name, len(scope), len(self._scopes))
        return scope

    def current_scope(self) -> Scope[K, V]:
        """Return a copy of the current scope."""
        return self._current("current_scope").copy()

    @contextmanager
    def scope(self, name: str) -> Iterator["SymbolTable[K, V]"]:
        """
        Context-manager helper:

        with table.scope("while"):
            table.insert("i", "char")
            # al salir del bloque el scope se descarta
        """
        self.enter_scope(name)
        try:
            yield self
        finally:
            self.exit_scope()

    # ---------- symbols ----------

    def insert(self, key: K, value: V) -> None:
        """
        Bind key -> value in the current scope.
        If key already exists there its value is replaced and size() does not change.
        """
        scope = self._current("insert")
        if key in scope.symbols:
            log.debug("replace %r in scope %r", key, scope.name)
        else:
            self._size += 1
        scope.symbols[key] = value

    def lookup(self, key: K, option: OptionLike = ScopeOption.ALL, default: Optional[V] = None) -> Tuple[bool, Optional[V]]:
        """
        Search for key and return (found, value).

        ALL starts in the current scope and proceeds outward to the GLOBAL
        scope; CURRENT and GLOBAL restrict the search to that single scope.
        When the key is not found, (False, default) is returned.
        """
        option = ScopeOption.parse(option)
        if not self._scopes:
            raise EmptyStackError("lookup")
        for scope in self._select(option):
            if key in scope.symbols:
                return True, scope.symbols[key]
        return False, default

    def scopes(self, option: OptionLike = ScopeOption.ALL) -> List[Scope[K, V]]:
        """Scopes selected by option, in dump order (current first)."""
        return list(self._select(ScopeOption.parse(option), "scopes"))

    # ---------- dump ----------

    def dump(self, output: Optional[TextIO] = None, option: OptionLike = ScopeOption.ALL) -> None:
        """
        Write the table to output (sys.stdout by default), starting with the
        current scope and working outward to the GLOBAL scope.

        Output format per scope:
            ** scopename **
            key: symbol
        """
        option = ScopeOption.parse(option)
        selected = self._select(option, "dump")
        out = sys.stdout if output is None else output
        lines = [
            BANNER,
            f"{TITLE_PAD} SYMBOL TABLE ({option.label}) {TITLE_PAD}",
            f"** # of scopes: {self.num_scopes()}",
            f"** # of symbols: {self.size()}",
        ]
        for scope in selected:
            lines.append(f"** {scope.name} **")
            lines.extend(f"{k}: {v}" for k, v in scope.items())
        lines.append(BANNER)
        out.write("\n".join(lines) + "\n")

    def dumps(self, option: OptionLike = ScopeOption.ALL) -> str:
        buf = io.StringIO()
        self.dump(buf, option)
        return buf.getvalue()

    # ---------- internal utils ----------

    def _current(self, operation: str) -> Scope[K, V]:
        if not self._scopes:
            raise EmptyStackError(operation)
        return self._scopes[0]

    def _select(self, option: ScopeOption, operation: str = "lookup") -> Iterable[Scope[K, V]]:
        # ALL sobre una tabla vacía no es error (no hay nada que recorrer)
        if option is ScopeOption.ALL:
            return self._scopes
        if not self._scopes:
            raise EmptyStackError(operation)
        if option is ScopeOption.CURRENT:
            return (self._scopes[0],)
        return (self._scopes[-1],)

    def __repr__(self) -> str:
        names = [s.name for s in self._scopes]
        return f"<SymbolTable scopes={names} symbols={self._size}>"
