# src/symbol_table/driver.py
"""
Driver de línea de comandos: reproduce un script de operaciones sobre una
SymbolTable[str, Symbol] y muestra los resultados.

Formato del script (un comando por línea; un token que empieza con '#' inicia
comentario, así que 'a#b' es una clave válida):
    enter <name>
    exit
    insert <key> <type>
    lookup <key> [all|cur|gbl]
    dump [all|cur|gbl]
    size
    scopes

Uso:
    symtable-driver programa.sym
    cat programa.sym | symtable-driver --json
"""
import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO

from .errors import EmptyStackError
from .report import dump_table_json
from .symbol_table import ScopeOption, SymbolTable
from .symbols import Symbol

log = logging.getLogger(__name__)


def _strip_comment(raw: str) -> str:
    """Drop everything from the first token that starts with '#'."""
    tokens = raw.split()
    for i, tok in enumerate(tokens):
        if tok.startswith("#"):
            return " ".join(tokens[:i])
    return " ".join(tokens)


class ScriptError(Exception):
    def __init__(self, lineno: int, message: str):
        super().__init__(f"line {lineno}: {message}")
        self.lineno = lineno


class ScriptRunner:
    def __init__(self, out: Optional[TextIO] = None):
        self.table: SymbolTable[str, Symbol] = SymbolTable()
        self.out = sys.stdout if out is None else out
        self._commands: Dict[str, Callable[[int, List[str]], None]] = {
            "enter": self._enter,
            "exit": self._exit,
            "insert": self._insert,
            "lookup": self._lookup,
            "dump": self._dump,
            "size": self._size,
            "scopes": self._scopes,
        }

    def run(self, lines) -> SymbolTable[str, Symbol]:
        for lineno, raw in enumerate(lines, start=1):
            line = _strip_comment(raw)
            if not line:
                continue
            cmd, *args = line.split()
            handler = self._commands.get(cmd.lower())
            if handler is None:
                raise ScriptError(lineno, f"unknown command '{cmd}'")
            try:
                handler(lineno, args)
            except EmptyStackError as e:
                raise ScriptError(lineno, str(e)) from e
        return self.table

    # ---------- commands ----------

    def _enter(self, lineno: int, args: List[str]) -> None:
        self._arity(lineno, "enter", args, 1)
        self.table.enter_scope(args[0])

    def _exit(self, lineno: int, args: List[str]) -> None:
        self._arity(lineno, "exit", args, 0)
        self.table.exit_scope()

    def _insert(self, lineno: int, args: List[str]) -> None:
        self._arity(lineno, "insert", args, 2)
        key, sym_type = args
        self.table.insert(key, Symbol(key, sym_type, {"line": lineno}))

    def _lookup(self, lineno: int, args: List[str]) -> None:
        self._arity(lineno, "lookup", args, 1, 2)
        option = self._option(lineno, args[1:])
        found, sym = self.table.lookup(args[0], option)
        self.out.write(f"{args[0]}: {sym}\n" if found else f"{args[0]}: not found\n")

    def _dump(self, lineno: int, args: List[str]) -> None:
        self._arity(lineno, "dump", args, 0, 1)
        self.table.dump(self.out, self._option(lineno, args))

    def _size(self, lineno: int, args: List[str]) -> None:
        self._arity(lineno, "size", args, 0)
        self.out.write(f"{self.table.size()}\n")

    def _scopes(self, lineno: int, args: List[str]) -> None:
        self._arity(lineno, "scopes", args, 0)
        self.out.write(f"{self.table.num_scopes()}\n")

    # ---------- helpers ----------

    @staticmethod
    def _arity(lineno: int, cmd: str, args: List[str], low: int, high: Optional[int] = None) -> None:
        high = low if high is None else high
        if not low <= len(args) <= high:
            raise ScriptError(lineno, f"'{cmd}' expects {low if low == high else f'{low}-{high}'} argument(s), got {len(args)}")

    @staticmethod
    def _option(lineno: int, args: List[str]) -> ScopeOption:
        if not args:
            return ScopeOption.ALL
        try:
            return ScopeOption.parse(args[0])
        except ValueError as e:
            raise ScriptError(lineno, str(e)) from e


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="symtable-driver", description="Replay a scope/symbol script against a symbol table")
    ap.add_argument("script", nargs="?", help="script file (stdin if omitted)")
    ap.add_argument("--json", action="store_true", help="print the final table as JSON")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s:%(name)s:%(message)s")

    runner = ScriptRunner()
    try:
        if args.script:
            with open(args.script, "r", encoding="utf-8") as f:
                table = runner.run(f)
        else:
            table = runner.run(sys.stdin)
    except OSError as e:
        print(f"[ERROR] No se pudo leer el script: {e}", file=sys.stderr)
        return 1
    except ScriptError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    log.info("script done: %d scopes, %d symbols", table.num_scopes(), table.size())
    if args.json:
        print(dump_table_json(table))
    return 0


if __name__ == "__main__":
    sys.exit(main())
