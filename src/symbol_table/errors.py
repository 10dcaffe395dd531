# src/symbol_table/errors.py
"""Errores de la tabla de símbolos."""


class EmptyStackError(RuntimeError):
    """Raised when an operation needs an open scope and none is open."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}: empty stack")
        self.operation = operation
