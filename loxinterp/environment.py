"""Variable scopes chained from innermost to global."""

from __future__ import annotations

from typing import Any, Optional

from .errors import LoxRuntimeError
from .tokens import Token


class Environment:
    """A mapping of variable names to values, with an optional enclosing scope."""

    def __init__(self, enclosing: Optional["Environment"] = None) -> None:
        self.enclosing = enclosing
        self._values: dict[str, Any] = {}

    def define(self, name: str, value: Any) -> None:
        """Bind ``name`` in this scope, replacing any existing binding here."""
        self._values[name] = value

    def get(self, name: Token) -> Any:
        """Look ``name`` up here and then in the enclosing scopes."""
        scope: Optional[Environment] = self
        while scope is not None:
            if name.lexeme in scope._values:
                return scope._values[name.lexeme]
            scope = scope.enclosing
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any) -> None:
        """Rebind an existing variable in the nearest scope that holds it."""
        scope: Optional[Environment] = self
        while scope is not None:
            if name.lexeme in scope._values:
                scope._values[name.lexeme] = value
                return
            scope = scope.enclosing
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")