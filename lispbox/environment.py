"""Lexical environments holding variable bindings."""

from __future__ import annotations

from typing import Any, Optional

from .errors import UndefinedSymbol

_MISSING = object()


class Environment:
    """A scope of bindings with an optional enclosing scope."""

    def __init__(self, parent: Optional["Environment"] = None):
        self._bindings: dict[str, Any] = {}
        self.parent = parent

    def child(self) -> "Environment":
        """Create a new scope enclosed by this one."""
        return Environment(self)

    def define(self, name: str, value: Any) -> None:
        """Bind ``name`` in this scope only."""
        self._bindings[name] = value

    def _owner(self, name: str) -> Optional["Environment"]:
        scope: Optional[Environment] = self
        while scope is not None:
            if name in scope._bindings:
                return scope
            scope = scope.parent
        return None

    def get(self, name: str) -> Optional[Any]:
        """Look ``name`` up here and in enclosing scopes; ``None`` if unbound."""
        owner = self._owner(name)
        return None if owner is None else owner._bindings[name]

    def set(self, name: str, value: Any) -> None:
        """Rebind an existing binding in the nearest scope that holds it."""
        owner = self._owner(name)
        if owner is None:
            raise UndefinedSymbol(name)
        owner._bindings[name] = value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._owner(name) is not None