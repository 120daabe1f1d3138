"""Construction of the global environment with every builtin bound."""

from __future__ import annotations

from .builtins import (  # noqa: F401  (imported for their registrations)
    arithmetic,
    assertions,
    comparison,
    console,
    docs,
    errorvalues,
    lists,
    logic,
    maps,
    predicates,
    strings,
)
from .environment import Environment
from .registry import registered


def register_builtins(env: Environment) -> None:
    """Bind every registered builtin function in ``env`` under its Lisp name."""
    for registration in registered():
        env.define(registration.name, registration.function)


def standard_environment() -> Environment:
    """Return a fresh global environment holding all builtins."""
    env = Environment()
    register_builtins(env)
    return env