"""Runtime value types of the interpreter.

Numbers are Python ``float``/``int``, strings are ``str``, booleans are
``bool``, lists are ``list`` and maps are ``dict`` keyed by keyword names.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Symbol:
    """A symbol such as ``foo`` or ``+``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Keyword:
    """A keyword such as ``:name``; ``name`` excludes the colon."""

    name: str

    def __str__(self) -> str:
        return ":" + self.name


class Nil:
    """The empty value; there is only one instance."""

    _instance: Optional["Nil"] = None

    def __new__(cls) -> "Nil":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "nil"

    def __bool__(self) -> bool:
        return False


NIL = Nil()


@dataclass(frozen=True)
class ErrorValue:
    """A first-class error value carrying a message."""

    message: str


@dataclass(eq=False)
class Lambda:
    """A user-defined function closed over its defining environment."""

    params: list[str]
    body: Any
    env: Any
    docstring: Optional[str] = None


def _format_number(n: float) -> str:
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if float(n).is_integer():
        return str(int(n))
    return repr(float(n))


def type_name(value: Any) -> str:
    """Return the name of the value's type as used in error messages."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, Keyword):
        return "keyword"
    if isinstance(value, Nil):
        return "nil"
    if isinstance(value, list):
        return "list"
    if isinstance(value, dict):
        return "map"
    if isinstance(value, ErrorValue):
        return "error"
    if isinstance(value, Lambda):
        return "lambda"
    if callable(value):
        return "builtin"
    raise TypeError(f"not a Lisp value: {value!r}")


def to_display(value: Any) -> str:
    """Render a value in its printed Lisp form."""
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (Symbol, Keyword)):
        return str(value)
    if isinstance(value, Nil):
        return "nil"
    if isinstance(value, list):
        return "(" + " ".join(to_display(item) for item in value) + ")"
    if isinstance(value, dict):
        parts = (f":{key} {to_display(value[key])}" for key in sorted(value))
        return "{" + " ".join(parts) + "}"
    if isinstance(value, ErrorValue):
        return f"Error: {value.message}"
    if isinstance(value, Lambda):
        return "<lambda>"
    if callable(value):
        return "<builtin>"
    raise TypeError(f"not a Lisp value: {value!r}")