"""Console output builtins: print, println."""

from __future__ import annotations

import sys
from typing import Any

from ..registry import builtin
from ..values import NIL, Nil, to_display


def _render(value: Any) -> str:
    return value if isinstance(value, str) else to_display(value)


def _write(args: list) -> None:
    sys.stdout.write(" ".join(_render(arg) for arg in args))


@builtin(name="print", category="Console I/O", related=["println"])
def print_(args: list) -> Nil:
    """Write the arguments to standard output, space separated, and return nil."""
    _write(args)
    return NIL


@builtin(name="println", category="Console I/O", related=["print"])
def println(args: list) -> Nil:
    """Like print, followed by a newline."""
    _write(args)
    sys.stdout.write("\n")
    return NIL