"""List builtins: cons, car, cdr, list, length, empty?."""

from __future__ import annotations

from typing import Any, Union

from ..errors import ARITY_ONE, ARITY_TWO, arity_error, runtime_error, type_error
from ..registry import builtin
from ..values import NIL, Nil


def _one(function: str, args: list) -> Any:
    if len(args) != 1:
        raise arity_error(function, ARITY_ONE, len(args))
    return args[0]


def _non_empty(function: str, args: list) -> list:
    items = _one(function, args)
    if not isinstance(items, list):
        raise type_error(function, "list", items, 1)
    if not items:
        raise runtime_error(function, "empty list")
    return items


@builtin(name="cons", category="List operations", related=["car", "cdr", "list"])
def cons(args: list) -> list:
    """New list with the first argument in front of the second (a list or nil)."""
    if len(args) != 2:
        raise arity_error("cons", ARITY_TWO, len(args))
    head, tail = args
    if isinstance(tail, Nil):
        return [head]
    if not isinstance(tail, list):
        raise type_error("cons", "list", tail, 2)
    return [head, *tail]


@builtin(name="car", category="List operations", related=["cdr", "cons"])
def car(args: list) -> Any:
    """First element of a non-empty list."""
    return _non_empty("car", args)[0]


@builtin(name="cdr", category="List operations", related=["car", "cons"])
def cdr(args: list) -> Union[list, Nil]:
    """Everything after the first element; nil when only one element remains."""
    items = _non_empty("cdr", args)
    return items[1:] if len(items) > 1 else NIL


@builtin(name="list", category="List operations", related=["cons", "car", "cdr"])
def list_(args: list) -> list:
    """A list of the arguments, in order."""
    return list(args)


@builtin(name="length", category="List operations", related=["empty?", "list"])
def length(args: list) -> float:
    """Number of elements in a list; nil counts as zero."""
    items = _one("length", args)
    if isinstance(items, Nil):
        return 0.0
    if not isinstance(items, list):
        raise type_error("length", "list", items, 1)
    return float(len(items))


@builtin(name="empty?", category="List operations", related=["length", "nil?"])
def is_empty(args: list) -> bool:
    """True for nil and for a list with no elements."""
    items = _one("empty?", args)
    if isinstance(items, Nil):
        return True
    if not isinstance(items, list):
        raise type_error("empty?", "list", items, 1)
    return not items