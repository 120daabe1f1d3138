"""Comparison builtins: =, <, >, <=, >=."""

from __future__ import annotations

import operator
from typing import Any, Callable

from ..errors import ARITY_TWO, arity_error, type_error
from ..registry import builtin
from ..values import Nil, Symbol


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _same_kind_equal(a: Any, b: Any) -> bool:
    if _is_number(a) and _is_number(b):
        return a == b
    if isinstance(a, bool) and isinstance(b, bool):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, Symbol) and isinstance(b, Symbol):
        return a == b
    return isinstance(a, Nil) and isinstance(b, Nil)


def _compare(function: str, args: list, relation: Callable[[float, float], bool]) -> bool:
    if len(args) != 2:
        raise arity_error(function, ARITY_TWO, len(args))
    for position, arg in enumerate(args, start=1):
        if not _is_number(arg):
            raise type_error(function, "number", arg, position)
    return relation(args[0], args[1])


@builtin(name="=", category="Comparison", related=["<", ">", "<=", ">="])
def eq(args: list) -> bool:
    """True when two numbers, booleans, strings, symbols or nils are equal."""
    if len(args) != 2:
        raise arity_error("=", ARITY_TWO, len(args))
    return _same_kind_equal(args[0], args[1])


@builtin(name="<", category="Comparison", related=[">", "<=", ">=", "="])
def lt(args: list) -> bool:
    """True when the first number is smaller than the second."""
    return _compare("<", args, operator.lt)


@builtin(name=">", category="Comparison", related=["<", "<=", ">=", "="])
def gt(args: list) -> bool:
    """True when the first number is larger than the second."""
    return _compare(">", args, operator.gt)


@builtin(name="<=", category="Comparison", related=["<", ">", ">=", "="])
def le(args: list) -> bool:
    """True when the first number does not exceed the second."""
    return _compare("<=", args, operator.le)


@builtin(name=">=", category="Comparison", related=["<", ">", "<=", "="])
def ge(args: list) -> bool:
    """True when the first number is at least the second."""
    return _compare(">=", args, operator.ge)