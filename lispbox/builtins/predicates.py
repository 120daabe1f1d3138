"""Type predicate builtins: number?, string?, list?, nil?, symbol?, bool?, map?, keyword?."""

from __future__ import annotations

from typing import Any, Callable

from ..errors import ARITY_ONE, arity_error
from ..registry import builtin
from ..values import Keyword, Nil, Symbol


def _check(function: str, args: list, test: Callable[[Any], bool]) -> bool:
    if len(args) != 1:
        raise arity_error(function, ARITY_ONE, len(args))
    return test(args[0])


@builtin(name="number?", category="Type predicates", related=["string?", "symbol?", "list?"])
def is_number(args: list) -> bool:
    """True for numeric values."""
    return _check(
        "number?",
        args,
        lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    )


@builtin(name="string?", category="Type predicates", related=["number?", "symbol?"])
def is_string(args: list) -> bool:
    """True for strings."""
    return _check("string?", args, lambda v: isinstance(v, str))


@builtin(name="list?", category="Type predicates", related=["number?", "string?", "nil?"])
def is_list(args: list) -> bool:
    """True for list values."""
    return _check("list?", args, lambda v: isinstance(v, list))


@builtin(name="nil?", category="Type predicates", related=["empty?", "list?"])
def is_nil(args: list) -> bool:
    """True only for nil."""
    return _check("nil?", args, lambda v: isinstance(v, Nil))


@builtin(name="symbol?", category="Type predicates", related=["string?", "number?"])
def is_symbol(args: list) -> bool:
    """True for symbols."""
    return _check("symbol?", args, lambda v: isinstance(v, Symbol))


@builtin(name="bool?", category="Type predicates", related=["number?", "string?"])
def is_bool(args: list) -> bool:
    """True for #t and #f."""
    return _check("bool?", args, lambda v: isinstance(v, bool))


@builtin(name="map?", category="Type predicates", related=["list?", "keyword?"])
def is_map(args: list) -> bool:
    """True for maps."""
    return _check("map?", args, lambda v: isinstance(v, dict))


@builtin(name="keyword?", category="Type predicates", related=["symbol?", "map?"])
def is_keyword(args: list) -> bool:
    """True for keywords such as :name."""
    return _check("keyword?", args, lambda v: isinstance(v, Keyword))