"""Logic builtins: and, or, not."""

from __future__ import annotations

from ..errors import ARITY_ONE, arity_error, type_error
from ..registry import builtin


@builtin(name="and", category="Logic", related=["or", "not"])
def and_(args: list) -> bool:
    """Boolean conjunction; stops at the first #f. Every argument must be a boolean."""
    for position, arg in enumerate(args, start=1):
        if arg is False:
            return False
        if arg is not True:
            raise type_error("and", "bool", arg, position)
    return True


@builtin(name="or", category="Logic", related=["and", "not"])
def or_(args: list) -> bool:
    """Boolean disjunction; stops at the first #t. Every argument must be a boolean."""
    for position, arg in enumerate(args, start=1):
        if arg is True:
            return True
        if arg is not False:
            raise type_error("or", "bool", arg, position)
    return False


@builtin(name="not", category="Logic", related=["and", "or"])
def not_(args: list) -> bool:
    """Boolean negation of a single boolean argument."""
    if len(args) != 1:
        raise arity_error("not", ARITY_ONE, len(args))
    (value,) = args
    if not isinstance(value, bool):
        raise type_error("not", "bool", value, 1)
    return not value