"""Arithmetic builtins: +, -, *, /, %."""

from __future__ import annotations

import math
from typing import Any

from ..errors import ARITY_AT_LEAST_ONE, ARITY_TWO, arity_error, runtime_error, type_error
from ..registry import builtin


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _numbers(function: str, args: list, first_position: int = 1) -> list[float]:
    numbers = []
    for position, arg in enumerate(args, start=first_position):
        if not _is_number(arg):
            raise type_error(function, "number", arg, position)
        numbers.append(float(arg))
    return numbers


@builtin(name="+", category="Arithmetic", related=["-", "*", "/"])
def add(args: list) -> float:
    """Returns the sum of all arguments.

    # Examples

    ```lisp
    (+ 1 2 3) => 6
    (+ 10) => 10
    (+) => 0
    ```

    # See Also

    -, *, /
    """
    return math.fsum(_numbers("+", args)) if args else 0.0


@builtin(name="-", category="Arithmetic", related=["+", "*", "/"])
def sub(args: list) -> float:
    """Subtracts subsequent arguments from the first.

    With one argument, returns its negation.

    # Examples

    ```lisp
    (- 10 3 2) => 5
    (- 5) => -5
    ```

    # See Also

    +, *, /
    """
    if not args:
        raise arity_error("-", ARITY_AT_LEAST_ONE, 0)
    first, *rest = _numbers("-", args[:1]) + _numbers("-", args[1:], 2)
    if not rest:
        return -first
    result = first
    for n in rest:
        result -= n
    return result


@builtin(name="*", category="Arithmetic", related=["+", "-", "/"])
def mul(args: list) -> float:
    """Returns the product of all arguments.

    # Examples

    ```lisp
    (* 2 3 4) => 24
    (* 5) => 5
    (*) => 1
    ```

    # See Also

    +, -, /
    """
    product = 1.0
    for n in _numbers("*", args):
        product *= n
    return product


@builtin(name="/", category="Arithmetic", related=["+", "-", "*", "%"])
def div(args: list) -> float:
    """Divides the first argument by subsequent arguments.

    Integer division in Lisp.

    # Examples

    ```lisp
    (/ 20 4) => 5
    (/ 100 2 5) => 10
    ```

    # See Also

    +, -, *, %
    """
    if not args:
        raise arity_error("/", ARITY_AT_LEAST_ONE, 0)
    (first,) = _numbers("/", args[:1])
    if len(args) == 1:
        if first == 0.0:
            raise runtime_error("/", "division by zero")
        return 1.0 / first
    result = first
    for position, arg in enumerate(args[1:], start=2):
        if not _is_number(arg):
            raise type_error("/", "number", arg, position)
        if arg == 0:
            raise runtime_error("/", "division by zero")
        result /= float(arg)
    return result


@builtin(name="%", category="Arithmetic", related=["/"])
def mod(args: list) -> float:
    """Returns the remainder when num1 is divided by num2.

    # Examples

    ```lisp
    (% 17 5) => 2
    (% 10 3) => 1
    ```

    # See Also

    /
    """
    if len(args) != 2:
        raise arity_error("%", ARITY_TWO, len(args))
    a, b = args
    if not _is_number(a):
        raise type_error("%", "number", a, 1)
    if not _is_number(b):
        raise type_error("%", "number", b, 2)
    if b == 0:
        raise runtime_error("%", "division by zero")
    return math.fmod(float(a), float(b))