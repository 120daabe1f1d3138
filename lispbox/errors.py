"""Evaluation errors raised by the interpreter and its builtins."""

from __future__ import annotations

from typing import Any

from .values import type_name

ARITY_ONE = "1"
ARITY_TWO = "2"
ARITY_THREE = "3"
ARITY_AT_LEAST_ONE = "at least 1"
ARITY_ZERO_OR_ONE = "0-1"
ARITY_ONE_OR_TWO = "1-2"
ARITY_TWO_OR_THREE = "2-3"

ERR_SANDBOX_NOT_INIT = "Sandbox not initialized"


class EvalError(Exception):
    """Base class for all evaluation failures."""


class TypeMismatch(EvalError):
    """An argument had the wrong type."""

    def __init__(self, function: str, expected: str, actual: str, position: int):
        self.function = function
        self.expected = expected
        self.actual = actual
        self.position = position
        super().__init__(
            f"{function}: expected {expected}, got {actual} at argument {position}"
        )


class ArityError(EvalError):
    """A function was called with the wrong number of arguments."""

    def __init__(self, function: str, expected: str, actual: int):
        self.function = function
        self.expected = expected
        self.actual = actual
        plural = "" if expected == "1" else "s"
        super().__init__(f"{function}: expected {expected} argument{plural}, got {actual}")


class LispRuntimeError(EvalError):
    """A runtime failure inside a named function."""

    def __init__(self, function: str, message: str):
        self.function = function
        self.message = message
        super().__init__(f"{function}: {message}")


class UndefinedSymbol(EvalError):
    """A symbol had no binding."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined symbol: {name}")


class NotCallable(EvalError):
    """A value in call position could not be called."""

    def __init__(self) -> None:
        super().__init__("Value is not callable")


def type_error(function: str, expected: str, actual: Any, position: int) -> TypeMismatch:
    """Build a type mismatch error naming the actual value's type."""
    return TypeMismatch(function, expected, type_name(actual), position)


def arity_error(function: str, expected: str, actual: int) -> ArityError:
    """Build an arity error."""
    return ArityError(function, str(expected), actual)


def runtime_error(function: str, message: str) -> LispRuntimeError:
    """Build a runtime error with function context."""
    return LispRuntimeError(function, str(message))