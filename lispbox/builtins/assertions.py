"""Testing builtins: assertions and the registry of named tests."""

from __future__ import annotations

from typing import Any

from ..errors import (
    ARITY_ONE_OR_TWO,
    ARITY_TWO,
    ARITY_TWO_OR_THREE,
    ARITY_ZERO_OR_ONE,
    arity_error,
    type_error,
)
from ..registry import builtin
from ..values import ErrorValue, Keyword, Lambda, Nil, Symbol, to_display

_TESTS: list[tuple[str, Lambda]] = []


def _message(value: Any) -> str:
    return value if isinstance(value, str) else to_display(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def values_equal(a: Any, b: Any) -> bool:
    """Compare two values structurally; values of different kinds are unequal."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if _is_number(a) and _is_number(b):
        return a == b
    for kind in (str, Symbol, Keyword, ErrorValue):
        if isinstance(a, kind) and isinstance(b, kind):
            return a == b
    if isinstance(a, Nil) and isinstance(b, Nil):
        return True
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        return len(a) == len(b) and all(
            key in b and values_equal(value, b[key]) for key, value in a.items()
        )
    return False


@builtin(name="assert", category="Testing", related=["assert-equal", "assert-error"])
def assert_(args: list) -> Any:
    """Assert that condition is true. Returns #t on success, Error value on failure.

    Useful for writing tests and validating assumptions in code.

    # Examples

    ```lisp
    (assert #t) => #t
    (assert #f) => Error: Assertion failed
    (assert (= 2 (+ 1 1)) "math works") => #t
    ```

    # See Also

    assert-equal, assert-error
    """
    if not 1 <= len(args) <= 2:
        raise arity_error("assert", ARITY_ONE_OR_TWO, len(args))
    condition = args[0]
    message = _message(args[1]) if len(args) == 2 else "Assertion failed"
    if condition is True:
        return True
    if condition is False or isinstance(condition, Nil):
        return ErrorValue(message)
    return ErrorValue(f"{message}: expected boolean, got {to_display(condition)}")


@builtin(name="assert-equal", category="Testing", related=["assert", "="])
def assert_equal(args: list) -> Any:
    """Assert that actual equals expected. Returns #t on success, Error value with details on failure.

    Provides helpful error messages showing both actual and expected values.

    # Examples

    ```lisp
    (assert-equal 5 5) => #t
    (assert-equal 5 10) => Error with details
    (assert-equal (+ 2 2) 4 "addition test") => #t
    ```

    # See Also

    assert, =
    """
    if not 2 <= len(args) <= 3:
        raise arity_error("assert-equal", ARITY_TWO_OR_THREE, len(args))
    actual, expected = args[0], args[1]
    message = _message(args[2]) if len(args) == 3 else "Values not equal"
    if values_equal(actual, expected):
        return True
    return ErrorValue(
        f"{message}\n  Expected: {to_display(expected)}\n  Actual:   {to_display(actual)}"
    )


@builtin(name="assert-error", category="Testing", related=["assert", "error?"])
def assert_error(args: list) -> Any:
    """Assert that value is an error. Returns #t if value is an Error, Error value otherwise.

    Useful for testing error handling and negative test cases.

    # Examples

    ```lisp
    (assert-error (error "test")) => #t
    (assert-error 42) => Error: Expected error value
    ```

    # See Also

    assert, error?
    """
    if not 1 <= len(args) <= 2:
        raise arity_error("assert-error", ARITY_ONE_OR_TWO, len(args))
    value = args[0]
    message = _message(args[1]) if len(args) == 2 else "Expected error value"
    if isinstance(value, ErrorValue):
        return True
    return ErrorValue(f"{message}: got {to_display(value)}")


@builtin(name="register-test", category="Testing", related=["run-all-tests", "clear-tests"])
def register_test(args: list) -> bool:
    """Register a test with a name and zero-argument lambda.

    Tests are stored globally and can be executed with run-all-tests.

    # Examples

    ```lisp
    (register-test "simple" (lambda () (assert-equal 1 1)))
    (register-test "math" (lambda () (assert-equal (+ 2 2) 4)))
    ```

    # See Also

    run-all-tests, clear-tests
    """
    if len(args) != 2:
        raise arity_error("register-test", ARITY_TWO, len(args))
    name, test_fn = args
    if not isinstance(name, str):
        raise type_error("register-test", "string", name, 1)
    if not isinstance(test_fn, Lambda):
        raise type_error("register-test", "lambda", test_fn, 2)
    _TESTS.append((name, test_fn))
    return True


@builtin(name="clear-tests", category="Testing", related=["register-test", "run-all-tests"])
def clear_tests(args: list) -> bool:
    """Clear all registered tests from the registry.

    Useful for reloading test files or starting fresh.

    # Examples

    ```lisp
    (clear-tests) => #t
    ```

    # See Also

    register-test, run-all-tests
    """
    if args:
        raise arity_error("clear-tests", ARITY_ZERO_OR_ONE, len(args))
    _TESTS.clear()
    return True


def registered_tests() -> tuple[tuple[str, Lambda], ...]:
    """Return the registered ``(name, lambda)`` pairs in registration order."""
    return tuple(_TESTS)