"""Error value builtins: error, error?, error-msg."""

from __future__ import annotations

from ..errors import ARITY_ONE, arity_error, type_error
from ..registry import builtin
from ..values import ErrorValue, to_display


def _one(function: str, args: list):
    if len(args) != 1:
        raise arity_error(function, ARITY_ONE, len(args))
    return args[0]


@builtin(name="error", category="Error handling", related=["error?", "error-msg"])
def error(args: list) -> ErrorValue:
    """Raises an error with the given message. Always throws.

    # Examples

    ```lisp
    (error "invalid input") => Error: invalid input
    ```

    # See Also

    error?, error-msg
    """
    value = _one("error", args)
    return ErrorValue(value if isinstance(value, str) else to_display(value))


@builtin(name="error?", category="Error handling", related=["error", "error-msg"])
def is_error(args: list) -> bool:
    """Tests if val is an error value.

    # Examples

    ```lisp
    (error? (error "test")) => would throw before testing
    ```

    # See Also

    error, error-msg
    """
    return isinstance(_one("error?", args), ErrorValue)


@builtin(name="error-msg", category="Error handling", related=["error", "error?"])
def error_msg(args: list) -> str:
    """Extracts the message from an error value.

    # Examples

    ```lisp
    (error-msg (error "test")) => would throw before extracting
    ```

    # See Also

    error, error?
    """
    value = _one("error-msg", args)
    if not isinstance(value, ErrorValue):
        raise type_error("error-msg", "error", value, 1)
    return value.message