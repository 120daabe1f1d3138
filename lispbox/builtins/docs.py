"""Documentation builtin: doc."""

from __future__ import annotations

from typing import Union

from ..errors import ARITY_ONE, arity_error, type_error
from ..registry import builtin
from ..values import NIL, Lambda, Nil


@builtin(name="doc", category="Help system", related=["help"])
def doc(args: list) -> Union[str, Nil]:
    """Returns the docstring of a function as a string.
    Works with user-defined functions that have docstrings.

    # Examples

    ```lisp
    (doc factorial) => "Computes factorial"
    ```
    """
    if len(args) != 1:
        raise arity_error("doc", ARITY_ONE, len(args))
    (function,) = args
    if not isinstance(function, Lambda):
        raise type_error("doc", "lambda", function, 1)
    return NIL if function.docstring is None else function.docstring