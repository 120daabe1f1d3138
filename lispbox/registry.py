"""Collection of builtin functions together with their help metadata."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .docmeta import parse_doc_markdown

BuiltinFunction = Callable[[list], Any]


@dataclass(frozen=True)
class BuiltinRegistration:
    """A builtin function and the help data describing it."""

    name: str
    function: BuiltinFunction
    signature: str
    description: str
    examples: tuple[str, ...]
    related: tuple[str, ...]
    category: str


_REGISTRY: list[BuiltinRegistration] = []


def builtin(
    name: str = "",
    category: str = "",
    related: Iterable[str] = (),
) -> Callable[[BuiltinFunction], BuiltinFunction]:
    """Register the decorated function as a builtin named ``name``.

    The function's docstring supplies the description and the examples;
    the function itself is returned unchanged.
    """
    related_names = tuple(related)

    def decorate(function: BuiltinFunction) -> BuiltinFunction:
        lisp_name = name or function.__name__
        docs = parse_doc_markdown(inspect.cleandoc(function.__doc__ or ""))
        _REGISTRY.append(
            BuiltinRegistration(
                name=lisp_name,
                function=function,
                signature=f"({lisp_name} ...)",
                description=docs.summary or docs.full_markdown,
                examples=tuple(docs.examples),
                related=related_names,
                category=category or "Other",
            )
        )
        return function

    return decorate


def registered() -> tuple[BuiltinRegistration, ...]:
    """Return every registration made so far, in the order it was made."""
    return tuple(_REGISTRY)