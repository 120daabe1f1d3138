"""Map builtins: map-new, map-get, map-set, map-has?, map-keys and friends.

Maps are ``dict`` objects keyed by keyword names (without the colon).
"""

from __future__ import annotations

from typing import Any

from ..errors import (
    ARITY_ONE,
    ARITY_THREE,
    ARITY_TWO,
    ARITY_TWO_OR_THREE,
    ARITY_ZERO_OR_ONE,
    arity_error,
    type_error,
)
from ..registry import builtin
from ..values import NIL, Keyword


def _map(function: str, value: Any, position: int) -> dict:
    if not isinstance(value, dict):
        raise type_error(function, "map", value, position)
    return value


def _key(function: str, value: Any, position: int) -> str:
    if not isinstance(value, Keyword):
        raise type_error(function, "keyword", value, position)
    return value.name


def _one_map(function: str, args: list) -> dict:
    if len(args) != 1:
        raise arity_error(function, ARITY_ONE, len(args))
    return _map(function, args[0], 1)


def _exactly(function: str, args: list, count: int, label: str) -> None:
    if len(args) != count:
        raise arity_error(function, label, len(args))


@builtin(name="map-new", category="Maps", related=["map-get", "map-set"])
def map_new(args: list) -> dict:
    """An empty map."""
    if args:
        raise arity_error("map-new", ARITY_ZERO_OR_ONE, len(args))
    return {}


@builtin(name="map-get", category="Maps", related=["map-set", "map-has?"])
def map_get(args: list) -> Any:
    """Value stored under a keyword, or the optional default (nil if none)."""
    if not 2 <= len(args) <= 3:
        raise arity_error("map-get", ARITY_TWO_OR_THREE, len(args))
    mapping = _map("map-get", args[0], 1)
    key = _key("map-get", args[1], 2)
    default = args[2] if len(args) == 3 else NIL
    return mapping.get(key, default)


@builtin(name="map-set", category="Maps", related=["map-get", "map-remove"])
def map_set(args: list) -> dict:
    """Copy of the map with one keyword bound to a value."""
    _exactly("map-set", args, 3, ARITY_THREE)
    mapping = _map("map-set", args[0], 1)
    key = _key("map-set", args[1], 2)
    return {**mapping, key: args[2]}


@builtin(name="map-has?", category="Maps", related=["map-get", "map-keys"])
def map_has(args: list) -> bool:
    """True when the keyword is bound in the map."""
    _exactly("map-has?", args, 2, ARITY_TWO)
    mapping = _map("map-has?", args[0], 1)
    return _key("map-has?", args[1], 2) in mapping


@builtin(name="map-keys", category="Maps", related=["map-values", "map-entries"])
def map_keys(args: list) -> list:
    """The map's keys as keywords, sorted by name."""
    return [Keyword(key) for key in sorted(_one_map("map-keys", args))]


@builtin(name="map-values", category="Maps", related=["map-keys", "map-entries"])
def map_values(args: list) -> list:
    """The map's values, ordered by their sorted keys."""
    mapping = _one_map("map-values", args)
    return [mapping[key] for key in sorted(mapping)]


@builtin(name="map-entries", category="Maps", related=["map-keys", "map-values"])
def map_entries(args: list) -> list:
    """Two-element (keyword value) lists, ordered by key."""
    mapping = _one_map("map-entries", args)
    return [[Keyword(key), mapping[key]] for key in sorted(mapping)]


@builtin(name="map-merge", category="Maps", related=["map-set"])
def map_merge(args: list) -> dict:
    """Union of two maps; bindings from the second win."""
    _exactly("map-merge", args, 2, ARITY_TWO)
    first = _map("map-merge", args[0], 1)
    second = _map("map-merge", args[1], 2)
    return {**first, **second}


@builtin(name="map-remove", category="Maps", related=["map-set", "map-has?"])
def map_remove(args: list) -> dict:
    """Copy of the map without the given keyword."""
    _exactly("map-remove", args, 2, ARITY_TWO)
    mapping = _map("map-remove", args[0], 1)
    key = _key("map-remove", args[1], 2)
    return {k: v for k, v in mapping.items() if k != key}


@builtin(name="map-empty?", category="Maps", related=["map-size"])
def map_empty(args: list) -> bool:
    """True when the map has no bindings."""
    return not _one_map("map-empty?", args)


@builtin(name="map-size", category="Maps", related=["map-empty?"])
def map_size(args: list) -> float:
    """Number of bindings in the map."""
    return float(len(_one_map("map-size", args)))