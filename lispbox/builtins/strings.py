"""String builtins: splitting, joining, slicing, case, predicates and conversions."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

from ..errors import ARITY_ONE, ARITY_THREE, ARITY_TWO, arity_error, runtime_error, type_error
from ..registry import builtin
from ..values import ErrorValue

_NUMBER_TEXT = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _arity(function: str, args: list, expected: str) -> None:
    if len(args) != int(expected):
        raise arity_error(function, expected, len(args))


def _text(function: str, value: Any, position: int) -> str:
    if not isinstance(value, str):
        raise type_error(function, "string", value, position)
    return value


def _strings(function: str, args: list, expected: str) -> list[str]:
    _arity(function, args, expected)
    return [_text(function, arg, position) for position, arg in enumerate(args, start=1)]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _index(value: Any, position: int) -> int:
    if _is_number(value) and value >= 0 and float(value).is_integer():
        return int(value)
    raise type_error("substring", "non-negative integer", value, position)


def _joined_strings(function: str, items: list) -> list[str]:
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise runtime_error(function, f"element {index} is not a string")
    return items


@builtin(name="string-split", category="String manipulation", related=["string-join", "substring"])
def string_split(args: list) -> list:
    """Split a string by delimiter into a list of strings.

    # Examples

    ```lisp
    (string-split "a,b,c" ",") => ("a" "b" "c")
    ```

    # See Also

    string-join, substring
    """
    text, delimiter = _strings("string-split", args, ARITY_TWO)
    if not delimiter:
        return ["", *text, ""]
    return text.split(delimiter)


@builtin(name="string-join", category="String manipulation", related=["string-split", "string-append"])
def string_join(args: list) -> str:
    """Join a list of strings with delimiter.

    # Examples

    ```lisp
    (string-join '("a" "b" "c") ",") => "a,b,c"
    ```

    # See Also

    string-split, string-append
    """
    _arity("string-join", args, ARITY_TWO)
    items, delimiter = args
    if not isinstance(items, list):
        raise type_error("string-join", "list", items, 1)
    delimiter = _text("string-join", delimiter, 2)
    return delimiter.join(_joined_strings("string-join", items))


@builtin(name="substring", category="String manipulation", related=["string-split", "string-trim"])
def substring(args: list) -> str:
    """Extract substring from start index (inclusive) to end index (exclusive).

    # Examples

    ```lisp
    (substring "hello" 0 3) => "hel"
    ```

    # See Also

    string-split, string-trim
    """
    _arity("substring", args, ARITY_THREE)
    text = _text("substring", args[0], 1)
    start = _index(args[1], 2)
    end = _index(args[2], 3)
    if start > len(text) or end > len(text) or start > end:
        raise runtime_error(
            "substring",
            f"invalid indices: start={start}, end={end}, length={len(text)}",
        )
    return text[start:end]


@builtin(name="string-trim", category="String manipulation", related=["substring"])
def string_trim(args: list) -> str:
    """Trim whitespace from both ends of string.

    # Examples

    ```lisp
    (string-trim "  hello  ") => "hello"
    ```

    # See Also

    substring
    """
    (text,) = _strings("string-trim", args, ARITY_ONE)
    return text.strip()


@builtin(name="string-upper", category="String manipulation", related=["string-lower"])
def string_upper(args: list) -> str:
    """Convert string to uppercase.

    # Examples

    ```lisp
    (string-upper "hello") => "HELLO"
    ```

    # See Also

    string-lower
    """
    (text,) = _strings("string-upper", args, ARITY_ONE)
    return text.upper()


@builtin(name="string-lower", category="String manipulation", related=["string-upper"])
def string_lower(args: list) -> str:
    """Convert string to lowercase.

    # Examples

    ```lisp
    (string-lower "WORLD") => "world"
    ```

    # See Also

    string-upper
    """
    (text,) = _strings("string-lower", args, ARITY_ONE)
    return text.lower()


@builtin(name="string-replace", category="String manipulation", related=["string-contains?"])
def string_replace(args: list) -> str:
    """Replace all occurrences of pattern with replacement in string.

    # Examples

    ```lisp
    (string-replace "hello" "l" "L") => "heLLo"
    ```

    # See Also

    string-contains?
    """
    text, pattern, replacement = _strings("string-replace", args, ARITY_THREE)
    return text.replace(pattern, replacement)


@builtin(
    name="string-contains?",
    category="String manipulation",
    related=["string-starts-with?", "string-ends-with?"],
)
def string_contains(args: list) -> bool:
    """Check if string contains substring.

    # Examples

    ```lisp
    (string-contains? "hello world" "world") => #t
    ```

    # See Also

    string-starts-with?, string-ends-with?
    """
    text, part = _strings("string-contains?", args, ARITY_TWO)
    return part in text


@builtin(
    name="string-starts-with?",
    category="String manipulation",
    related=["string-ends-with?", "string-contains?"],
)
def string_starts_with(args: list) -> bool:
    """Check if string starts with prefix.

    # Examples

    ```lisp
    (string-starts-with? "hello" "he") => #t
    ```

    # See Also

    string-ends-with?, string-contains?
    """
    text, prefix = _strings("string-starts-with?", args, ARITY_TWO)
    return text.startswith(prefix)


@builtin(
    name="string-ends-with?",
    category="String manipulation",
    related=["string-starts-with?", "string-contains?"],
)
def string_ends_with(args: list) -> bool:
    """Check if string ends with suffix.

    # Examples

    ```lisp
    (string-ends-with? "hello" "lo") => #t
    ```

    # See Also

    string-starts-with?, string-contains?
    """
    text, suffix = _strings("string-ends-with?", args, ARITY_TWO)
    return text.endswith(suffix)


@builtin(name="string-empty?", category="String manipulation", related=["string-length"])
def string_empty(args: list) -> bool:
    """Check if string is empty.

    # Examples

    ```lisp
    (string-empty? "") => #t
    ```

    # See Also

    string-length
    """
    (text,) = _strings("string-empty?", args, ARITY_ONE)
    return not text


@builtin(name="string-length", category="String manipulation", related=["string-empty?"])
def string_length(args: list) -> float:
    """Get the length of a string (in characters, not bytes).

    # Examples

    ```lisp
    (string-length "hello") => 5
    ```

    # See Also

    string-empty?
    """
    (text,) = _strings("string-length", args, ARITY_ONE)
    return float(len(text))


@builtin(name="string->number", category="String manipulation", related=["number->string"])
def string_to_number(args: list) -> Any:
    """Convert string to number.

    # Examples

    ```lisp
    (string->number "42") => 42
    ```

    # See Also

    number->string
    """
    (text,) = _strings("string->number", args, ARITY_ONE)
    stripped = text.strip()
    if _NUMBER_TEXT.fullmatch(stripped):
        return float(stripped)
    return ErrorValue(f"Cannot parse '{text}' as number")


@builtin(name="number->string", category="String manipulation", related=["string->number"])
def number_to_string(args: list) -> str:
    """Convert number to string.

    # Examples

    ```lisp
    (number->string 42) => "42"
    ```

    # See Also

    string->number
    """
    _arity("number->string", args, ARITY_ONE)
    (number,) = args
    if not _is_number(number):
        raise type_error("number->string", "number", number, 1)
    value = float(number)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return f"{value:.0f}"
    return format(Decimal(repr(value)), "f")


@builtin(name="string->list", category="String manipulation", related=["list->string"])
def string_to_list(args: list) -> list:
    """Convert string to list of characters.

    # Examples

    ```lisp
    (string->list "abc") => ("a" "b" "c")
    ```

    # See Also

    list->string
    """
    (text,) = _strings("string->list", args, ARITY_ONE)
    return list(text)


@builtin(name="list->string", category="String manipulation", related=["string->list"])
def list_to_string(args: list) -> str:
    """Convert list of strings to single string.

    # Examples

    ```lisp
    (list->string '("h" "e" "l" "l" "o")) => "hello"
    ```

    # See Also

    string->list
    """
    _arity("list->string", args, ARITY_ONE)
    (items,) = args
    if not isinstance(items, list):
        raise type_error("list->string", "list", items, 1)
    return "".join(_joined_strings("list->string", items))


@builtin(name="string-append", category="String manipulation", related=["string-join", "list->string"])
def string_append(args: list) -> str:
    """Concatenate multiple strings into one.

    Accepts variable number of arguments (0 or more strings).

    # Examples

    ```lisp
    (string-append "hello" " " "world") => "hello world"
    (string-append) => ""
    ```

    # See Also

    string-join, list->string
    """
    return "".join(
        _text("string-append", arg, position) for position, arg in enumerate(args, start=1)
    )