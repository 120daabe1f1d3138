import pytest

from lispbox.values import (
    NIL,
    ErrorValue,
    Keyword,
    Lambda,
    Nil,
    Symbol,
    to_display,
    type_name,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (42.0, "number"),
        (3, "number"),
        ("hello", "string"),
        (True, "bool"),
        (False, "bool"),
        (Symbol("a"), "symbol"),
        (Keyword("a"), "keyword"),
        (NIL, "nil"),
        ([1.0], "list"),
        ({"x": 1.0}, "map"),
        (ErrorValue("boom"), "error"),
        (Lambda(["x"], Symbol("x"), None), "lambda"),
    ],
)
def test_type_name(value, expected):
    assert type_name(value) == expected


def test_type_name_builtin():
    assert type_name(lambda args: NIL) == "builtin"


def test_type_name_rejects_foreign():
    with pytest.raises(TypeError):
        type_name(object())


def test_nil_is_singleton():
    assert Nil() is NIL
    assert not NIL


def test_display_booleans_and_nil():
    assert to_display(True) == "#t"
    assert to_display(False) == "#f"
    assert to_display(NIL) == "nil"


def test_display_whole_number_has_no_decimal():
    assert to_display(42.0) == "42"


def test_display_fractional_number():
    assert to_display(3.14) == "3.14"


def test_display_list():
    assert to_display([1.0, 2.0, 3.0]) == "(1 2 3)"


def test_display_nested_list_with_symbols():
    assert to_display([Symbol("a"), [Symbol("b")]]) == "(a (b))"


def test_display_map_sorted_keys():
    assert to_display({"y": 2.0, "x": 1.0}) == "{:x 1 :y 2}"


def test_display_keyword_and_symbol():
    assert to_display(Keyword("name")) == ":name"
    assert to_display(Symbol("hello")) == "hello"


def test_display_string_is_quoted():
    assert to_display("hi") == '"hi"'


def test_display_error():
    assert to_display(ErrorValue("invalid input")) == "Error: invalid input"


def test_symbols_compare_by_name():
    assert Symbol("x") == Symbol("x")
    assert Keyword("x") != Symbol("x")