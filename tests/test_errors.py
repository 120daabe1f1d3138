import pytest

from lispbox.errors import (
    ARITY_AT_LEAST_ONE,
    ARITY_ONE,
    ArityError,
    EvalError,
    LispRuntimeError,
    NotCallable,
    TypeMismatch,
    UndefinedSymbol,
    arity_error,
    runtime_error,
    type_error,
)
from lispbox.values import Symbol


def test_type_error_message():
    err = type_error("+", "number", "x", 1)
    assert str(err) == "+: expected number, got string at argument 1"


def test_type_error_fields():
    err = type_error("car", "list", Symbol("a"), 1)
    assert isinstance(err, TypeMismatch)
    assert (err.function, err.expected, err.actual, err.position) == ("car", "list", "symbol", 1)


def test_arity_error_singular():
    err = arity_error("car", ARITY_ONE, 2)
    assert str(err) == "car: expected 1 argument, got 2"


def test_arity_error_plural():
    err = arity_error("-", ARITY_AT_LEAST_ONE, 0)
    assert str(err) == "-: expected at least 1 arguments, got 0"
    assert err.actual == 0


def test_runtime_error():
    err = runtime_error("/", "division by zero")
    assert isinstance(err, LispRuntimeError)
    assert err.message == "division by zero"
    assert str(err).startswith("/: ")
    assert str(err).endswith("division by zero")


def test_undefined_symbol():
    err = UndefinedSymbol("foo")
    assert err.name == "foo"
    assert "Undefined symbol" in str(err)
    assert str(err).endswith("foo")


def test_not_callable():
    assert str(NotCallable()) == "Value is not callable"


@pytest.mark.parametrize(
    "err,fragment",
    [
        (type_error("f", "number", 1.0, 1), "expected number"),
        (arity_error("f", "2", 0), "expected 2 arguments, got 0"),
        (runtime_error("f", "bad"), "bad"),
        (UndefinedSymbol("x"), "Undefined symbol"),
        (NotCallable(), "not callable"),
    ],
)
def test_all_are_eval_errors(err, fragment):
    assert isinstance(err, EvalError)
    assert fragment in str(err)


def test_arity_error_is_specific():
    err = arity_error("cons", "2", 3)
    assert isinstance(err, ArityError)
    assert (err.function, err.expected, err.actual) == ("cons", "2", 3)