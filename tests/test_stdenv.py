import pytest

from lispbox.builtins import arithmetic, docs, maps, strings
from lispbox.environment import Environment
from lispbox.registry import registered
from lispbox.stdenv import register_builtins, standard_environment


def test_every_registration_is_bound():
    env = standard_environment()
    regs = registered()
    assert regs
    for registration in regs:
        assert env.get(registration.name) is registration.function


@pytest.mark.parametrize(
    "name,function",
    [
        ("+", arithmetic.add),
        ("string-append", strings.string_append),
        ("map-get", maps.map_get),
        ("doc", docs.doc),
    ],
)
def test_known_names(name, function):
    assert standard_environment().get(name) is function


def test_bound_builtin_is_callable():
    env = standard_environment()
    assert env.get("+")([1.0, 2.0]) == 3.0
    assert env.get("string-length")(["hello"]) == 5


def test_register_into_existing_environment_keeps_bindings():
    env = Environment()
    env.define("x", 42.0)
    register_builtins(env)
    assert env.get("x") == 42.0
    assert env.get("car") is not None and env.get("car")([[1.0, 2.0]]) == 1.0


def test_environments_are_independent():
    first = standard_environment()
    second = standard_environment()
    first.define("only-here", 1.0)
    assert second.get("only-here") is None
    assert first.get("only-here") == 1.0


def test_registered_names_are_unique():
    names = [registration.name for registration in registered()]
    assert len(names) == len(set(names))


def test_unknown_name_is_unbound():
    assert standard_environment().get("no-such-builtin") is None