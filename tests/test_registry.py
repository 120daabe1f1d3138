import lispbox.builtins.arithmetic as arithmetic
from lispbox.registry import BuiltinRegistration, builtin, registered


def _find(name):
    matches = [entry for entry in registered() if entry.name == name]
    assert matches, f"{name} not registered"
    return matches[-1]


def test_decorator_returns_function_unchanged():
    def probe_one(args):
        """Probe one."""
        return len(args)

    decorated = builtin(name="probe-one", category="Probes")(probe_one)
    assert decorated is probe_one
    assert decorated([1, 2]) == 2


def test_registration_parses_docstring():
    @builtin(name="probe-two", category="Probes", related=["probe-one"])
    def probe_two(args):
        """Probe summary line.

        # Examples

        ```lisp
        (probe-two 1) => 1
        ```

        # See Also

        probe-one
        """
        return args[0]

    entry = _find("probe-two")
    assert isinstance(entry, BuiltinRegistration)
    assert entry.function is probe_two
    assert entry.description == "Probe summary line."
    assert entry.examples == ("(probe-two 1) => 1",)
    assert entry.related == ("probe-one",)
    assert entry.category == "Probes"
    assert entry.signature == "(probe-two ...)"


def test_name_and_category_fallbacks():
    @builtin()
    def probe_fallback(args):
        """Fallback probe."""
        return None

    entry = _find("probe_fallback")
    assert entry.category == "Other"
    assert entry.signature == "(probe_fallback ...)"
    assert entry.examples == ()
    assert entry.related == ()


def test_registration_order_is_kept():
    @builtin(name="probe-first")
    def first(args):
        """First."""

    @builtin(name="probe-second")
    def second(args):
        """Second."""

    names = [entry.name for entry in registered()]
    assert names.index("probe-first") < names.index("probe-second")


def test_arithmetic_builtins_are_registered():
    names = {entry.name for entry in registered()}
    assert {"+", "-", "*", "/", "%"} <= names
    plus = _find("+")
    assert plus.function is arithmetic.add
    assert plus.category == "Arithmetic"
    assert plus.related == ("-", "*", "/")
    assert plus.description == "Returns the sum of all arguments."
    assert plus.examples == ("(+ 1 2 3) => 6\n(+ 10) => 10\n(+) => 0",)


def test_registered_returns_snapshot():
    before = registered()

    @builtin(name="probe-snapshot")
    def snapshot(args):
        """Snapshot."""

    assert len(registered()) == len(before) + 1
    assert all(entry.name != "probe-snapshot" for entry in before)