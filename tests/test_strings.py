import pytest

from lispbox.builtins import strings
from lispbox.errors import ArityError, LispRuntimeError, TypeMismatch
from lispbox.values import ErrorValue, Symbol


def test_split_example():
    assert strings.string_split(["a,b,c", ","]) == ["a", "b", "c"]


def test_join_example():
    assert strings.string_join([["a", "b", "c"], ","]) == "a,b,c"


@pytest.mark.parametrize("text", ["a,b,c", "", ",,", "no-delimiter", "x,y,"])
def test_split_join_round_trip(text):
    parts = strings.string_split([text, ","])
    assert strings.string_join([parts, ","]) == text


def test_split_empty_delimiter_surrounds_characters():
    assert strings.string_split(["ab", ""]) == ["", "a", "b", ""]


def test_join_rejects_non_string_element():
    with pytest.raises(LispRuntimeError) as info:
        strings.string_join([["a", 1.0], ","])
    assert str(info.value) == "string-join: element 1 is not a string"


def test_join_requires_list():
    with pytest.raises(TypeMismatch) as info:
        strings.string_join(["abc", ","])
    assert info.value.position == 1
    assert info.value.expected == "list"


def test_substring_example():
    assert strings.substring(["hello", 0.0, 3.0]) == "hel"


def test_substring_full_and_empty():
    assert strings.substring(["hello", 0, 5]) == "hello"
    assert strings.substring(["hello", 2, 2]) == ""


@pytest.mark.parametrize("start,end", [(3, 2), (0, 6), (6, 6)])
def test_substring_invalid_indices(start, end):
    with pytest.raises(LispRuntimeError) as info:
        strings.substring(["hello", start, end])
    assert f"start={start}, end={end}, length=5" in str(info.value)


@pytest.mark.parametrize("bad", [-1.0, 1.5, True, "1"])
def test_substring_index_type(bad):
    with pytest.raises(TypeMismatch) as info:
        strings.substring(["hello", bad, 3])
    assert info.value.expected == "non-negative integer"
    assert info.value.position == 2


def test_trim_upper_lower_examples():
    assert strings.string_trim(["  hello  "]) == "hello"
    assert strings.string_upper(["hello"]) == "HELLO"
    assert strings.string_lower(["WORLD"]) == "world"


def test_replace_example():
    assert strings.string_replace(["hello", "l", "L"]) == "heLLo"


def test_replace_type_error_position():
    with pytest.raises(TypeMismatch) as info:
        strings.string_replace(["hello", "l", 1.0])
    assert info.value.position == 3


def test_predicates_examples():
    assert strings.string_contains(["hello world", "world"]) is True
    assert strings.string_contains(["hello", "world"]) is False
    assert strings.string_starts_with(["hello", "he"]) is True
    assert strings.string_starts_with(["hello", "lo"]) is False
    assert strings.string_ends_with(["hello", "lo"]) is True
    assert strings.string_ends_with(["hello", "he"]) is False
    assert strings.string_empty([""]) is True
    assert strings.string_empty(["x"]) is False


def test_length_counts_characters():
    assert strings.string_length(["hello"]) == 5
    assert strings.string_length(["héllo"]) == strings.string_length(["hello"])


def test_string_to_number_example():
    assert strings.string_to_number(["42"]) == 42


def test_string_to_number_failure_is_error_value():
    assert strings.string_to_number(["abc"]) == ErrorValue("Cannot parse 'abc' as number")


@pytest.mark.parametrize("text", ["1_000", "", "  ", "0x10", "1e"])
def test_string_to_number_rejects(text):
    assert strings.string_to_number([text]) == ErrorValue(f"Cannot parse '{text}' as number")


def test_number_to_string_example():
    assert strings.number_to_string([42.0]) == "42"


@pytest.mark.parametrize("value", [42.0, -7.0, 0.5, 3.25, 123456.789, -0.125])
def test_number_string_round_trip(value):
    text = strings.number_to_string([value])
    assert strings.string_to_number([text]) == value


def test_number_to_string_avoids_exponent():
    assert strings.number_to_string([1e-7]) == "0.0000001"


def test_number_to_string_requires_number():
    with pytest.raises(TypeMismatch) as info:
        strings.number_to_string(["42"])
    assert info.value.actual == "string"


def test_string_list_examples():
    assert strings.string_to_list(["abc"]) == ["a", "b", "c"]
    assert strings.list_to_string([["h", "e", "l", "l", "o"]]) == "hello"


@pytest.mark.parametrize("text", ["", "abc", "héllo wörld"])
def test_string_list_round_trip(text):
    assert strings.list_to_string([strings.string_to_list([text])]) == text


def test_list_to_string_rejects_non_string():
    with pytest.raises(LispRuntimeError) as info:
        strings.list_to_string([["a", Symbol("b")]])
    assert str(info.value) == "list->string: element 1 is not a string"


def test_append_examples():
    assert strings.string_append(["hello", " ", "world"]) == "hello world"
    assert strings.string_append([]) == ""


def test_append_type_error_position():
    with pytest.raises(TypeMismatch) as info:
        strings.string_append(["a", "b", 3.0])
    assert info.value.position == 3


@pytest.mark.parametrize(
    "function,args",
    [
        (strings.string_split, ["a"]),
        (strings.string_join, [[]]),
        (strings.substring, ["a", 0]),
        (strings.string_trim, []),
        (strings.string_upper, ["a", "b"]),
        (strings.string_replace, ["a", "b"]),
        (strings.string_starts_with, ["a"]),
        (strings.string_length, []),
        (strings.number_to_string, []),
        (strings.list_to_string, []),
    ],
)
def test_arity_errors(function, args):
    with pytest.raises(ArityError) as info:
        function(args)
    assert info.value.actual == len(args)