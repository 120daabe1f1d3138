# lispbox

The runtime core of a small Scheme-flavoured Lisp. It provides the following
pieces:

- the value model and its printed form
- lexical environments
- structured evaluation errors
- sandbox configuration records
- a library of built-in functions

The built-ins cover arithmetic, comparison, logic, console output, type
predicates, error values, lists, keyword maps, strings, assertions and
function docstrings.

Each built-in takes a Python list of argument values and returns a value. A
call that is not valid raises an `EvalError`. That includes the wrong number
of arguments, an argument of the wrong type, and runtime failures such as
division by zero.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Values

Lisp values map onto Python types as follows (`lispbox.values`):

| Lisp     | Python                                              |
|----------|-----------------------------------------------------|
| numbers  | `float` (an `int` is also accepted as a number)     |
| booleans | `bool`                                              |
| strings  | `str`                                               |
| lists    | `list`                                              |
| maps     | `dict` keyed by keyword names, without the colon    |
| nil      | `Nil` (a single instance, also available as `NIL`)  |
| symbols  | `Symbol`                                            |
| keywords | `Keyword`                                           |
| errors   | `ErrorValue`                                        |
| lambdas  | `Lambda` (params, body, env, optional docstring)    |

The module has two helper functions:

- `to_display(value)` renders a value in its printed form, for example
  `#t`, `42`, `"text"`, `(1 2)`, `{:a 1}` or `Error: message`. Map keys are
  printed in sorted order.
- `type_name(value)` returns the type name that error messages use, such as
  `number`, `string`, `list` or `map`.

## Environments

```python
from lispbox.environment import Environment

globals_ = Environment()
globals_.define("x", 42.0)

local = globals_.child()
local.define("y", 1.0)

local.get("x")          # 42.0, found in the parent scope
local.set("x", 7.0)     # updates the existing binding in the parent
local.get("missing")    # None
"y" in local            # True
```

`define` always binds in the current scope. Calling `set` on a name that is
not bound in any scope raises `UndefinedSymbol`.

## Built-in functions

Each built-in is an ordinary function that takes a list of arguments:

```python
from lispbox.builtins import arithmetic, strings, maps
from lispbox.values import Keyword

arithmetic.add([1.0, 2.0, 3.0])                      # 6.0
strings.string_split(["a,b,c", ","])                 # ["a", "b", "c"]
maps.map_get([{"name": "Alice"}, Keyword("name")])   # "Alice"
```

The built-in modules in `lispbox.builtins` are:

| Module        | Contents                                                    |
|---------------|-------------------------------------------------------------|
| `arithmetic`  | `+`, `-`, `*`, `/`, `%`                                     |
| `comparison`  | `=`, `<`, `>`, `<=`, `>=`                                   |
| `logic`       | `and`, `or`, `not`                                          |
| `console`     | `print`, `println`                                          |
| `predicates`  | `number?`, `string?`, `list?`, `nil?`, `symbol?`, `bool?`, `map?`, `keyword?` |
| `errorvalues` | `error`, `error?`, `error-msg`                              |
| `lists`       | `cons`, `car`, `cdr`, `list`, `length`, `empty?`            |
| `maps`        | `map-new`, `map-get`, `map-set`, `map-has?`, `map-keys`, `map-values`, `map-entries`, `map-merge`, `map-remove`, `map-empty?`, `map-size` |
| `strings`     | `string-split`, `string-join`, `string-append`, `substring`, `string-trim`, `string-upper`, `string-lower`, `string-replace`, `string-contains?`, `string-starts-with?`, `string-ends-with?`, `string-empty?`, `string-length`, `string->number`, `number->string`, `string->list`, `list->string` |
| `assertions`  | `assert`, `assert-equal`, `assert-error`, `register-test`, `clear-tests` |
| `docs`        | `doc`                                                       |

`lispbox.stdenv.standard_environment()` returns a fresh environment with
every built-in bound under its Lisp name.
`register_builtins(env)` binds them into an environment you already have.

```python
from lispbox.stdenv import standard_environment

env = standard_environment()
env.get("+")([2.0, 3.0])    # 5.0
```

### Registry and help metadata

Built-ins are registered with the `lispbox.registry.builtin` decorator.
`lispbox.registry.registered()` returns a `BuiltinRegistration` for each one,
in registration order. Each registration holds these fields:

- `name`
- `function`
- `signature`, in the form `"(name ...)"`
- `description`
- `examples`
- `related`
- `category`

The description and the examples come from the function's docstring.
`lispbox.docmeta.parse_doc_markdown` splits a docstring into a summary, the
code blocks marked `lisp` under an `# Examples` heading, and a comma-separated
`# See Also` list.

### Assertions and the test registry

The assertion built-ins report failure as a value, not as an exception:

- `assert`, `assert-equal` and `assert-error` return `True` on success.
- On failure they return an `ErrorValue` with a descriptive message.
- `values_equal(a, b)` is the structural comparison that `assert-equal` uses.

`register-test` stores a name together with a `Lambda`. `clear-tests`
empties the store. `registered_tests()` returns the stored pairs.

## Errors

Every exception raised by a built-in derives from `lispbox.errors.EvalError`:

- `TypeMismatch` is raised for an argument of the wrong type. Example message:
  `+: expected number, got string at argument 2`.
- `ArityError` is raised for the wrong number of arguments. Example message:
  `%: expected 2 arguments, got 1`.
- `LispRuntimeError` is raised for failures such as `/: division by zero`.
- `UndefinedSymbol` is raised by `Environment.set` when a name is not bound.
- `NotCallable` is provided for evaluators that meet a value they cannot
  call.

The helper functions `type_error`, `arity_error` and `runtime_error` build
these exceptions.

Lisp-level errors are first-class values. `(error "msg")` returns an
`ErrorValue` and does not raise anything.

## Configuration

`lispbox.config` defines the sandbox configuration records and the version
constants:

- `FsConfig` holds the allowed paths. The defaults are `./data`, `./examples`
  and `./scripts`. It also holds a maximum file size, 10 MiB by default.
- `NetConfig` sets whether networking is enabled and which addresses are
  allowed.
- `IoConfig` combines the two records.

## What this package does not do

This package is a runtime library, not a complete interpreter.

- **No reader and no evaluator.** Lisp source text cannot be parsed or
  evaluated. The same applies to special forms such as `define`, `lambda` and
  `if`. A `Lambda` is a data record that nothing here applies.
- **No command-line program and no REPL.** There is also no `help` built-in.
- **No file or network built-ins.** `FsConfig`, `NetConfig` and `IoConfig`
  are plain configuration records that no built-in reads.
- **No test runner.** Tests can be registered and cleared, but nothing runs
  them.