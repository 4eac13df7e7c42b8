# fnoverride

`fnoverride` lets a test take over the behaviour of ordinary functions and
methods. A function hands each call to an `Overrider` first; if the test has
left an instruction for it, the instruction decides what is returned and
which arguments are rewritten, and the overrider records how often each
instruction fired and what happened each time.

Functions are not patched: a function takes part only if it asks the
overrider, either through the `overridable` decorator or by calling
`Overrider.override` itself.

## Installing

```
pip install fnoverride
```

The test suite needs the `test` extra:

```
pip install "fnoverride[test]"
pytest
```

## Making a function overridable

```python
from fnoverride.overrider import Overrider

overrider = Overrider()

@overrider.overridable(int, "add")
def add(a, b):
    return a + b
```

The first argument is the declared return type; `None` stands for a
function that returns nothing. The name defaults to the function's
`__name__`. Template-style suffixes and spaces are stripped from names
(`process_function_name("f<int>")` gives `"f"`).

A function can also ask directly with
`overrider.override(function_name, return_type, *args, instance=None)`. It
returns the value to return, or the `NO_OVERRIDE` marker (the single
`NoOverride` instance) when the function should run its own body.
Instructions created with `instruct(name, instance)` only apply to calls
made with that `instance`. `Overridable` is an `Overrider` subclass that a
class can derive from so that each object carries its own instructions.

## Instructing

`Overrider.instruct(function_name, instance=None)` adds an `Instruction`
(from `fnoverride.instruction`); its methods return the instruction, so they
chain:

```python
(overrider.instruct("add")
    .when_called_with(1, 2)
    .returns(10, int)
    .expected())

assert add(1, 2) == 10
assert add(2, 2) == 4
assert overrider.failed_functions() == []
```

Instructions for a function are tried in the order they were added; the
first that applies wins.

Return values:

* `returns(value, return_type)` returns a fixed value; `return_type`
  defaults to `type(value)` and must equal the declared return type or the
  instruction does not apply. Passing the wildcard is the same as
  `returns_any()`.
* `returns_void()` returns early from a function declared with `None`.
* `returns_any()` lets the instruction fire but keeps the function's own
  return value.
* `returns_by_action(action, return_type)` calls
  `action(instance, args, typed_info)`, where `typed_info` is a
  `fnoverride.types.TypedInfo` holding the declared type. A result of the
  wrong type is not returned and is recorded as
  `RETURN_ACTION_TYPE_MISMATCH`.

Arguments are rewritten through `Ref` cells from `fnoverride.args_modifier`:

```python
from fnoverride.args_modifier import Ref
from fnoverride.types import DONT_SET

@overrider.overridable(bool, "load")
def load(path, out):
    with open(path) as handle:
        out.value = handle.read()
    return True

overrider.instruct("load").set_args(DONT_SET, "cached text").returns(True, bool)

cell = Ref("")
assert load("notes.txt", cell) is True
assert cell.value == "cached text"
```

* `set_args(*values)` copies each value into the matching `Ref`;
  `DONT_SET` (any `Any()`) leaves that argument alone. Each set value's type
  must fit the argument (or the value inside its `Ref`), and there must be
  one value per argument. Setting a `Const` argument records
  `MODIFY_CONST_ARG_ERROR`; a `Ref(value, assignable=False)` records
  `MODIFY_NON_ASSIGNABLE_ARG_ERROR`.
* `set_args_by_action(action, *types)` calls `action(instance, args)`
  instead; the types are checked against the arguments when their count
  matches, and the `Any` type leaves a position unchecked.
* An instruction that only sets arguments still lets the function body run
  afterwards; add a return instruction to stop it.

Conditions and callbacks:

* `when_called_with(*values)` applies only when the arguments equal the
  values (a `Ref` or `Const` argument is compared by its contents; a `Ref`
  condition matches only that same cell). `ANY` matches anything. A value
  that raises `TypeError` on comparison records
  `CHECK_ARG_MISSING_INEQUAL_OPERATOR_ERROR` on every result log of that
  function.
* `if_(condition)` applies only when `condition(instance, args)` is true.
* `times(n)` applies at most `n` times; `-1` means no limit.
* `when_called_expectedly_do(action)` runs `action(instance, args)` each
  time the instruction fires; `otherwise_do(action)` runs it when a value,
  predicate or call-count condition turns a call down.

Results and expectations:

* `assigns_result()` attaches an `OverrideResult` (from
  `fnoverride.status`) and returns it. It records each `OverrideStatus`:
  `last_status()`, `last_status_succeed()`, `all_statuses()`.
* `expected()` reports a failure unless the instruction fired exactly
  `times` times (or at least once without a limit); `expected_not_called()`
  reports one if it fired that often (or at all without a limit).

## Checking expectations

```python
failed = overrider.failed_functions()
if failed:
    print(overrider.failed_report())
```

`failed_report()` lists each failed function with the statuses of its
instructions; `override_results(name)` returns their result logs.

`instruct_passthrough()` returns an instruction describing calls that no
instruction overrode: with `expected()` and `times(n)` more than `n` such
calls are listed as `"<name> (Passthrough)"`, and a wrong count as
`"Passthrough"`. `reset_passthrough()` forgets it, `remove_instructs(name)`
drops one function's instructions and `clear_all_instructs()` drops all.

## Amalgamating headers

A small tool inlines every quoted `#include` of an entry file, each file
only once, and writes the combined text to standard output, with progress
and errors on standard error:

```
fnoverride-amalgamate path/to/Entry.hpp > Single.hpp
```

From Python, `fnoverride.amalgamate.amalgamate(entry_path)` returns the
text, and `Amalgamator` writes it to any stream; both raise
`AmalgamationError` when a file cannot be opened or an include path cannot
be resolved.