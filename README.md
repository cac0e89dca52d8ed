# fallible

Small building blocks for explicit error handling:

- `fallible.result`: `Ok` and `Err` results, built with `ok`, `error`,
  `errorf`, `new` and `new_many`. It also has the helpers `cast`,
  `cast_value` and `castf_value`.
- `fallible.option`: `Some` and `Nothing` options, built with `some`,
  `none`, `new` and `get`. It also has `map_value`, `map_or`, `map_or_else`
  and `cast`.
- `fallible.tuples`: a fixed-size `Tuple` of two to sixteen values, made
  with `new_tuple`.
- `fallible.errors`: `RecoverableError`, `throw` and `is_recoverable`.
- `fallible.handle`: the `handle_error` decorator. It turns recoverable
  errors raised inside a function into an `Err` result.
- `fallible.assertions`: checks that raise an error when they fail, such as
  `true`, `false`, `nil`, `not_nil`, `ok`, `error`, `some` and `none`.

## Results

```python
from fallible import result

res = result.new(42, None)
value, err = res.deconstruct()   # (42, None)

failed = result.errorf("could not open %s", "data.txt")
failed.is_error()                # True
wrapped = failed.map_error(lambda e: ValueError(f"wrap {e}"))
```

`unwrap()` returns the value of an `Ok`. On an `Err` it raises the error
marked as recoverable: an error that is not yet recoverable is wrapped in a
`RecoverableError`, whose cause is the original error.

`is_error()` with no arguments is true for any `Err`. You can also pass
filters. An exception class matches by `isinstance`, and an exception
instance matches by identity. Either kind matches anywhere along the chain of
wrapped errors.

`errorf` takes printf-style verbs. `%v` prints a value and `%T` prints its
type name. `%w` prints an error, and the new error wraps it.

`new_many(v1, ..., vN, err)` gathers the values into a `Tuple`.

`cast(res, int)` checks the value of an `Ok` against a type. `cast_value(x, int)`
and `castf_value(x, int, fmt, ...)` check a plain value against a type.

## Options

```python
from fallible import option

opt = option.get({"hello": 1}, "hello")
opt.unwrap_or(0)                                 # 1
option.map_or(option.none(), str, "missing")     # "missing"
```

`Nothing().unwrap()` raises a recoverable error.

## Tuples

```python
from fallible.tuples import new_tuple

t = new_tuple(1, "a", 3.0)
t.value2          # "a"
a, b, c = t.deconstruct()
```

A `Tuple` with fewer than two values or more than sixteen raises `ValueError`.

## Recovering from errors

```python
from fallible import assertions, result
from fallible.handle import handle_error

@handle_error
def load(path):
    assertions.true(path.endswith(".txt"))
    return result.ok(path)

load("notes.md").is_error()   # True
```

Only recoverable errors are caught. Any other exception passes through
unchanged.

The option checks `assertions.some`, `somef`, `none` and `nonef` behave
differently. They raise a plain error that is not marked recoverable, so
`handle_error` lets it propagate.

## What it does not do

This is a library only. It has no command-line tool.

## Installing

```
pip install fallible
```

Install with the `test` extra to run the test suite with pytest.