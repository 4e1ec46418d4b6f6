# quippy

The runtime core of quippy, a small dynamically typed scripting language.
The package has two parts:

- `quippy.values` holds the language's value types and the operators that act on them.
- `quippy.interp` holds the interpreter's variable storage.

## Installation

```
pip install .
```

## Values

`quippy.values` defines the value classes. Each one is a frozen dataclass and a subclass of `QType`:

- `Int(value)` holds a 64-bit integer.
- `Float(value)` holds a float.
- `Bool(value)` holds a truth value.
- `Str(value)` holds a string.
- `Void()` is the unit value, written `()`.
- `Err()` is the error value.
- `List(items)` holds its items as a tuple.
- `Obj(entries)` is a dict from encoded keys to values. A string key `name` is stored as `"$name"`. An integer key `3` is stored as `"3"`.
- `Thread(id)` is a thread handle. `Thread(None)` means the current thread.
- `Func(scope)` is a function value with the scope it captured.

Operators are plain functions that take values and return values:

- Arithmetic: `add`, `sub`, `mul`, `div`, `modulo`.
  - `add` also concatenates strings and lists.
  - `add` merges two objects. Where both have a key, the right-hand entry wins.
- Logic and bits: `and_`, `or_`, `xor`, `not_`. They act bitwise on `Int` and logically on `Bool`.
- Comparison: `eq`, `ne`, `lt`, `gt`, `le`, `ge`.
  - They return a `Bool`.
  - The ordering operators return `Bool(False)` for pairs that have no order.
- Other operations:
  - `index` looks up a list element or an object entry.
  - `like` tells whether two values are the same variant.
  - `into` converts the left value to the variant of the right value.

When the operands do not fit an operator, it returns `Err()`. Some cases raise instead:

- Integer `div` and `modulo` by zero raise `ZeroDivisionError`.
- `eq` and `ne` on two `Obj` values raise `TypeError`.
- `eq` and `ne` on a numbered `Thread` and `Thread(None)` raise `TypeError`.
- `index` on an `Obj` with a key that is neither `Int` nor `Str` raises `TypeError`.

```python
from quippy.values import Int, Str, List, add, into, index, like

add(Int(2), Int(3))                     # Int(value=5)
add(Str("ab"), Str("cd"))               # Str(value='abcd')
into(Str("42"), Int(0))                 # Int(value=42)
into(Int(7), Str(""))                   # Str(value='7')
like(Int(1), Int(99))                   # Bool(value=True)
index(List([Int(1), Int(2)]), Int(1))   # Int(value=2)
```

The numeric operators behave as follows:

- Integer `add`, `sub` and `mul` wrap around at 64 bits.
- Integer `div` truncates toward zero.
- `modulo` takes the sign of the left operand.

## Interpreter state

`quippy.interp.Interpreter` keeps the global variables in `global_scope` and a stack of local scopes in `local_scopes`. The stack starts with one empty scope.

```python
from quippy.interp import Interpreter
from quippy.values import Int

interp = Interpreter()
interp.store_global("answer", Int(42))
interp.fetch_global("answer")   # Int(value=42)
interp.fetch_global("missing")  # None
interp.store_local("x", Int(1))  # bound in the innermost local scope
```

## What this package does not do

The package cannot run quippy programs. It has:

- no parser,
- no evaluator,
- no command-line tool.

`Interpreter` only stores variables. It has no method to read a local variable back, and none to push or pop scopes. Work with `local_scopes` directly for that.

## Running the tests

```
pip install .[test]
pytest
```