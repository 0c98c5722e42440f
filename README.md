# minicomp

Building blocks for a small imperative teaching language. These are the
pieces that a lexer, binder, type checker and interpreter for such a
language share.

## Installation

From a checkout of the project:

```
pip install .
```

## What is inside

- `minicomp.types`
  - The `Operator` and `ValueType` enumerations.
  - `Keywords`, which maps language spellings such as `"int"`, `"if"` or
    `"=="` to the text used in source programs. A name with no override
    is spelled as itself.
  - `TypedNode`, a dataclass that holds a `computed_type`.
  - Conversion helpers: `string_to_op`, `op_to_string`, `string_to_type`,
    `type_to_string`, `string_to_bool`, `bool_to_string`, `string_fill`,
    `activate_special_chars` (expands `\n`, `\t` and other backslash
    escapes) and `from_string` (reads a leading `int`, `bool`, `float` or
    word from a string).
- `minicomp.interning`: `Flyweight` and `SharedString`. Each class stores
  its values in one shared pool, so equal values share a single stored
  copy. Both have `clear()` and `size()` class methods.
- `minicomp.scope`: `Scope`, a stack of nested name tables.
  - `open` and `close` manage the stack.
  - `put`, `get_from_current` and `get_from_all` store and look up names.
    A lookup returns `None` when the name is missing.
  - `current` and `levels` give read-only views.
  - `set_filter` hides keys with a given prefix from `render` and `str()`.
- `minicomp.symbol`: `Symbol` and `SymbolType`.
  - A `Symbol` is a token that works out its own kind (keyword, type,
    operator, identifier, value, and so on). `check()` tests whether an
    identifier is valid.
  - The module also has the helpers `find_type`, `type_name` and
    `format_width`.
- `minicomp.variable`: `Variable`, a runtime integer, boolean or string.
  - Arithmetic and comparisons need both operands to have the same type.
    Integer division and modulo truncate toward zero.
  - `assign` copies a value of the same type.
  - `dump` shows the type with the value. `render` shows the value as the
    language prints it.

Operations that do not make sense raise exceptions:
- an unknown operator or boolean literal raises `ValueError`;
- mixed types raise `TypeError`;
- dividing by zero raises `ZeroDivisionError`;
- using a `Scope` with no scope open raises `IndexError`.

## Example

```python
from minicomp.types import Keywords
from minicomp.symbol import Symbol, SymbolType
from minicomp.scope import Scope
from minicomp.variable import Variable

keywords = Keywords()

token = Symbol("while", 3, None, keywords)
assert token.kind is SymbolType.KEYWORD

scope = Scope()
scope.open()
scope.put("x", Variable(40))
total = scope.get_from_all("x") + Variable(2)
print(total.render(keywords))   # 42
```

## What it does not do

This package has only the shared pieces listed above. It has no:
- lexer that splits source text into symbols;
- parser or syntax tree beyond `TypedNode`;
- binder or type checker;
- interpreter or code generator;
- command-line program.

## Running the tests

```
pip install .[test]
pytest
```