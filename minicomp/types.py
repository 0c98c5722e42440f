"""Language enums, keyword table and value conversion helpers."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional


class Operator(enum.IntEnum):
    """Binary operators of the language."""

    NONE = 0
    PLUS = 1
    MINUS = 2
    MUL = 3
    DIV = 4
    MODULO = 5
    EQUAL = 6
    SUP = 7
    SUPEQUAL = 8
    INF = 9
    INFEQUAL = 10
    DIFF = 11


class ValueType(enum.IntEnum):
    """Types a value or a node can carry."""

    UNDEFINED = 0
    BOOLEAN = 1
    INTEGER = 2
    STRING = 3


class Keywords:
    """Maps keyword names to the spelling the language uses for them.

    Names without an override are spelled as themselves.
    """

    def __init__(self, overrides: Optional[Mapping[str, str]] = None) -> None:
        self._table = dict(overrides or {})

    def __getitem__(self, key: str) -> str:
        return self._table.get(key, key)

    def __repr__(self) -> str:
        return f"Keywords({self._table!r})"


_DEFAULT_KEYWORDS = Keywords()


def _resolve(keywords: Optional[Keywords]) -> Keywords:
    return _DEFAULT_KEYWORDS if keywords is None else keywords


# Lookup order matters: the first matching spelling wins.
_OPERATOR_KEYS = {
    Operator.PLUS: "+",
    Operator.MINUS: "-",
    Operator.MUL: "*",
    Operator.DIV: "/",
    Operator.MODULO: "%",
    Operator.SUP: ">",
    Operator.INF: "<",
    Operator.SUPEQUAL: ">=",
    Operator.INFEQUAL: "<=",
    Operator.DIFF: "!=",
    Operator.EQUAL: "==",
}

_TYPE_KEYS = {
    ValueType.INTEGER: "int",
    ValueType.STRING: "string",
    ValueType.BOOLEAN: "bool",
}


@dataclass
class TypedNode:
    """A syntax tree node that carries a computed type."""

    computed_type: ValueType = ValueType.UNDEFINED


def string_to_op(text: str, keywords: Optional[Keywords] = None) -> Operator:
    """Return the operator spelled by ``text``."""
    kw = _resolve(keywords)
    for op, key in _OPERATOR_KEYS.items():
        if text == kw[key]:
            return op
    raise ValueError(f"unknown operator: {text!r}")


def op_to_string(op: Operator, keywords: Optional[Keywords] = None) -> str:
    """Return the spelling of ``op``."""
    try:
        key = _OPERATOR_KEYS[Operator(op)]
    except (KeyError, ValueError):
        raise ValueError(f"operator has no spelling: {op!r}") from None
    return _resolve(keywords)[key]


def string_fill(char: str, size: int) -> str:
    """Return a string made of ``size`` copies of ``char``."""
    return char * size


def bool_to_string(value: bool, keywords: Optional[Keywords] = None) -> str:
    """Return the spelling of a boolean literal."""
    kw = _resolve(keywords)
    return kw["true"] if value else kw["false"]


def string_to_bool(text: str, keywords: Optional[Keywords] = None) -> bool:
    """Parse a boolean literal."""
    kw = _resolve(keywords)
    if text == kw["true"]:
        return True
    if text == kw["false"]:
        return False
    raise ValueError(f"not a boolean literal: {text!r}")


def string_to_type(text: str, keywords: Optional[Keywords] = None) -> ValueType:
    """Return the type named by ``text``, or UNDEFINED."""
    kw = _resolve(keywords)
    for value_type, key in _TYPE_KEYS.items():
        if text == kw[key]:
            return value_type
    return ValueType.UNDEFINED


def type_to_string(value: ValueType, keywords: Optional[Keywords] = None) -> str:
    """Return the name of a type."""
    kw = _resolve(keywords)
    key = _TYPE_KEYS.get(ValueType(value), "undefined")
    return kw[key]


_ESCAPES = {"n": "\n", "f": "\f", "v": "\v", "r": "\r", "t": "\t"}


def activate_special_chars(text: str) -> str:
    """Replace backslash escapes with the characters they stand for.

    Unknown escapes yield the escaped character; a trailing backslash is kept.
    """
    out = []
    chars = iter(text)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, None)
            if nxt is None:
                out.append(ch)
            else:
                out.append(_ESCAPES.get(nxt, nxt))
        else:
            out.append(ch)
    return "".join(out)


_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_WORD_RE = re.compile(r"\s*(\S+)")


def from_string(text: str, kind: type = int) -> Any:
    """Read a leading value of type ``kind`` from ``text``.

    Leading whitespace is skipped and trailing characters are ignored.
    Raises ValueError when no value can be read.
    """
    if kind is bool:
        match = _INT_RE.match(text)
        if match is None or int(match.group(1)) not in (0, 1):
            raise ValueError(f"cannot read bool from {text!r}")
        return bool(int(match.group(1)))
    if kind is int:
        match = _INT_RE.match(text)
        if match is None:
            raise ValueError(f"cannot read int from {text!r}")
        return int(match.group(1))
    if kind is float:
        match = _FLOAT_RE.match(text)
        if match is None:
            raise ValueError(f"cannot read float from {text!r}")
        return float(match.group(1))
    if kind is str:
        match = _WORD_RE.match(text)
        if match is None:
            raise ValueError(f"cannot read word from {text!r}")
        return match.group(1)
    raise TypeError(f"unsupported kind: {kind!r}")