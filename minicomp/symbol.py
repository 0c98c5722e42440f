"""Lexical symbols: text, line and kind."""

from __future__ import annotations

import enum
import string
from typing import Optional

from minicomp.interning import SharedString
from minicomp.types import Keywords

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_ID_TAIL = _LETTERS | _DIGITS | {"_"}


class SymbolType(enum.IntEnum):
    """Kinds of lexical symbol."""

    TYPE = 0
    KEYWORD = 1
    LEFT_BRACKET = 2
    RIGHT_BRACKET = 3
    SEMI_COLON = 4
    OPERATOR = 5
    SEPARATOR = 6
    VALUE = 7
    ID = 8
    COMA = 9
    ALLOCATION = 10
    COMPARATOR = 11
    STRING_EXPR = 12
    BOOLEAN = 13
    COLON = 14


_KEYWORD_KEYS = (
    "function", "return", "exit", "var", "if", "then",
    "else", "while", "do", "begin", "end",
)
_TYPE_KEYS = ("int", "string", "bool")
_OPERATOR_KEYS = ("+", "/", "-", "*", "%")
_COMPARATOR_KEYS = ("==", ">=", "<=", ">", "<", "!=")
_BOOLEAN_KEYS = ("true", "false")

_SINGLE_KEYS = (
    ("(", SymbolType.LEFT_BRACKET),
    (")", SymbolType.RIGHT_BRACKET),
    (",", SymbolType.COMA),
    (";", SymbolType.SEMI_COLON),
    (":", SymbolType.COLON),
    ("=", SymbolType.ALLOCATION),
)

_TYPE_NAMES = {
    SymbolType.TYPE: "Type",
    SymbolType.KEYWORD: "Keyword",
    SymbolType.LEFT_BRACKET: "Left bracket",
    SymbolType.RIGHT_BRACKET: "Right bracket",
    SymbolType.SEMI_COLON: "Semi colon",
    SymbolType.OPERATOR: "Operator",
    SymbolType.SEPARATOR: "Separator",
    SymbolType.VALUE: "Value",
    SymbolType.ID: "Id",
    SymbolType.COMA: "Coma",
    SymbolType.ALLOCATION: "Allocation",
    SymbolType.COMPARATOR: "Comparator",
    SymbolType.STRING_EXPR: "String expression",
    SymbolType.BOOLEAN: "Boolean",
    SymbolType.COLON: "Colon",
}


def find_type(text: str, keywords: Optional[Keywords] = None) -> SymbolType:
    """Guess the kind of a token from its text."""
    kw = keywords if keywords is not None else Keywords()

    def matches(keys: tuple) -> bool:
        return any(text == kw[key] for key in keys)

    if matches(_KEYWORD_KEYS):
        return SymbolType.KEYWORD
    if matches(_TYPE_KEYS):
        return SymbolType.TYPE
    if matches(_OPERATOR_KEYS):
        return SymbolType.OPERATOR
    for key, kind in _SINGLE_KEYS:
        if text == kw[key]:
            return kind
    if matches(_COMPARATOR_KEYS):
        return SymbolType.COMPARATOR
    if matches(_BOOLEAN_KEYS):
        return SymbolType.BOOLEAN
    if all(ch in _DIGITS for ch in text):
        return SymbolType.VALUE
    return SymbolType.ID


def type_name(kind: SymbolType) -> str:
    """Human-readable name of a symbol kind."""
    try:
        return _TYPE_NAMES[SymbolType(kind)]
    except ValueError:
        return "Unknow"


def format_width(text: str, size: int) -> str:
    """Pad ``text`` with spaces on the right up to ``size`` characters."""
    return text.ljust(size)


class Symbol:
    """A token read from source, with the line it was found on."""

    __slots__ = ("_text", "_line", "_kind")

    def __init__(
        self,
        text: str,
        line: int,
        kind: Optional[SymbolType] = None,
        keywords: Optional[Keywords] = None,
    ) -> None:
        self._text = SharedString(text)
        self._line = line
        self._kind = find_type(text, keywords) if kind is None else SymbolType(kind)

    @property
    def text(self) -> str:
        return self._text.value

    @property
    def line(self) -> int:
        return self._line

    @property
    def kind(self) -> SymbolType:
        return self._kind

    def check(self) -> bool:
        """Whether the symbol is valid; identifiers must match [a-zA-Z][a-zA-Z0-9_]*."""
        if self._kind != SymbolType.ID:
            return True
        text = self.text
        if not text or text[0] not in _LETTERS:
            return False
        return all(ch in _ID_TAIL for ch in text[1:])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return (self.text, self._line, self._kind) == (other.text, other._line, other._kind)

    def __hash__(self) -> int:
        return hash((self.text, self._line, self._kind))

    def __str__(self) -> str:
        return f"{format_width(type_name(self._kind), 20)}(At line {self._line}): \t{self.text}\n"

    def __repr__(self) -> str:
        return f"Symbol({self.text!r}, {self._line}, {self._kind.name})"