import pytest

from minicomp.symbol import Symbol, SymbolType, find_type, format_width, type_name
from minicomp.types import Keywords


@pytest.mark.parametrize(
    "text, kind",
    [
        ("function", SymbolType.KEYWORD),
        ("while", SymbolType.KEYWORD),
        ("end", SymbolType.KEYWORD),
        ("int", SymbolType.TYPE),
        ("bool", SymbolType.TYPE),
        ("+", SymbolType.OPERATOR),
        ("%", SymbolType.OPERATOR),
        ("(", SymbolType.LEFT_BRACKET),
        (")", SymbolType.RIGHT_BRACKET),
        (",", SymbolType.COMA),
        (";", SymbolType.SEMI_COLON),
        (":", SymbolType.COLON),
        ("=", SymbolType.ALLOCATION),
        ("==", SymbolType.COMPARATOR),
        ("!=", SymbolType.COMPARATOR),
        ("<=", SymbolType.COMPARATOR),
        ("true", SymbolType.BOOLEAN),
        ("false", SymbolType.BOOLEAN),
        ("42", SymbolType.VALUE),
        ("", SymbolType.VALUE),
        ("foo", SymbolType.ID),
        ("4x", SymbolType.ID),
    ],
)
def test_find_type(text, kind):
    assert find_type(text) is kind


def test_find_type_uses_keyword_spellings():
    kw = Keywords({"if": "si"})
    assert find_type("si", kw) is SymbolType.KEYWORD
    assert find_type("if", kw) is SymbolType.ID


@pytest.mark.parametrize(
    "kind, name",
    [
        (SymbolType.TYPE, "Type"),
        (SymbolType.LEFT_BRACKET, "Left bracket"),
        (SymbolType.STRING_EXPR, "String expression"),
        (SymbolType.COLON, "Colon"),
    ],
)
def test_type_name(kind, name):
    assert type_name(kind) == name


def test_type_name_unknown():
    assert type_name(99) == "Unknow"


def test_format_width_pads_and_keeps_long_text():
    padded = format_width("ab", 5)
    assert len(padded) == 5
    assert padded.rstrip(" ") == "ab"
    assert format_width("abcdef", 3) == "abcdef"


def test_symbol_guesses_kind():
    symbol = Symbol("begin", 7)
    assert symbol.kind is SymbolType.KEYWORD
    assert symbol.line == 7
    assert symbol.text == "begin"


def test_symbol_explicit_kind():
    symbol = Symbol("hello", 1, SymbolType.STRING_EXPR)
    assert symbol.kind is SymbolType.STRING_EXPR
    assert symbol.check() is True


@pytest.mark.parametrize("text", ["a", "abc_1", "Z9"])
def test_check_valid_ids(text):
    assert Symbol(text, 1).check() is True


@pytest.mark.parametrize("text", ["_a", "a-b", "a.b", "é"])
def test_check_invalid_ids(text):
    symbol = Symbol(text, 1)
    assert symbol.kind is SymbolType.ID
    assert symbol.check() is False


def test_check_empty_id_is_invalid():
    assert Symbol("", 1, SymbolType.ID).check() is False


def test_str_format():
    text = str(Symbol("foo", 3))
    assert text == "Id" + " " * 18 + "(At line 3): \tfoo\n"


def test_equality():
    assert Symbol("x", 2) == Symbol("x", 2)
    assert not Symbol("x", 2) == Symbol("x", 3)