"""Enums, keyword table, interned strings, scopes, symbols and runtime values for a small teaching language."""

__version__ = "0.1.0"
__all__ = ["interning", "scope", "symbol", "types", "variable"]