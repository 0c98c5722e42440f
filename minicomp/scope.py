"""A stack of nested name-to-value tables."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Dict, List, Optional

_TOP_RULE = "____________________________\n"
_LEVEL_RULE = "----------------------------\n"


class Scope:
    """Nested scopes; the most recently opened one is the current scope."""

    def __init__(self) -> None:
        self._stack: List[Dict[Hashable, Any]] = []
        self._filter = ""

    def _current_table(self) -> Dict[Hashable, Any]:
        if not self._stack:
            raise IndexError("no scope is open")
        return self._stack[-1]

    def open(self) -> None:
        """Open a new, empty scope on top of the others."""
        self._stack.append({})

    def close(self) -> None:
        """Close the current scope."""
        if not self._stack:
            raise IndexError("no scope to close")
        self._stack.pop()

    def put(self, key: Hashable, value: Any) -> None:
        """Bind ``key`` to ``value`` in the current scope."""
        self._current_table()[key] = value

    def get_from_current(self, key: Hashable) -> Optional[Any]:
        """Return the value bound to ``key`` in the current scope, or None."""
        return self._current_table().get(key)

    def get_from_all(self, key: Hashable) -> Optional[Any]:
        """Return the innermost value bound to ``key``, or None."""
        if not self._stack:
            raise IndexError("no scope is open")
        for table in reversed(self._stack):
            if key in table:
                return table[key]
        return None

    def set_filter(self, special: str) -> None:
        """Hide keys starting with ``special`` when rendering."""
        self._filter = special

    def current(self) -> Mapping[Hashable, Any]:
        """A read-only view of the current scope."""
        return MappingProxyType(self._current_table())

    def levels(self) -> Iterator[Mapping[Hashable, Any]]:
        """Read-only views of every scope, innermost first."""
        for table in reversed(self._stack):
            yield MappingProxyType(table)

    def __len__(self) -> int:
        return len(self._stack)

    def _shown(self, key: Hashable) -> bool:
        if not self._filter:
            return True
        return not str(key).startswith(self._filter)

    def render(self) -> str:
        """Text listing every scope, innermost first, keys in sorted order."""
        parts = [_TOP_RULE]
        for depth, table in enumerate(reversed(self._stack)):
            if depth:
                parts.append(_LEVEL_RULE)
            shift = ">>" * depth
            for key in sorted(table):
                if self._shown(key):
                    parts.append(f"{shift}{key}={table[key]}\n")
        parts.append("\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Scope(levels={len(self._stack)})"