"""Shared, deduplicated values."""

from __future__ import annotations

from typing import Any, Dict

_POOLS: Dict[type, Dict[Any, Any]] = {}
_UNSET = object()


class Flyweight:
    """A handle on a value stored once in a pool shared by its class.

    Two flyweights are equal when they point at the same pooled element.
    """

    __slots__ = ("_elt",)

    def __init__(self, value: Any = _UNSET) -> None:
        if isinstance(value, Flyweight):
            self._elt = value._elt
            return
        if value is _UNSET:
            value = self._empty()
        self._elt = self._add(value)

    @classmethod
    def _pool(cls) -> Dict[Any, Any]:
        return _POOLS.setdefault(cls, {})

    @classmethod
    def _add(cls, value: Any) -> Any:
        return cls._pool().setdefault(value, value)

    @classmethod
    def _empty(cls) -> Any:
        raise TypeError(f"{cls.__name__} needs a value")

    @classmethod
    def clear(cls) -> None:
        """Empty the pool; existing handles keep their old elements."""
        cls._pool().clear()

    @classmethod
    def size(cls) -> int:
        """Number of distinct elements in the pool."""
        return len(cls._pool())

    @property
    def value(self) -> Any:
        return self._elt

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Flyweight):
            return self._elt is other._elt
        return self._elt == other

    def __hash__(self) -> int:
        return hash(self._elt)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Flyweight):
            return NotImplemented
        # Orders by element identity, which is cheap and stable.
        return id(self._elt) < id(other._elt)

    def __add__(self, other: Any) -> "Flyweight":
        other_value = other._elt if isinstance(other, Flyweight) else other
        return type(self)(self._elt + other_value)

    def __str__(self) -> str:
        return str(self._elt)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elt!r})"


class SharedString(Flyweight):
    """An interned string."""

    __slots__ = ()

    @classmethod
    def _empty(cls) -> str:
        return ""

    @classmethod
    def _add(cls, value: Any) -> Any:
        if not isinstance(value, str):
            raise TypeError(f"SharedString needs a str, got {type(value).__name__}")
        return super()._add(value)

    def __len__(self) -> int:
        return len(self._elt)

    def __getitem__(self, index: int) -> str:
        return self._elt[index]