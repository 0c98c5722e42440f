"""Runtime values of the language: integers, booleans and strings."""

from __future__ import annotations

from typing import Optional, Union

from minicomp.types import Keywords, ValueType, bool_to_string, type_to_string

Value = Union[int, bool, str]


def _type_of(value: Value) -> ValueType:
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, int):
        return ValueType.INTEGER
    if isinstance(value, str):
        return ValueType.STRING
    raise TypeError(f"unsupported value: {type(value).__name__}")


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _truncating_mod(left: int, right: int) -> int:
    return left - right * _truncating_div(left, right)


class Variable:
    """A typed value; its type is fixed when it is created."""

    __slots__ = ("_value", "_type")

    def __init__(self, value: Union[Value, "Variable"]) -> None:
        if isinstance(value, Variable):
            self._value = value._value
            self._type = value._type
            return
        self._type = _type_of(value)
        self._value = value

    @property
    def type(self) -> ValueType:
        return self._type

    @property
    def value(self) -> Value:
        return self._value

    def _same_type(self, other: "Variable", operation: str) -> None:
        if self._type != other._type:
            raise TypeError(
                f"cannot {operation} {self._type.name} and {other._type.name}"
            )

    def _require_integer(self, other: "Variable", operation: str) -> None:
        self._same_type(other, operation)
        if self._type != ValueType.INTEGER:
            raise TypeError(f"{operation} needs integers, got {self._type.name}")

    def assign(self, other: "Variable") -> "Variable":
        """Copy the value of ``other``, which must have the same type."""
        if other is self:
            return self
        self._same_type(other, "assign")
        self._value = other._value
        return self

    def __add__(self, other: "Variable") -> "Variable":
        if not isinstance(other, Variable):
            return NotImplemented
        self._same_type(other, "add")
        if self._type == ValueType.BOOLEAN:
            raise TypeError("cannot add booleans")
        return Variable(self._value + other._value)

    def __sub__(self, other: "Variable") -> "Variable":
        if not isinstance(other, Variable):
            return NotImplemented
        self._require_integer(other, "subtract")
        return Variable(self._value - other._value)

    def __mul__(self, other: "Variable") -> "Variable":
        if not isinstance(other, Variable):
            return NotImplemented
        self._require_integer(other, "multiply")
        return Variable(self._value * other._value)

    def __floordiv__(self, other: "Variable") -> "Variable":
        """Integer division, truncating toward zero."""
        if not isinstance(other, Variable):
            return NotImplemented
        self._require_integer(other, "divide")
        if other._value == 0:
            raise ZeroDivisionError("division by zero")
        return Variable(_truncating_div(self._value, other._value))

    def __mod__(self, other: "Variable") -> "Variable":
        """Remainder whose sign follows the dividend."""
        if not isinstance(other, Variable):
            return NotImplemented
        self._require_integer(other, "take modulo of")
        if other._value == 0:
            raise ZeroDivisionError("modulo by zero")
        return Variable(_truncating_mod(self._value, other._value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        self._same_type(other, "compare")
        return self._value == other._value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: "Variable") -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        self._require_integer(other, "order")
        return self._value < other._value

    def __gt__(self, other: "Variable") -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        self._require_integer(other, "order")
        return self._value > other._value

    def __le__(self, other: "Variable") -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        return not self > other

    def __ge__(self, other: "Variable") -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        return not self < other

    def dump(self, keywords: Optional[Keywords] = None) -> str:
        """Type and value, for diagnostics."""
        name = type_to_string(self._type, keywords)
        if self._type == ValueType.INTEGER:
            return f"({name}) {self._value}"
        if self._type == ValueType.BOOLEAN:
            return f"({name}) {'true' if self._value else 'false'}"
        if self._type == ValueType.STRING:
            return f"({name}) {self._value if self._value else '<empty>'}"
        return f"({name})"

    def render(self, keywords: Optional[Keywords] = None) -> str:
        """The value as the language prints it."""
        if self._type == ValueType.BOOLEAN:
            return bool_to_string(bool(self._value), keywords)
        return str(self._value)

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"Variable({self._value!r})"