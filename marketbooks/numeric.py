"""A tolerant floating-point amount type used for monetary values."""

from __future__ import annotations

import re
from numbers import Real

_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse(text: str) -> float:
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"Invalid decimal string: {text!r}")
    return float(match.group(1))


class Decimal:
    """An amount backed by a float whose comparisons allow a tiny tolerance."""

    EPSILON = 1e-10
    __slots__ = ("_value",)

    def __init__(self, value: Decimal | Real | str = 0) -> None:
        if isinstance(value, Decimal):
            self._value = value._value
        elif isinstance(value, str):
            self._value = _parse(value)
        elif isinstance(value, Real):
            self._value = float(value)
        else:
            raise TypeError(f"Cannot build a Decimal from {type(value).__name__}")

    @staticmethod
    def _coerce(other: object) -> Decimal | None:
        if isinstance(other, Decimal):
            return other
        if isinstance(other, Real):
            return Decimal(other)
        return None

    def __add__(self, other: object) -> Decimal:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Decimal(self._value + rhs._value)

    __radd__ = __add__

    def __sub__(self, other: object) -> Decimal:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Decimal(self._value - rhs._value)

    def __rsub__(self, other: object) -> Decimal:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Decimal:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Decimal(self._value * rhs._value)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Decimal:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._value == 0:
            raise ZeroDivisionError("Division by zero")
        return Decimal(self._value / rhs._value)

    def __rtruediv__(self, other: object) -> Decimal:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> Decimal:
        return Decimal(-self._value)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return abs(self._value - rhs._value) < self.EPSILON

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value < rhs._value - self.EPSILON

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value > rhs._value + self.EPSILON

    def __le__(self, other: object) -> bool:
        result = self.__gt__(other)
        return result if result is NotImplemented else not result

    def __ge__(self, other: object) -> bool:
        result = self.__lt__(other)
        return result if result is NotImplemented else not result

    def __float__(self) -> float:
        return self._value

    def __str__(self) -> str:
        return f"{self._value:g}"

    def __repr__(self) -> str:
        return f"Decimal({self._value!r})"