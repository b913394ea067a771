"""Two-dimensional integer vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

Operand = Union["Vector2Int", int]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _pair(other: object) -> Optional[Tuple[int, int]]:
    if isinstance(other, Vector2Int):
        return other.x, other.y
    if isinstance(other, int):
        return other, other
    return None


@dataclass
class Vector2Int:
    """A mutable vector with two integer components.

    Arithmetic works component-wise, with either another vector or an int
    applied to both components. Division truncates toward zero.
    """

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __neg__(self) -> Vector2Int:
        return Vector2Int(-self.x, -self.y)

    def __add__(self, other: Operand) -> Vector2Int:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2Int(self.x + pair[0], self.y + pair[1])

    def __radd__(self, value: int) -> Vector2Int:
        return self.__add__(value)

    def __sub__(self, other: Operand) -> Vector2Int:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2Int(self.x - pair[0], self.y - pair[1])

    def __rsub__(self, value: int) -> Vector2Int:
        if not isinstance(value, int):
            return NotImplemented
        return Vector2Int(value - self.x, value - self.y)

    def __mul__(self, other: Operand) -> Vector2Int:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2Int(self.x * pair[0], self.y * pair[1])

    def __rmul__(self, value: int) -> Vector2Int:
        return self.__mul__(value)

    def __truediv__(self, other: Operand) -> Vector2Int:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2Int(_trunc_div(self.x, pair[0]), _trunc_div(self.y, pair[1]))

    def __rtruediv__(self, value: int) -> Vector2Int:
        if not isinstance(value, int):
            return NotImplemented
        return Vector2Int(_trunc_div(value, self.x), _trunc_div(value, self.y))

    def __iadd__(self, other: Operand) -> Vector2Int:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        self.x += pair[0]
        self.y += pair[1]
        return self

    def __isub__(self, other: Operand) -> Vector2Int:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        self.x -= pair[0]
        self.y -= pair[1]
        return self

    def __imul__(self, other: Operand) -> Vector2Int:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        self.x *= pair[0]
        self.y *= pair[1]
        return self

    def __itruediv__(self, other: Operand) -> Vector2Int:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        self.x = _trunc_div(self.x, pair[0])
        self.y = _trunc_div(self.y, pair[1])
        return self