"""Integer points on the map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol


class _HasXY(Protocol):
    x: int
    y: int


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


@dataclass(frozen=True)
class Point:
    """A pair of integer coordinates."""

    x: int = 0
    y: int = 0

    def size(self) -> int:
        """Area of the rectangle spanned by the coordinates."""
        return self.x * self.y

    def __mul__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(_trunc_div(self.x, other.x), _trunc_div(self.y, other.y))

    def distance(self, other: _HasXY) -> int:
        """Euclidean distance to another point, rounded to the nearest integer."""
        dx = self.x - other.x
        dy = self.y - other.y
        return _round_half_away(math.sqrt(dx * dx + dy * dy))