"""Two-dimensional points and vectors."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane with coordinate-wise arithmetic."""

    x: float = 0
    y: float = 0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k):
        if isinstance(k, Point):
            return NotImplemented
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        if isinstance(k, Point):
            return NotImplemented
        return Point(self.x / k, self.y / k)

    def __floordiv__(self, k):
        if isinstance(k, Point):
            return NotImplemented
        return Point(self.x // k, self.y // k)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)