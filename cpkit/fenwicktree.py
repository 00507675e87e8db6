"""Fenwick (binary indexed) tree for prefix sums."""

from __future__ import annotations


class FenwickTree:
    """Point updates and range sums over ``n`` values, all initially zero."""

    __slots__ = ("_n", "_data")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._data = [0] * n

    def __len__(self) -> int:
        return self._n

    def add(self, p: int, x) -> None:
        """Add ``x`` to the value at position ``p``."""
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")
        p += 1
        while p <= self._n:
            self._data[p - 1] += x
            p += p & -p

    def prefix_sum(self, k: int):
        """Return the sum of positions ``[0, k)``."""
        if not 0 <= k <= self._n:
            raise IndexError(f"prefix length {k} out of range")
        s = 0
        while k > 0:
            s += self._data[k - 1]
            k -= k & -k
        return s

    def sum(self, l: int, r: int):
        """Return the sum of positions ``[l, r)``."""
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of range")
        return self.prefix_sum(r) - self.prefix_sum(l)