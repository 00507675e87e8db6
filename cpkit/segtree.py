"""Segment trees over a monoid."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from .internal_math import bit_ceil, countr_zero

S = TypeVar("S")

NEG_INF = -(10**18)


class SegTree(Generic[S]):
    """Point updates and range products over a monoid ``(op, e)``.

    ``op`` must be associative and ``e`` its identity element.  ``v`` is
    either the number of elements (all initialised to ``e``) or the
    initial values.
    """

    __slots__ = ("_op", "_e", "_n", "_size", "_log", "_d")

    def __init__(self, op: Callable[[S, S], S], e: S, v: int | Iterable[S] = 0) -> None:
        if isinstance(v, int):
            if v < 0:
                raise ValueError("size must be non-negative")
            values = [e] * v
        else:
            values = list(v)
        self._op = op
        self._e = e
        self._n = len(values)
        self._size = bit_ceil(self._n)
        self._log = countr_zero(self._size)
        self._d = [e] * (2 * self._size)
        self._d[self._size:self._size + self._n] = values
        for k in range(self._size - 1, 0, -1):
            self._update(k)

    def __len__(self) -> int:
        return self._n

    def _update(self, k: int) -> None:
        self._d[k] = self._op(self._d[2 * k], self._d[2 * k + 1])

    def _check_position(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")

    def set(self, p: int, x: S) -> None:
        """Replace the value at ``p`` with ``x``."""
        self._check_position(p)
        p += self._size
        self._d[p] = x
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def get(self, p: int) -> S:
        """Return the value at ``p``."""
        self._check_position(p)
        return self._d[p + self._size]

    def prod(self, l: int, r: int) -> S:
        """Return ``op`` over positions ``[l, r)``, or ``e`` when empty."""
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of range")
        op, d = self._op, self._d
        sml = smr = self._e
        l += self._size
        r += self._size
        while l < r:
            if l & 1:
                sml = op(sml, d[l])
                l += 1
            if r & 1:
                r -= 1
                smr = op(d[r], smr)
            l >>= 1
            r >>= 1
        return op(sml, smr)

    def all_prod(self) -> S:
        """Return ``op`` over all positions."""
        return self._d[1]

    def max_right(self, l: int, f: Callable[[S], bool]) -> int:
        """Return the largest ``r`` with ``f(prod(l, r))`` true, for monotone ``f``."""
        if not 0 <= l <= self._n:
            raise IndexError(f"position {l} out of range")
        if not f(self._e):
            raise ValueError("predicate must hold for the identity element")
        if l == self._n:
            return self._n
        op, d, size = self._op, self._d, self._size
        l += size
        sm = self._e
        while True:
            while l % 2 == 0:
                l >>= 1
            if not f(op(sm, d[l])):
                while l < size:
                    l *= 2
                    if f(op(sm, d[l])):
                        sm = op(sm, d[l])
                        l += 1
                return l - size
            sm = op(sm, d[l])
            l += 1
            if (l & -l) == l:
                break
        return self._n

    def min_left(self, r: int, f: Callable[[S], bool]) -> int:
        """Return the smallest ``l`` with ``f(prod(l, r))`` true, for monotone ``f``."""
        if not 0 <= r <= self._n:
            raise IndexError(f"position {r} out of range")
        if not f(self._e):
            raise ValueError("predicate must hold for the identity element")
        if r == 0:
            return 0
        op, d, size = self._op, self._d, self._size
        r += size
        sm = self._e
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not f(op(d[r], sm)):
                while r < size:
                    r = 2 * r + 1
                    if f(op(d[r], sm)):
                        sm = op(d[r], sm)
                        r -= 1
                return r + 1 - size
            sm = op(d[r], sm)
            if (r & -r) == r:
                break
        return 0


class MaxSegTree(SegTree[int]):
    """Range maximum over integers with inclusive query bounds.

    Parts of a query range outside the tree are ignored; a query that
    covers no element returns ``NEG_INF``.
    """

    __slots__ = ()

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(max, NEG_INF, values)

    def update(self, k: int, x: int) -> None:
        """Set position ``k`` to ``x``."""
        self.set(k, x)

    def query(self, l: int, r: int) -> int:
        """Return the maximum over positions ``l..r`` inclusive."""
        l = max(l, 0)
        r = min(r, len(self) - 1)
        if l > r:
            return NEG_INF
        return self.prod(l, r + 1)