"""Segment trees with lazy propagation of range operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from .internal_math import bit_ceil, countr_zero

S = TypeVar("S")
F = TypeVar("F")


class LazySegTree(Generic[S, F]):
    """Range products over a monoid ``(op, e)`` with range application of maps.

    ``mapping(f, x)`` applies map ``f`` to value ``x``,
    ``composition(f, g)`` is the map that applies ``g`` then ``f``, and
    ``identity`` is the map that changes nothing.
    """

    __slots__ = (
        "_op", "_e", "_mapping", "_composition", "_id",
        "_n", "_size", "_log", "_d", "_lz",
    )

    def __init__(
        self,
        op: Callable[[S, S], S],
        e: S,
        mapping: Callable[[F, S], S],
        composition: Callable[[F, F], F],
        identity: F,
        v: int | Iterable[S] = 0,
    ) -> None:
        if isinstance(v, int):
            if v < 0:
                raise ValueError("size must be non-negative")
            values = [e] * v
        else:
            values = list(v)
        self._op = op
        self._e = e
        self._mapping = mapping
        self._composition = composition
        self._id = identity
        self._n = len(values)
        self._size = bit_ceil(self._n)
        self._log = countr_zero(self._size)
        self._d = [e] * (2 * self._size)
        self._lz = [identity] * self._size
        self._d[self._size:self._size + self._n] = values
        for k in range(self._size - 1, 0, -1):
            self._update(k)

    def __len__(self) -> int:
        return self._n

    def _update(self, k: int) -> None:
        self._d[k] = self._op(self._d[2 * k], self._d[2 * k + 1])

    def _all_apply(self, k: int, f: F) -> None:
        self._d[k] = self._mapping(f, self._d[k])
        if k < self._size:
            self._lz[k] = self._composition(f, self._lz[k])

    def _push(self, k: int) -> None:
        self._all_apply(2 * k, self._lz[k])
        self._all_apply(2 * k + 1, self._lz[k])
        self._lz[k] = self._id

    def _check_position(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")

    def _check_range(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of range")

    def _push_path(self, p: int) -> None:
        for i in range(self._log, 0, -1):
            self._push(p >> i)

    def _update_path(self, p: int) -> None:
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def _push_range(self, l: int, r: int) -> None:
        for i in range(self._log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push((r - 1) >> i)

    def set(self, p: int, x: S) -> None:
        """Replace the value at ``p`` with ``x``."""
        self._check_position(p)
        p += self._size
        self._push_path(p)
        self._d[p] = x
        self._update_path(p)

    def get(self, p: int) -> S:
        """Return the value at ``p``."""
        self._check_position(p)
        p += self._size
        self._push_path(p)
        return self._d[p]

    def prod(self, l: int, r: int) -> S:
        """Return ``op`` over positions ``[l, r)``, or ``e`` when empty."""
        self._check_range(l, r)
        if l == r:
            return self._e
        l += self._size
        r += self._size
        self._push_range(l, r)
        op, d = self._op, self._d
        sml = smr = self._e
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

    def apply(self, p: int, f: F) -> None:
        """Apply map ``f`` to the value at ``p``."""
        self._check_position(p)
        p += self._size
        self._push_path(p)
        self._d[p] = self._mapping(f, self._d[p])
        self._update_path(p)

    def apply_range(self, l: int, r: int, f: F) -> None:
        """Apply map ``f`` to every value in ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return
        l += self._size
        r += self._size
        self._push_range(l, r)
        l2, r2 = l, r
        while l2 < r2:
            if l2 & 1:
                self._all_apply(l2, f)
                l2 += 1
            if r2 & 1:
                r2 -= 1
                self._all_apply(r2, f)
            l2 >>= 1
            r2 >>= 1
        for i in range(1, self._log + 1):
            if ((l >> i) << i) != l:
                self._update(l >> i)
            if ((r >> i) << i) != r:
                self._update((r - 1) >> i)

    def max_right(self, l: int, g: Callable[[S], bool]) -> int:
        """Return the largest ``r`` with ``g(prod(l, r))`` true, for monotone ``g``."""
        if not 0 <= l <= self._n:
            raise IndexError(f"position {l} out of range")
        if not g(self._e):
            raise ValueError("predicate must hold for the identity element")
        if l == self._n:
            return self._n
        op, d, size = self._op, self._d, self._size
        l += size
        self._push_path(l)
        sm = self._e
        while True:
            while l % 2 == 0:
                l >>= 1
            if not g(op(sm, d[l])):
                while l < size:
                    self._push(l)
                    l *= 2
                    if g(op(sm, d[l])):
                        sm = op(sm, d[l])
                        l += 1
                return l - size
            sm = op(sm, d[l])
            l += 1
            if (l & -l) == l:
                break
        return self._n

    def min_left(self, r: int, g: Callable[[S], bool]) -> int:
        """Return the smallest ``l`` with ``g(prod(l, r))`` true, for monotone ``g``."""
        if not 0 <= r <= self._n:
            raise IndexError(f"position {r} out of range")
        if not g(self._e):
            raise ValueError("predicate must hold for the identity element")
        if r == 0:
            return 0
        op, d, size = self._op, self._d, self._size
        r += size
        self._push_path(r - 1)
        sm = self._e
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not g(op(d[r], sm)):
                while r < size:
                    self._push(r)
                    r = 2 * r + 1
                    if g(op(d[r], sm)):
                        sm = op(d[r], sm)
                        r -= 1
                return r + 1 - size
            sm = op(d[r], sm)
            if (r & -r) == r:
                break
        return 0


def _sum_size_op(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return a[0] + b[0], a[1] + b[1]


def _add_mapping(f: int, x: tuple[int, int]) -> tuple[int, int]:
    return x[0] + f * x[1], x[1]


def _add_composition(f: int, g: int) -> int:
    return f + g


class RangeAddSumTree(LazySegTree[tuple[int, int], int]):
    """Range addition and range sum over integers with inclusive bounds.

    Parts of a range outside the tree are ignored.
    """

    __slots__ = ()

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(
            _sum_size_op, (0, 0), _add_mapping, _add_composition, 0,
            ((x, 1) for x in values),
        )

    def _clip(self, l: int, r: int) -> tuple[int, int]:
        return max(l, 0), min(r, len(self) - 1)

    def update(self, l: int, r: int, x: int) -> None:
        """Add ``x`` to every position ``l..r`` inclusive."""
        l, r = self._clip(l, r)
        if l <= r:
            self.apply_range(l, r + 1, x)

    def query(self, l: int, r: int) -> int:
        """Return the sum of positions ``l..r`` inclusive."""
        l, r = self._clip(l, r)
        if l > r:
            return 0
        return self.prod(l, r + 1)[0]