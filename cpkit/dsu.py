"""Disjoint-set union structures."""

from __future__ import annotations


class DSU:
    """Disjoint sets over ``0..n-1`` with union by size and path compression."""

    __slots__ = ("_n", "_parent_or_size")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        # Roots hold minus the component size, other nodes their parent.
        self._parent_or_size = [-1] * n

    def __len__(self) -> int:
        return self._n

    def _check(self, a: int) -> None:
        if not 0 <= a < self._n:
            raise IndexError(f"vertex {a} out of range")

    def merge(self, a: int, b: int) -> int:
        """Join the sets holding ``a`` and ``b``; return the new leader."""
        self._check(a)
        self._check(b)
        x, y = self.leader(a), self.leader(b)
        if x == y:
            return x
        ps = self._parent_or_size
        if -ps[x] < -ps[y]:
            x, y = y, x
        ps[x] += ps[y]
        ps[y] = x
        return x

    def same(self, a: int, b: int) -> bool:
        """Whether ``a`` and ``b`` are in the same set."""
        self._check(a)
        self._check(b)
        return self.leader(a) == self.leader(b)

    def leader(self, a: int) -> int:
        """Return the representative of the set holding ``a``."""
        self._check(a)
        ps = self._parent_or_size
        root = a
        while ps[root] >= 0:
            root = ps[root]
        while a != root:
            ps[a], a = root, ps[a]
        return root

    def size(self, a: int) -> int:
        """Return the size of the set holding ``a``."""
        self._check(a)
        return -self._parent_or_size[self.leader(a)]

    def groups(self) -> list[list[int]]:
        """Return all sets, ordered by leader, each in increasing order."""
        buckets: list[list[int]] = [[] for _ in range(self._n)]
        for i in range(self._n):
            buckets[self.leader(i)].append(i)
        return [group for group in buckets if group]


class RollbackDSU:
    """Disjoint sets with union by size whose unions can be undone."""

    __slots__ = ("_link", "_size", "_history")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._link = list(range(n))
        self._size = [1] * n
        self._history: list[int] = []

    def __len__(self) -> int:
        return len(self._link)

    def find(self, x: int) -> int:
        """Return the representative of ``x`` (no path compression)."""
        if not 0 <= x < len(self._link):
            raise IndexError(f"vertex {x} out of range")
        while self._link[x] != x:
            x = self._link[x]
        return x

    def unite(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; return False if already joined."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._link[b] = a
        self._size[a] += self._size[b]
        self._history.append(b)
        return True

    def snapshot(self) -> int:
        """Return a marker of the current state for :meth:`rollback`."""
        return len(self._history)

    def rollback(self, t: int) -> None:
        """Undo unions until only ``t`` successful unions remain."""
        if t < 0:
            raise ValueError("t must be non-negative")
        while len(self._history) > t:
            x = self._history.pop()
            self._size[self._link[x]] -= self._size[x]
            self._link[x] = x