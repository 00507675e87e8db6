"""Strongly connected components of a directed graph."""

from __future__ import annotations


class SCCGraph:
    """Directed graph over ``0..n-1`` that splits into strongly connected components."""

    __slots__ = ("_n", "_edges")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._edges: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return self._n

    def add_edge(self, frm: int, to: int) -> None:
        """Add a directed edge from ``frm`` to ``to``."""
        if not 0 <= frm < self._n:
            raise IndexError(f"vertex {frm} out of range")
        if not 0 <= to < self._n:
            raise IndexError(f"vertex {to} out of range")
        self._edges.append((frm, to))

    def _adjacency(self) -> list[list[int]]:
        adj: list[list[int]] = [[] for _ in range(self._n)]
        for frm, to in self._edges:
            adj[frm].append(to)
        return adj

    def scc_ids(self) -> tuple[int, list[int]]:
        """Return the number of components and the component id of each vertex.

        Ids follow a topological order: every edge goes from a component
        to one with an equal or larger id.
        """
        n = self._n
        adj = self._adjacency()
        now_ord = 0
        group_num = 0
        visited: list[int] = []
        low = [0] * n
        order = [-1] * n
        ids = [0] * n

        for root in range(n):
            if order[root] != -1:
                continue
            low[root] = order[root] = now_ord
            now_ord += 1
            visited.append(root)
            stack = [(root, 0)]
            while stack:
                v, i = stack[-1]
                if i < len(adj[v]):
                    stack[-1] = (v, i + 1)
                    to = adj[v][i]
                    if order[to] == -1:
                        low[to] = order[to] = now_ord
                        now_ord += 1
                        visited.append(to)
                        stack.append((to, 0))
                    else:
                        low[v] = min(low[v], order[to])
                    continue
                stack.pop()
                if low[v] == order[v]:
                    while True:
                        u = visited.pop()
                        order[u] = n
                        ids[u] = group_num
                        if u == v:
                            break
                    group_num += 1
                if stack:
                    parent = stack[-1][0]
                    low[parent] = min(low[parent], low[v])

        return group_num, [group_num - 1 - x for x in ids]

    def scc(self) -> list[list[int]]:
        """Return the components in topological order, each sorted increasingly."""
        group_num, ids = self.scc_ids()
        groups: list[list[int]] = [[] for _ in range(group_num)]
        for vertex, group in enumerate(ids):
            groups[group].append(vertex)
        return groups