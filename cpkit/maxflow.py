"""Maximum flow by Dinic's algorithm."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class FlowEdge:
    """An edge as seen from outside: endpoints, capacity and current flow."""

    frm: int
    to: int
    cap: int
    flow: int


class _Edge:
    __slots__ = ("to", "rev", "cap")

    def __init__(self, to: int, rev: int, cap) -> None:
        self.to = to
        self.rev = rev
        self.cap = cap


class MFGraph:
    """Flow network over ``0..n-1`` with maximum flow and minimum cut."""

    __slots__ = ("_n", "_pos", "_g")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._pos: list[tuple[int, int]] = []
        self._g: list[list[_Edge]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return self._n

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def _check_edge(self, i: int) -> None:
        if not 0 <= i < len(self._pos):
            raise IndexError(f"edge {i} out of range")

    def add_edge(self, frm: int, to: int, cap) -> int:
        """Add an edge with capacity ``cap``; return its index."""
        self._check_vertex(frm)
        self._check_vertex(to)
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        index = len(self._pos)
        self._pos.append((frm, len(self._g[frm])))
        from_id = len(self._g[frm])
        to_id = len(self._g[to])
        if frm == to:
            to_id += 1
        self._g[frm].append(_Edge(to, to_id, cap))
        self._g[to].append(_Edge(frm, from_id, 0))
        return index

    def get_edge(self, i: int) -> FlowEdge:
        """Return the state of edge ``i``."""
        self._check_edge(i)
        frm, idx = self._pos[i]
        e = self._g[frm][idx]
        re = self._g[e.to][e.rev]
        return FlowEdge(frm, e.to, e.cap + re.cap, re.cap)

    def edges(self) -> list[FlowEdge]:
        """Return the state of every edge in insertion order."""
        return [self.get_edge(i) for i in range(len(self._pos))]

    def change_edge(self, i: int, new_cap, new_flow) -> None:
        """Set the capacity and flow of edge ``i``."""
        self._check_edge(i)
        if not 0 <= new_flow <= new_cap:
            raise ValueError("flow must satisfy 0 <= flow <= capacity")
        frm, idx = self._pos[i]
        e = self._g[frm][idx]
        re = self._g[e.to][e.rev]
        e.cap = new_cap - new_flow
        re.cap = new_flow

    def _levels(self, s: int, t: int) -> list[int]:
        level = [-1] * self._n
        level[s] = 0
        queue = deque([s])
        while queue:
            v = queue.popleft()
            for e in self._g[v]:
                if e.cap == 0 or level[e.to] >= 0:
                    continue
                level[e.to] = level[v] + 1
                if e.to == t:
                    return level
                queue.append(e.to)
        return level

    def _blocking_flow(self, level: list[int], it: list[int], s: int, t: int, up):
        # Paths are searched backwards from t along residual reverse edges.
        g = self._g
        total = 0
        while total < up:
            verts = [t]
            path: list[_Edge] = []
            while verts[-1] != s:
                v = verts[-1]
                edges = g[v]
                lv = level[v]
                while it[v] < len(edges):
                    e = edges[it[v]]
                    if lv > level[e.to] and g[e.to][e.rev].cap > 0:
                        break
                    it[v] += 1
                else:
                    level[v] = self._n
                    verts.pop()
                    if not path:
                        return total
                    path.pop()
                    continue
                path.append(e)
                verts.append(e.to)
            d = min(up - total, min(g[e.to][e.rev].cap for e in path))
            for e in path:
                e.cap += d
                g[e.to][e.rev].cap -= d
            total += d
        return total

    def flow(self, s: int, t: int, flow_limit=None):
        """Push as much flow from ``s`` to ``t`` as possible, up to ``flow_limit``."""
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        limit = math.inf if flow_limit is None else flow_limit
        total = 0
        while total < limit:
            level = self._levels(s, t)
            if level[t] == -1:
                break
            it = [0] * self._n
            pushed = self._blocking_flow(level, it, s, t, limit - total)
            if not pushed:
                break
            total += pushed
        return total

    def min_cut(self, s: int) -> list[bool]:
        """Return which vertices are reachable from ``s`` in the residual graph."""
        self._check_vertex(s)
        visited = [False] * self._n
        visited[s] = True
        queue = deque([s])
        while queue:
            p = queue.popleft()
            for e in self._g[p]:
                if e.cap and not visited[e.to]:
                    visited[e.to] = True
                    queue.append(e.to)
        return visited