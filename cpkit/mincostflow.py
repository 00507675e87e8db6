"""Minimum-cost flow by successive shortest paths with potentials."""

from __future__ import annotations

import dataclasses
import heapq
import math
from dataclasses import dataclass


@dataclass
class CostEdge:
    """An edge with endpoints, capacity, current flow and cost per unit."""

    frm: int
    to: int
    cap: int
    flow: int
    cost: int


class MCFGraph:
    """Flow network over ``0..n-1`` with non-negative edge costs."""

    __slots__ = ("_n", "_edges")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._edges: list[CostEdge] = []

    def __len__(self) -> int:
        return self._n

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, frm: int, to: int, cap, cost) -> int:
        """Add an edge with capacity ``cap`` and unit cost ``cost``; return its index."""
        self._check_vertex(frm)
        self._check_vertex(to)
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        if cost < 0:
            raise ValueError("cost must be non-negative")
        self._edges.append(CostEdge(frm, to, cap, 0, cost))
        return len(self._edges) - 1

    def get_edge(self, i: int) -> CostEdge:
        """Return a copy of edge ``i``."""
        if not 0 <= i < len(self._edges):
            raise IndexError(f"edge {i} out of range")
        return dataclasses.replace(self._edges[i])

    def edges(self) -> list[CostEdge]:
        """Return copies of every edge in insertion order."""
        return [dataclasses.replace(e) for e in self._edges]

    def flow(self, s: int, t: int, flow_limit=None) -> tuple:
        """Return ``(flow, cost)`` of a minimum-cost maximum flow up to ``flow_limit``."""
        return self.slope(s, t, flow_limit)[-1]

    def slope(self, s: int, t: int, flow_limit=None) -> list[tuple]:
        """Return the breakpoints ``(flow, cost)`` of the cost as a function of flow.

        The first point is ``(0, 0)``, flow strictly increases and the
        slopes between points strictly increase.
        """
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        n = self._n
        m = len(self._edges)

        # Residual graph in compressed adjacency form.
        degree = [0] * n
        edge_idx = [0] * m
        redge_idx = [0] * m
        for i, e in enumerate(self._edges):
            edge_idx[i] = degree[e.frm]
            degree[e.frm] += 1
            redge_idx[i] = degree[e.to]
            degree[e.to] += 1
        start = [0] * (n + 1)
        for v in range(n):
            start[v + 1] = start[v] + degree[v]
        to = [0] * (2 * m)
        rev = [0] * (2 * m)
        cap = [0] * (2 * m)
        cost = [0] * (2 * m)
        for i, e in enumerate(self._edges):
            a = edge_idx[i] + start[e.frm]
            b = redge_idx[i] + start[e.to]
            edge_idx[i] = a
            to[a], rev[a], cap[a], cost[a] = e.to, b, e.cap - e.flow, e.cost
            to[b], rev[b], cap[b], cost[b] = e.frm, a, e.flow, -e.cost

        dual = [0] * n
        dist: list = [0] * n
        prev_e = [0] * n

        def refine_dual() -> bool:
            dist[:] = [math.inf] * n
            vis = [False] * n
            que_min = [s]
            heap: list[tuple] = []
            dist[s] = 0
            while que_min or heap:
                v = que_min.pop() if que_min else heapq.heappop(heap)[1]
                if vis[v]:
                    continue
                vis[v] = True
                if v == t:
                    break
                dual_v, dist_v = dual[v], dist[v]
                for i in range(start[v], start[v + 1]):
                    if not cap[i]:
                        continue
                    w = to[i]
                    reduced = cost[i] - dual[w] + dual_v
                    if dist[w] - dist_v > reduced:
                        dist_to = dist_v + reduced
                        dist[w] = dist_to
                        prev_e[w] = rev[i]
                        if dist_to == dist_v:
                            que_min.append(w)
                        else:
                            heapq.heappush(heap, (dist_to, w))
            if not vis[t]:
                return False
            for v in range(n):
                if vis[v]:
                    dual[v] -= dist[t] - dist[v]
            return True

        limit = math.inf if flow_limit is None else flow_limit
        flow = 0
        total_cost = 0
        prev_cost_per_flow = -1
        result: list[tuple] = [(0, 0)]
        while flow < limit:
            if not refine_dual():
                break
            c = limit - flow
            v = t
            while v != s:
                c = min(c, cap[rev[prev_e[v]]])
                v = to[prev_e[v]]
            v = t
            while v != s:
                e = prev_e[v]
                cap[e] += c
                cap[rev[e]] -= c
                v = to[e]
            d = -dual[s]
            flow += c
            total_cost += c * d
            if prev_cost_per_flow == d:
                result.pop()
            result.append((flow, total_cost))
            prev_cost_per_flow = d

        for i, e in enumerate(self._edges):
            e.flow = e.cap - cap[edge_idx[i]]
        return result