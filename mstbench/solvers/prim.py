# mstbench/solvers/prim.py
from __future__ import annotations

from typing import List, Optional

from mstbench.core.graph import Edge, Graph, Vertex
from mstbench.core.indexpq import IndexMinPQ
from mstbench.solvers.tree import SpanningTree

START_VERTEX = 0


class PrimMstSolver:
    """
    Eager Prim: grows a single tree from vertex 0.

    Only unvisited vertices are ever queued, keyed by the weight of the
    cheapest edge known to connect them to the tree. A later edge of equal
    weight never replaces the recorded one.

    Vertices outside the start vertex's component are never reached, so on a
    disconnected graph the result covers vertex 0's component only (unlike
    KruskalMstSolver, which returns a spanning forest).
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self._reset()

    def _reset(self) -> None:
        n = self.graph.vertex_count
        self._visited = [False] * n
        self._edge_to: List[Optional[Edge]] = [None] * n
        self._dist = [float("inf")] * n
        self._pq = IndexMinPQ(n)

    def solve(self) -> SpanningTree:
        """Each call starts from fresh run state, so repeated calls agree."""
        self._reset()
        if self.graph.vertex_count == 0:
            return SpanningTree()

        chosen: List[Edge] = []
        total = 0.0

        self._visited[START_VERTEX] = True
        self._scan(START_VERTEX)
        while self._pq:
            v = self._pq.extract_min()
            self._visited[v] = True
            e = self._edge_to[v]
            assert e is not None
            chosen.append(e)
            total += e.weight
            self._scan(v)

        return SpanningTree(edges=tuple(chosen), total_weight=total)

    def _scan(self, v: Vertex) -> None:
        for e in self.graph.adj(v):
            w = e.other(v)
            if self._visited[w]:
                continue
            if not self._pq.contains(w):
                self._edge_to[w] = e
                self._dist[w] = e.weight
                self._pq.insert(w, e.weight)
            elif e.weight < self._dist[w]:
                self._edge_to[w] = e
                self._dist[w] = e.weight
                self._pq.decrease_key(w, e.weight)


def prim_mst(graph: Graph) -> SpanningTree:
    return PrimMstSolver(graph).solve()
