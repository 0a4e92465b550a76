# mstbench/solvers/kruskal.py
from __future__ import annotations

from typing import List

from mstbench.core.graph import Edge, Graph
from mstbench.core.unionfind import UnionFindInt
from mstbench.solvers.tree import SpanningTree


class KruskalMstSolver:
    """
    Kruskal: scan edges cheapest-first, keep each one that joins two
    components.

    The sort is stable, so equal-weight edges are considered in input order.
    On a disconnected graph the result is a minimum spanning forest with
    n - (#components) edges.
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self._uf = UnionFindInt(graph.vertex_count)

    def solve(self) -> SpanningTree:
        n = self.graph.vertex_count
        self._uf = UnionFindInt(n)
        chosen: List[Edge] = []
        total = 0.0

        for e in sorted(self.graph.edges(), key=lambda e: e.weight):
            if len(chosen) >= n - 1:
                break
            if self._uf.union(e.u, e.v):
                chosen.append(e)
                total += e.weight

        return SpanningTree(edges=tuple(chosen), total_weight=total)

    def components(self) -> int:
        """Component count after the last solve(); before it, the vertex count."""
        return self._uf.count()


def kruskal_mst(graph: Graph) -> SpanningTree:
    return KruskalMstSolver(graph).solve()
