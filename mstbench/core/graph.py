# mstbench/core/graph.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from mstbench.core.errors import GraphFormatError, InvalidEdgeError

Vertex = int
EdgeTuple = Tuple[int, int, float]


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Undirected weighted edge {u, v}.

    Equality is identity: two edges joining the same pair with the same weight
    are still distinct (parallel edges are independently eligible).
    """
    u: Vertex
    v: Vertex
    weight: float

    def either(self) -> Vertex:
        return self.u

    def other(self, x: Vertex) -> Vertex:
        if x == self.u:
            return self.v
        if x == self.v:
            return self.u
        raise ValueError(f"vertex {x} is not an endpoint of {self}")

    def as_tuple(self) -> EdgeTuple:
        return (self.u, self.v, self.weight)

    def __repr__(self) -> str:
        return f"Edge({self.u}-{self.v} {self.weight:g})"


def _edge_from_tuple(pos: int, raw: object) -> Edge:
    try:
        u, v, w = raw  # type: ignore[misc]
        return Edge(int(u), int(v), float(w))
    except (TypeError, ValueError):
        raise GraphFormatError(f"edge #{pos} is not a (u, v, weight) triple: {raw!r}") from None


class Graph:
    """
    Immutable undirected weighted multigraph on vertices [0..n-1].

    Self-loops and parallel edges are allowed. Edge order is insertion order,
    and so is the order of each adjacency list; solvers rely on that for
    deterministic tie handling.
    """

    __slots__ = ("_n", "_edges", "_adj")

    def __init__(self, vertex_count: int, edges: Iterable[Union[Edge, EdgeTuple]] = ()):
        try:
            n = int(vertex_count)
        except (TypeError, ValueError):
            raise GraphFormatError(f"vertex_count must be an integer, got {vertex_count!r}") from None
        if n < 0:
            raise GraphFormatError(f"vertex_count must be >= 0, got {vertex_count}")

        built: List[Edge] = []
        adj: List[List[Edge]] = [[] for _ in range(n)]
        for pos, e in enumerate(edges):
            if not isinstance(e, Edge):
                e = _edge_from_tuple(pos, e)
            if not (0 <= e.u < n and 0 <= e.v < n):
                raise InvalidEdgeError(pos, e.u, e.v, n)
            built.append(e)
            adj[e.u].append(e)
            if e.v != e.u:
                adj[e.v].append(e)

        self._n = n
        self._edges: Tuple[Edge, ...] = tuple(built)
        self._adj: Tuple[Tuple[Edge, ...], ...] = tuple(tuple(a) for a in adj)

    # --- accessors ---

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def vertices(self) -> range:
        return range(self._n)

    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def adj(self, v: Vertex) -> Tuple[Edge, ...]:
        return self._adj[v]

    def degree(self, v: Vertex) -> int:
        return len(self._adj[v])

    # --- connectivity ---

    def component_of(self, src: Vertex) -> List[Vertex]:
        """Vertices reachable from src, in DFS discovery order."""
        seen = [False] * self._n
        seen[src] = True
        order: List[Vertex] = [src]
        stack: List[Vertex] = [src]
        while stack:
            x = stack.pop()
            for e in self._adj[x]:
                y = e.other(x)
                if not seen[y]:
                    seen[y] = True
                    order.append(y)
                    stack.append(y)
        return order

    def component_count(self) -> int:
        seen = [False] * self._n
        count = 0
        for v in range(self._n):
            if not seen[v]:
                count += 1
                for x in self.component_of(v):
                    seen[x] = True
        return count

    def is_connected(self) -> bool:
        return self.component_count() <= 1

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, m={len(self._edges)})"
