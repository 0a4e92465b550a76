# mstbench/analysis/ensembles.py
from __future__ import annotations

import random
from typing import List, Tuple

import networkx as nx

from mstbench.core.graph import EdgeTuple, Graph


def _weighted_edges(g: nx.Graph, rng: random.Random, max_weight: int) -> List[EdgeTuple]:
    return [(int(u), int(v), float(rng.randint(1, max_weight))) for u, v in sorted(g.edges())]


def random_graph(
    n: int,
    edge_probability: float = 0.3,
    seed: int = 0,
    max_weight: int = 10,
) -> Graph:
    """Erdos-Renyi G(n, p) with integer weights in [1, max_weight]; may be disconnected."""
    rng = random.Random(seed)
    g = nx.gnp_random_graph(n, edge_probability, seed=seed)
    return Graph(n, _weighted_edges(g, rng, max_weight))


def random_connected_graph(
    n: int,
    edge_probability: float = 0.3,
    seed: int = 0,
    max_weight: int = 10,
    max_tries: int = 1000,
) -> Graph:
    """
    Redraw G(n, p) until it is connected, then weight it.

    Raises ValueError if no connected draw appears within max_tries (p too
    small for n).
    """
    if n <= 1:
        return Graph(max(n, 0))
    rng = random.Random(seed)
    for _ in range(max_tries):
        g = nx.gnp_random_graph(n, edge_probability, seed=rng.randrange(2**31))
        if nx.is_connected(g):
            return Graph(n, _weighted_edges(g, rng, max_weight))
    raise ValueError(f"no connected G({n}, {edge_probability}) found in {max_tries} draws")


def to_networkx(graph: Graph) -> nx.MultiGraph:
    """MultiGraph view, keeping parallel edges and self-loops."""
    g = nx.MultiGraph()
    g.add_nodes_from(graph.vertices())
    for e in graph.edges():
        g.add_edge(e.u, e.v, weight=e.weight)
    return g


def component_summary(graph: Graph) -> Tuple[int, int]:
    """(number of components, size of vertex 0's component)."""
    if graph.vertex_count == 0:
        return 0, 0
    return graph.component_count(), len(graph.component_of(0))
