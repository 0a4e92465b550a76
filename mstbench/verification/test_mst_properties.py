import networkx as nx
import pytest

from mstbench.analysis.ensembles import (
    component_summary,
    random_connected_graph,
    random_graph,
    to_networkx,
)
from mstbench.analysis.results import synthetic_operation_count
from mstbench.core.unionfind import UnionFindInt
from mstbench.solvers.kruskal import kruskal_mst
from mstbench.solvers.prim import prim_mst


def reference_weight(graph):
    forest = nx.minimum_spanning_tree(to_networkx(graph), weight="weight")
    return sum(d["weight"] for _, _, d in forest.edges(data=True))


def is_acyclic(n, edges):
    uf = UnionFindInt(n)
    return all(uf.union(e.u, e.v) for e in edges)


@pytest.mark.parametrize("seed", range(12))
def test_connected_graphs_agree_with_networkx(seed):
    n = 4 + seed * 3
    g = random_connected_graph(n, edge_probability=0.35, seed=seed, max_weight=6)

    prim = prim_mst(g)
    kruskal = kruskal_mst(g)

    assert prim.edge_count == n - 1
    assert kruskal.edge_count == n - 1
    assert prim.total_weight == pytest.approx(kruskal.total_weight)
    assert kruskal.total_weight == pytest.approx(reference_weight(g))
    assert is_acyclic(n, prim.edges)
    assert is_acyclic(n, kruskal.edges)


@pytest.mark.parametrize("seed", range(12))
def test_disconnected_graphs_prim_component_kruskal_forest(seed):
    n = 10 + seed
    g = random_graph(n, edge_probability=0.12, seed=seed)
    n_components, size_of_zero = component_summary(g)
    assert n_components == nx.number_connected_components(to_networkx(g))

    prim = prim_mst(g)
    kruskal = kruskal_mst(g)

    assert kruskal.edge_count == n - n_components
    assert prim.edge_count == size_of_zero - 1
    assert kruskal.total_weight == pytest.approx(reference_weight(g))

    # every Prim edge stays inside vertex 0's component
    reach = set(g.component_of(0))
    assert all(e.u in reach and e.v in reach for e in prim.edges)


@pytest.mark.parametrize("seed", range(5))
def test_rerun_same_graph_identical(seed):
    g = random_connected_graph(15, edge_probability=0.4, seed=seed, max_weight=3)
    assert prim_mst(g) == prim_mst(g)
    assert kruskal_mst(g) == kruskal_mst(g)


def test_operation_count_formula():
    assert synthetic_operation_count(0) == 1
    assert synthetic_operation_count(3) == 13
    for seed in range(5):
        g = random_graph(12, edge_probability=0.2, seed=seed)
        for tree in (prim_mst(g), kruskal_mst(g)):
            assert synthetic_operation_count(tree.edge_count) == 4 * len(tree.edges) + 1
