# mstbench/analysis/aggregator.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence

from mstbench.analysis.results import BatchResult, GraphFailure, GraphResult, MstResult
from mstbench.analysis.timing import stopwatch
from mstbench.core.errors import MstError
from mstbench.core.graph import EdgeTuple, Graph
from mstbench.solvers.kruskal import KruskalMstSolver
from mstbench.solvers.prim import PrimMstSolver

logger = logging.getLogger(__name__)


@dataclass
class BatchConfig:
    """
    time_decimals: rounding of elapsed milliseconds in each MstResult.
    fail_fast: re-raise the first per-graph MstError instead of recording a
      GraphFailure and moving on.
    """
    time_decimals: int = 4
    fail_fast: bool = False


@dataclass
class GraphSpec:
    """Already-resolved input: vertex indices in [0, vertex_count)."""
    graph_id: Any
    vertex_count: int
    edges: Sequence[EdgeTuple] = field(default_factory=list)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def build(self) -> Graph:
        return Graph(self.vertex_count, self.edges)


class ResultAggregator:
    """
    Runs Prim and Kruskal on each graph and packages their outputs.

    Each solver is timed on its own (construction + solve). Nothing is
    retried; an MstError fails that graph only, unless config.fail_fast.
    """

    def __init__(self, config: Optional[BatchConfig] = None):
        self.config = config or BatchConfig()

    def solve(self, graph_id: Any, graph: Graph) -> GraphResult:
        decimals = self.config.time_decimals

        with stopwatch() as sw:
            prim_tree = PrimMstSolver(graph).solve()
        prim = MstResult.from_tree(prim_tree, sw.ms(decimals))

        with stopwatch() as sw:
            kruskal_tree = KruskalMstSolver(graph).solve()
        kruskal = MstResult.from_tree(kruskal_tree, sw.ms(decimals))

        logger.debug(
            "graph %s: n=%d m=%d prim=%.6g (%d edges) kruskal=%.6g (%d edges)",
            graph_id, graph.vertex_count, graph.edge_count,
            prim.total_weight, prim.edge_count,
            kruskal.total_weight, kruskal.edge_count,
        )
        return GraphResult(
            graph_id=graph_id,
            vertex_count=graph.vertex_count,
            edge_count=graph.edge_count,
            prim=prim,
            kruskal=kruskal,
        )

    def run_graph(self, graph_id: Any, vertex_count: int, edges: Iterable[EdgeTuple]) -> GraphResult:
        return self.solve(graph_id, Graph(vertex_count, edges))

    def run_batch(self, specs: Iterable[Any]) -> BatchResult:
        """
        specs: objects with `graph_id` and `build() -> Graph` (GraphSpec, or
        the label-resolving specs from mstbench.io.jsonio). Output order
        matches input order.
        """
        batch = BatchResult()
        for spec in specs:
            try:
                graph = spec.build()
                batch.append(self.solve(spec.graph_id, graph))
            except MstError as exc:
                if self.config.fail_fast:
                    raise
                logger.warning("graph %s failed: %s", spec.graph_id, exc)
                batch.append(
                    GraphFailure(
                        graph_id=spec.graph_id,
                        error=str(exc),
                        error_type=type(exc).__name__,
                        vertex_count=getattr(spec, "vertex_count", None),
                        edge_count=getattr(spec, "edge_count", None),
                    )
                )
        n_fail = len(batch.failures)
        logger.info("processed %d graphs (%d failed)", len(batch), n_fail)
        return batch


def run_batch(specs: Iterable[Any], config: Optional[BatchConfig] = None) -> BatchResult:
    return ResultAggregator(config).run_batch(specs)


def specs_from_tuples(graphs: Iterable[Sequence[Any]]) -> List[GraphSpec]:
    """[(vertex_count, edges), ...] -> GraphSpecs with ids 0, 1, 2, ..."""
    return [GraphSpec(graph_id=i, vertex_count=n, edges=list(edges)) for i, (n, edges) in enumerate(graphs)]
