# mstbench/analysis/results.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from mstbench.core.graph import EdgeTuple
from mstbench.solvers.tree import SpanningTree


def synthetic_operation_count(edge_count: int) -> int:
    """
    Reporting-only counter: 4 * edges + 1.

    Not a real comparison or swap count; kept so outputs stay comparable with
    earlier runs.
    """
    return 4 * edge_count + 1


@dataclass(frozen=True)
class MstResult:
    edges: Tuple[EdgeTuple, ...]
    total_weight: float
    operation_count: int
    elapsed_ms: float

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @classmethod
    def from_tree(cls, tree: SpanningTree, elapsed_ms: float) -> "MstResult":
        return cls(
            edges=tree.edge_tuples(),
            total_weight=float(tree.total_weight),
            operation_count=synthetic_operation_count(tree.edge_count),
            elapsed_ms=elapsed_ms,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "edges": [list(e) for e in self.edges],
            "total_weight": self.total_weight,
            "edge_count": self.edge_count,
            "operation_count": self.operation_count,
            "elapsed_ms": self.elapsed_ms,
        }


@dataclass(frozen=True)
class GraphResult:
    graph_id: Any
    vertex_count: int
    edge_count: int
    prim: MstResult
    kruskal: MstResult

    ok = True

    @property
    def weights_agree(self) -> bool:
        return abs(self.prim.total_weight - self.kruskal.total_weight) <= 1e-9

    @property
    def forest_divergence(self) -> bool:
        """True when Prim covered fewer vertices than Kruskal (disconnected input)."""
        return self.prim.edge_count != self.kruskal.edge_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "graph_id": self.graph_id,
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "prim": self.prim.to_dict(),
            "kruskal": self.kruskal.to_dict(),
        }


@dataclass(frozen=True)
class GraphFailure:
    graph_id: Any
    error: str
    error_type: str = "MstError"
    vertex_count: Optional[int] = None
    edge_count: Optional[int] = None

    ok = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "graph_id": self.graph_id,
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "error_type": self.error_type,
            "error": self.error,
        }


GraphOutcome = Union[GraphResult, GraphFailure]


@dataclass
class BatchResult:
    """Per-graph outcomes, index-aligned with the input batch."""
    entries: List[GraphOutcome] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[GraphOutcome]:
        return iter(self.entries)

    def __getitem__(self, i: int) -> GraphOutcome:
        return self.entries[i]

    def append(self, entry: GraphOutcome) -> None:
        self.entries.append(entry)

    @property
    def results(self) -> List[GraphResult]:
        return [e for e in self.entries if isinstance(e, GraphResult)]

    @property
    def failures(self) -> List[GraphFailure]:
        return [e for e in self.entries if isinstance(e, GraphFailure)]

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self) -> Dict[str, Any]:
        return {"results": [e.to_dict() for e in self.entries]}
