# mstbench/solvers/tree.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from mstbench.core.graph import Edge


@dataclass(frozen=True)
class SpanningTree:
    """Edges selected by a solver, in selection order, and their weight sum."""
    edges: Tuple[Edge, ...] = ()
    total_weight: float = 0.0

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def edge_tuples(self) -> Tuple[Tuple[int, int, float], ...]:
        return tuple(e.as_tuple() for e in self.edges)
