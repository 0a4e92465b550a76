# mstbench/io/jsonio.py
"""
JSON boundary of the batch runner.

Input document:
    {"graphs": [{"id": 1, "nodes": ["A", "B", ...],
                 "edges": [{"from": "A", "to": "B", "weight": 4}, ...]}, ...]}

Output document:
    {"results": [{"graph_id": 1, "input_stats": {"vertices": n, "edges": m},
                  "prim": {"mst_edges": [{"from", "to", "weight"}, ...],
                           "total_cost": .., "operations_count": ..,
                           "execution_time_ms": ..},
                  "kruskal": {...}}, ...]}

A graph that could not be processed is written with an "error" field in place
of "prim"/"kruskal".
"""
from __future__ import annotations

import json
import math
import os
from typing import Any, Dict, List, Optional, Sequence

from mstbench.analysis.results import BatchResult, GraphFailure, GraphResult, MstResult
from mstbench.core.errors import GraphFormatError
from mstbench.core.graph import EdgeTuple, Graph
from mstbench.io.labels import LabelTable


class LabeledGraphSpec:
    """
    One raw graph object from the input document.

    Label resolution happens in build(), so a malformed graph fails on its own
    when the batch runner gets to it.
    """

    def __init__(self, raw: Any, position: int):
        self.raw = raw
        self.position = position
        self.labels: Optional[LabelTable] = None

    @property
    def graph_id(self) -> Any:
        if isinstance(self.raw, dict) and "id" in self.raw:
            return self.raw["id"]
        return self.position

    @property
    def vertex_count(self) -> Optional[int]:
        nodes = self.raw.get("nodes") if isinstance(self.raw, dict) else None
        return len(nodes) if isinstance(nodes, list) else None

    @property
    def edge_count(self) -> Optional[int]:
        edges = self.raw.get("edges") if isinstance(self.raw, dict) else None
        return len(edges) if isinstance(edges, list) else None

    def resolve(self) -> List[EdgeTuple]:
        raw = self.raw
        if not isinstance(raw, dict):
            raise GraphFormatError(f"graph #{self.position} is not an object")
        nodes = raw.get("nodes")
        edges = raw.get("edges")
        if not isinstance(nodes, list):
            raise GraphFormatError(f"graph {self.graph_id}: 'nodes' must be a list")
        if not isinstance(edges, list):
            raise GraphFormatError(f"graph {self.graph_id}: 'edges' must be a list")

        for lab in nodes:
            if not isinstance(lab, (str, int)) or isinstance(lab, bool):
                raise GraphFormatError(f"graph {self.graph_id}: bad node label {lab!r}")
        labels = LabelTable(nodes)

        out: List[EdgeTuple] = []
        for k, e in enumerate(edges):
            if not isinstance(e, dict):
                raise GraphFormatError(f"graph {self.graph_id}: edge #{k} is not an object")
            try:
                src, dst, weight = e["from"], e["to"], e["weight"]
            except KeyError as exc:
                raise GraphFormatError(
                    f"graph {self.graph_id}: edge #{k} is missing {exc.args[0]!r}"
                ) from None
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                raise GraphFormatError(
                    f"graph {self.graph_id}: edge #{k} has non-numeric weight {weight!r}"
                )
            if not math.isfinite(weight):
                raise GraphFormatError(
                    f"graph {self.graph_id}: edge #{k} has non-finite weight {weight!r}"
                )
            out.append((labels.index(src), labels.index(dst), float(weight)))

        self.labels = labels
        return out

    def build(self) -> Graph:
        edges = self.resolve()
        assert self.labels is not None
        return Graph(len(self.labels), edges)


def decode_batch(doc: Any) -> List[LabeledGraphSpec]:
    if not isinstance(doc, dict) or not isinstance(doc.get("graphs"), list):
        raise GraphFormatError("input document must be an object with a 'graphs' list")
    return [LabeledGraphSpec(raw, i) for i, raw in enumerate(doc["graphs"])]


def load_batch(path: str) -> List[LabeledGraphSpec]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            doc = json.load(f)
        except json.JSONDecodeError as exc:
            raise GraphFormatError(f"{path}: invalid JSON ({exc})") from exc
    return decode_batch(doc)


def _encode_result(res: MstResult, labels: Optional[LabelTable]) -> Dict[str, Any]:
    def lab(i: int) -> Any:
        return labels.label(i) if labels is not None else i

    return {
        "mst_edges": [{"from": lab(u), "to": lab(v), "weight": w} for u, v, w in res.edges],
        "total_cost": res.total_weight,
        "operations_count": res.operation_count,
        "execution_time_ms": res.elapsed_ms,
    }


def encode_batch(batch: BatchResult, specs: Sequence[Any] = ()) -> Dict[str, Any]:
    """
    specs (optional) must be index-aligned with batch; any spec carrying a
    `labels` LabelTable maps indices back to labels, otherwise raw indices are
    written.
    """
    out: List[Dict[str, Any]] = []
    for i, entry in enumerate(batch):
        spec = specs[i] if i < len(specs) else None
        labels = getattr(spec, "labels", None)
        if isinstance(entry, GraphResult):
            out.append({
                "graph_id": entry.graph_id,
                "input_stats": {"vertices": entry.vertex_count, "edges": entry.edge_count},
                "prim": _encode_result(entry.prim, labels),
                "kruskal": _encode_result(entry.kruskal, labels),
            })
        elif isinstance(entry, GraphFailure):
            out.append({
                "graph_id": entry.graph_id,
                "input_stats": {"vertices": entry.vertex_count, "edges": entry.edge_count},
                "error": entry.error,
            })
    return {"results": out}


def write_batch(path: str, batch: BatchResult, specs: Sequence[Any] = ()) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(encode_batch(batch, specs), f, indent=2)
