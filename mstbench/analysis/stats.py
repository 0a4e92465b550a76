# mstbench/analysis/stats.py
from __future__ import annotations
from typing import Any, Dict, List
import math
import statistics as stats

from mstbench.analysis.results import BatchResult, MstResult


def _mean(xs: List[float]) -> float:
    return float(stats.mean(xs)) if xs else float("nan")


def _pstd(xs: List[float]) -> float:
    return float(stats.pstdev(xs)) if xs else float("nan")


def _stderr(xs: List[float]) -> float:
    if len(xs) < 2:
        return 0.0 if xs else float("nan")
    return float(stats.stdev(xs)) / math.sqrt(len(xs))


def _algorithm_summary(runs: List[MstResult]) -> Dict[str, float]:
    times = [r.elapsed_ms for r in runs]
    return {
        "time_ms_mean": _mean(times),
        "time_ms_std": _pstd(times),
        "time_ms_stderr": _stderr(times),
        "edges_mean": _mean([float(r.edge_count) for r in runs]),
    }


def summarize_batch(batch: BatchResult) -> Dict[str, Any]:
    """
    Returns:
      {
        "n_graphs": ..., "n_failed": ...,
        "prim": {"time_ms_mean", "time_ms_std", "time_ms_stderr", "edges_mean"},
        "kruskal": {...},
        "weight_agreement": fraction of same-size results with equal weight,
        "forest_divergence": graphs where Prim and Kruskal edge counts differ,
      }

    weight_agreement only looks at graphs where both trees have the same edge
    count; on disconnected input Prim stops at vertex 0's component, so the
    weights are not comparable there. NaN if no such graph.
    """
    ok = batch.results
    comparable = [r for r in ok if not r.forest_divergence]
    agree = sum(1 for r in comparable if r.weights_agree)

    return {
        "n_graphs": len(batch),
        "n_failed": len(batch.failures),
        "prim": _algorithm_summary([r.prim for r in ok]),
        "kruskal": _algorithm_summary([r.kruskal for r in ok]),
        "weight_agreement": agree / len(comparable) if comparable else float("nan"),
        "forest_divergence": sum(1 for r in ok if r.forest_divergence),
    }
