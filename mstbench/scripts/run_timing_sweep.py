# mstbench/scripts/run_timing_sweep.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from mstbench.analysis.aggregator import BatchConfig, GraphSpec, ResultAggregator
from mstbench.analysis.ensembles import random_connected_graph
from mstbench.analysis.stats import summarize_batch

logger = logging.getLogger(__name__)


@dataclass
class SweepConfig:
    sizes: List[int] = field(default_factory=lambda: [10, 25, 50, 100, 200])
    seeds_per_size: int = 10
    edge_probability: float = 0.2
    max_weight: int = 100
    random_seed: int = 0


def _mkdir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def run_sweep(cfg: SweepConfig, out_dir: str) -> Dict[str, Any]:
    _mkdir(out_dir)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_jsonl = os.path.join(out_dir, f"sweep_{stamp}.jsonl")
    out_summary = os.path.join(out_dir, f"sweep_{stamp}.summary.json")
    out_png = os.path.join(out_dir, f"sweep_{stamp}.png")

    aggregator = ResultAggregator(BatchConfig())
    summary: Dict[str, Any] = {
        "timestamp": stamp,
        "sweep_config": asdict(cfg),
        "per_n": {},
    }

    for n in cfg.sizes:
        specs = []
        for s in range(cfg.seeds_per_size):
            seed = cfg.random_seed * 100_003 + n * 1_009 + s
            g = random_connected_graph(n, cfg.edge_probability, seed=seed, max_weight=cfg.max_weight)
            specs.append(GraphSpec(graph_id=f"n{n}_s{s}", vertex_count=n,
                                   edges=[e.as_tuple() for e in g.edges()]))
        batch = aggregator.run_batch(specs)

        with open(out_jsonl, "a", encoding="utf-8") as f:
            for r in batch.results:
                row = {
                    "n": n,
                    "graph_id": r.graph_id,
                    "m": r.edge_count,
                    "prim_ms": r.prim.elapsed_ms,
                    "kruskal_ms": r.kruskal.elapsed_ms,
                    "total_weight": r.kruskal.total_weight,
                    "weights_agree": r.weights_agree,
                }
                f.write(json.dumps(row) + "\n")

        summary["per_n"][str(n)] = summarize_batch(batch)
        logger.info("n=%d done (%d graphs)", n, len(batch))

    with open(out_summary, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)

    plot_timings(summary, out_png)
    summary["files"] = {"jsonl": out_jsonl, "summary": out_summary, "plot": out_png}
    return summary


def plot_timings(summary: Dict[str, Any], path: str) -> None:
    ns = sorted(int(k) for k in summary["per_n"].keys())
    fig, ax = plt.subplots(figsize=(6, 4))
    for algo, marker in (("prim", "o"), ("kruskal", "s")):
        means = [summary["per_n"][str(n)][algo]["time_ms_mean"] for n in ns]
        errs = [summary["per_n"][str(n)][algo]["time_ms_stderr"] for n in ns]
        ax.errorbar(ns, means, yerr=errs, marker=marker, capsize=3, label=algo.capitalize())
    ax.set_xlabel("vertices")
    ax.set_ylabel("time per graph (ms)")
    ax.set_title("MST solve time: Prim vs Kruskal")
    ax.legend()
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Random-graph timing sweep for Prim and Kruskal.")
    p.add_argument("--sizes", type=int, nargs="+", default=None)
    p.add_argument("--seeds", type=int, default=None, help="graphs per size")
    p.add_argument("--p", type=float, default=None, help="edge probability")
    p.add_argument("--out-dir", default=os.path.join("results", "timing_sweep"))
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    cfg = SweepConfig()
    if args.sizes:
        cfg.sizes = args.sizes
    if args.seeds is not None:
        cfg.seeds_per_size = args.seeds
    if args.p is not None:
        cfg.edge_probability = args.p

    summary = run_sweep(cfg, args.out_dir)
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
