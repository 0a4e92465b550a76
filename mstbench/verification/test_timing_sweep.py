import json
import os

from mstbench.scripts.run_timing_sweep import SweepConfig, run_sweep


def test_small_sweep_writes_outputs(tmp_path):
    cfg = SweepConfig(sizes=[5, 8], seeds_per_size=2, edge_probability=0.6, max_weight=5)
    summary = run_sweep(cfg, str(tmp_path))

    assert set(summary["per_n"].keys()) == {"5", "8"}
    for n in ("5", "8"):
        per_n = summary["per_n"][n]
        assert per_n["n_graphs"] == 2
        assert per_n["weight_agreement"] == 1.0
        assert per_n["forest_divergence"] == 0

    files = summary["files"]
    for key in ("jsonl", "summary", "plot"):
        assert os.path.exists(files[key])

    with open(files["jsonl"], encoding="utf-8") as f:
        rows = [json.loads(line) for line in f]
    assert len(rows) == 4
    assert all(r["weights_agree"] for r in rows)
