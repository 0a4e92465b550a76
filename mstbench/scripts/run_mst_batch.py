# mstbench/scripts/run_mst_batch.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from mstbench.analysis.aggregator import BatchConfig, ResultAggregator
from mstbench.analysis.stats import summarize_batch
from mstbench.core.errors import MstError
from mstbench.io.jsonio import load_batch, write_batch

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "src/main/resources/ass_3_input.json"
DEFAULT_OUTPUT = "src/main/resources/output.json"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Prim vs Kruskal MST over a batch of graphs.")
    p.add_argument("--input", default=DEFAULT_INPUT, help="input JSON document")
    p.add_argument("--output", default=DEFAULT_OUTPUT, help="where to write the results JSON")
    p.add_argument("--time-decimals", type=int, default=4, help="rounding of execution_time_ms")
    p.add_argument("--fail-fast", action="store_true", help="abort on the first bad graph")
    p.add_argument("--log-level", default="INFO")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    cfg = BatchConfig(time_decimals=args.time_decimals, fail_fast=args.fail_fast)

    try:
        specs = load_batch(args.input)
        batch = ResultAggregator(cfg).run_batch(specs)
        write_batch(args.output, batch, specs)
    except (OSError, MstError) as exc:
        logger.error("batch aborted: %s", exc)
        return 1

    print(json.dumps(summarize_batch(batch), indent=2))
    print("Output successfully generated")
    print(f"Saved: {args.output}")
    return 0 if batch.ok else 2


if __name__ == "__main__":
    sys.exit(main())
