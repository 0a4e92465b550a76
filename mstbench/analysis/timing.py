# mstbench/analysis/timing.py
from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class Elapsed:
    start_ns: int = 0
    stop_ns: Optional[int] = None

    @property
    def ns(self) -> int:
        if self.stop_ns is None:
            raise RuntimeError("stopwatch is still running")
        return self.stop_ns - self.start_ns

    def ms(self, decimals: Optional[int] = 4) -> float:
        value = self.ns / 1_000_000.0
        return round(value, decimals) if decimals is not None else value


@contextmanager
def stopwatch() -> Iterator[Elapsed]:
    """
    Wall-clock measurement around a block:

        with stopwatch() as sw:
            tree = PrimMstSolver(graph).solve()
        sw.ms()  # fractional milliseconds, 4 decimals

    The stop time is recorded even if the block raises.
    """
    sw = Elapsed(start_ns=time.perf_counter_ns())
    try:
        yield sw
    finally:
        sw.stop_ns = time.perf_counter_ns()
