# mstbench/core/errors.py
from __future__ import annotations


class MstError(Exception):
    """Base class for per-graph failures. The batch runner isolates these."""


class InvalidEdgeError(MstError, ValueError):
    """An edge references a vertex outside [0, vertex_count)."""

    def __init__(self, position: int, u: int, v: int, vertex_count: int):
        self.position = position
        self.u = u
        self.v = v
        self.vertex_count = vertex_count
        super().__init__(
            f"edge #{position} ({u}, {v}) has an endpoint outside [0, {vertex_count})"
        )


class GraphFormatError(MstError, ValueError):
    """The input document does not describe a usable graph."""
