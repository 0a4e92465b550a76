import logging

import pytest

from mstbench.analysis.aggregator import (
    BatchConfig,
    GraphSpec,
    ResultAggregator,
    run_batch,
    specs_from_tuples,
)
from mstbench.analysis.results import GraphFailure, GraphResult
from mstbench.analysis.stats import summarize_batch
from mstbench.analysis.timing import stopwatch
from mstbench.core.errors import InvalidEdgeError

PATH = [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 3.0), (0, 3, 4.0), (0, 2, 5.0)]


def test_run_graph_packages_both_algorithms():
    res = ResultAggregator().run_graph("g1", 4, PATH)

    assert res.graph_id == "g1"
    assert (res.vertex_count, res.edge_count) == (4, 5)
    for r in (res.prim, res.kruskal):
        assert r.total_weight == 6.0
        assert r.edge_count == 3
        assert r.operation_count == 13
        assert r.elapsed_ms >= 0.0
        assert round(r.elapsed_ms, 4) == r.elapsed_ms
    assert res.weights_agree
    assert not res.forest_divergence


def test_single_vertex_counts():
    res = ResultAggregator().run_graph(0, 1, [])
    for r in (res.prim, res.kruskal):
        assert r.edges == ()
        assert r.total_weight == 0
        assert r.operation_count == 1


def test_disconnected_divergence_is_reported():
    res = ResultAggregator().run_graph(0, 4, [(0, 1, 1.0), (2, 3, 1.0)])
    assert res.prim.edges == ((0, 1, 1.0),)
    assert res.prim.operation_count == 5
    assert res.kruskal.edges == ((0, 1, 1.0), (2, 3, 1.0))
    assert res.kruskal.operation_count == 9
    assert res.forest_divergence


def test_bad_graph_is_isolated(caplog):
    specs = [
        GraphSpec(graph_id="a", vertex_count=2, edges=[(0, 1, 1.0)]),
        GraphSpec(graph_id="b", vertex_count=2, edges=[(0, 5, 1.0)]),
        GraphSpec(graph_id="c", vertex_count=3, edges=[(0, 1, 1.0), (1, 2, 1.0)]),
    ]
    with caplog.at_level(logging.WARNING, logger="mstbench.analysis.aggregator"):
        batch = run_batch(specs)

    assert [e.graph_id for e in batch] == ["a", "b", "c"]
    assert isinstance(batch[0], GraphResult)
    assert isinstance(batch[2], GraphResult)
    fail = batch[1]
    assert isinstance(fail, GraphFailure)
    assert fail.error_type == "InvalidEdgeError"
    assert (fail.vertex_count, fail.edge_count) == (2, 1)
    assert not batch.ok
    assert len(batch.results) == 2
    assert "graph b failed" in caplog.text


def test_malformed_specs_are_isolated():
    specs = [
        GraphSpec(graph_id="a", vertex_count=2, edges=[(0, 1, 1.0)]),
        GraphSpec(graph_id="short", vertex_count=2, edges=[(0, 1)]),
        GraphSpec(graph_id="negative", vertex_count=-1, edges=[]),
        GraphSpec(graph_id="label", vertex_count=2, edges=[("x", 1, 1.0)]),
        GraphSpec(graph_id="c", vertex_count=2, edges=[(0, 1, 1.0)]),
    ]
    batch = run_batch(specs)

    assert [e.graph_id for e in batch] == ["a", "short", "negative", "label", "c"]
    assert [e.ok for e in batch] == [True, False, False, False, True]
    assert {f.error_type for f in batch.failures} == {"GraphFormatError"}
    assert batch[4].kruskal.total_weight == 1.0


def test_fail_fast_reraises():
    specs = [GraphSpec(graph_id=0, vertex_count=1, edges=[(0, 1, 1.0)])]
    with pytest.raises(InvalidEdgeError):
        ResultAggregator(BatchConfig(fail_fast=True)).run_batch(specs)


def test_time_decimals_config():
    res = ResultAggregator(BatchConfig(time_decimals=1)).run_graph(0, 4, PATH)
    assert round(res.prim.elapsed_ms, 1) == res.prim.elapsed_ms


def test_batch_summary():
    batch = run_batch(specs_from_tuples([
        (4, PATH),
        (4, [(0, 1, 1.0), (2, 3, 1.0)]),
        (0, []),
    ]))
    summary = summarize_batch(batch)
    assert summary["n_graphs"] == 3
    assert summary["n_failed"] == 0
    assert summary["forest_divergence"] == 1
    assert summary["weight_agreement"] == 1.0
    assert summary["kruskal"]["edges_mean"] == pytest.approx(5 / 3)
    assert batch.to_dict()["results"][0]["prim"]["operation_count"] == 13


def test_stopwatch_records_on_error():
    with pytest.raises(RuntimeError):
        with stopwatch() as sw:
            raise RuntimeError("boom")
    assert sw.ns >= 0
    assert sw.ms(None) >= 0.0
