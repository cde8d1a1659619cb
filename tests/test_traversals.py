"""
Observer protocol tests for BFS and DFS.

The recorded event log is the contract: begun, one visit per visited
vertex, and exactly one search_over per call.
"""

from typing import List

import pytest

from errors import UnknownVertexError
from observers import GraphAlgorithmObserver, RecordingObserver
from weighted_graph import WeightedGraph


def _graph(vertices, edges) -> WeightedGraph:
    g = WeightedGraph()
    for v in vertices:
        g.add_vertex(v)
    for src, dst, w in edges:
        g.add_edge(src, dst, w)
    return g


def _observed(g: WeightedGraph) -> RecordingObserver:
    rec = RecordingObserver()
    g.add_observer(rec)
    return rec


def test_bfs_stops_when_end_dequeued_before_intermediate():
    # a -> c inserted first, so c is dequeued before b is ever visited
    g = _graph("abc", [("a", "c", 1), ("a", "b", 1), ("b", "c", 1)])
    rec = _observed(g)

    visited = g.do_bfs("a", "c")

    assert rec.events == [("bfs_begun",), ("visit", "a"), ("search_over",)]
    assert visited == ["a"]


def test_bfs_visits_intermediate_when_enqueued_first():
    g = _graph("abc", [("a", "b", 1), ("a", "c", 100), ("b", "c", 1)])
    rec = _observed(g)

    g.do_bfs("a", "c")

    assert rec.events == [
        ("bfs_begun",),
        ("visit", "a"),
        ("visit", "b"),
        ("search_over",),
    ]


def test_bfs_and_dfs_visit_order_on_tree():
    # a -> b -> d, a -> c -> e; z is never reached
    g = _graph(
        "abcdez",
        [("a", "b", 1), ("a", "c", 1), ("b", "d", 1), ("c", "e", 1)],
    )
    rec = _observed(g)

    assert g.do_bfs("a", "z") == ["a", "b", "c", "d", "e"]
    assert rec.names().count("search_over") == 1

    rec.clear()
    # The stack pops the most recently pushed neighbour first
    assert g.do_dfs("a", "z") == ["a", "c", "e", "b", "d"]
    assert rec.events[0] == ("dfs_begun",)
    assert rec.events[-1] == ("search_over",)
    assert rec.names().count("search_over") == 1


def test_dfs_dives_into_last_inserted_neighbour():
    g = _graph("abc", [("a", "b", 1), ("a", "c", 1)])
    rec = _observed(g)

    g.do_dfs("a", "c")

    assert rec.events == [("dfs_begun",), ("visit", "a"), ("search_over",)]


def test_revisited_vertices_are_skipped():
    # c gets enqueued twice (from a and from b) but is visited once
    g = _graph("abcdz", [("a", "b", 1), ("a", "c", 1), ("b", "c", 1), ("c", "d", 1)])
    rec = _observed(g)

    g.do_bfs("a", "z")

    assert rec.visited() == ["a", "b", "c", "d"]
    assert rec.names().count("search_over") == 1


def test_cycle_terminates_when_end_unreachable():
    g = _graph("abcz", [("a", "b", 1), ("b", "c", 1), ("c", "a", 1)])
    rec = _observed(g)

    g.do_dfs("a", "z")

    assert rec.visited() == ["a", "b", "c"]
    assert rec.events[-1] == ("search_over",)


@pytest.mark.parametrize("search, begun", [("do_bfs", "bfs_begun"), ("do_dfs", "dfs_begun")])
def test_start_equal_to_end_terminates_without_visit(search, begun):
    g = _graph("ab", [("a", "b", 1)])
    rec = _observed(g)

    visited = getattr(g, search)("a", "a")

    assert rec.events == [(begun,), ("search_over",)]
    assert visited == []


@pytest.mark.parametrize("search", ["do_bfs", "do_dfs"])
def test_unknown_endpoints_fail_before_notifying(search):
    g = _graph("a", [])
    rec = _observed(g)

    with pytest.raises(UnknownVertexError):
        getattr(g, search)("a", "missing")
    with pytest.raises(UnknownVertexError):
        getattr(g, search)("missing", "a")

    assert rec.events == []


def test_observers_notified_in_registration_order():
    log: List[str] = []

    class Tagged(GraphAlgorithmObserver):
        def __init__(self, tag: str) -> None:
            self.tag = tag

        def on_bfs_begun(self) -> None:
            log.append(f"{self.tag}:begun")

        def on_visit(self, vertex) -> None:
            log.append(f"{self.tag}:visit:{vertex}")

        def on_search_over(self) -> None:
            log.append(f"{self.tag}:over")

    g = _graph("ab", [("a", "b", 1)])
    g.add_observer(Tagged("first"))
    g.add_observer(Tagged("second"))

    g.do_bfs("a", "b")

    assert log == [
        "first:begun",
        "second:begun",
        "first:visit:a",
        "second:visit:a",
        "first:over",
        "second:over",
    ]


def test_partial_observer_ignores_other_events():
    class VisitsOnly(GraphAlgorithmObserver):
        def __init__(self) -> None:
            self.seen: List[str] = []

        def on_visit(self, vertex) -> None:
            self.seen.append(vertex)

    g = _graph("abc", [("a", "b", 1), ("b", "c", 1)])
    obs = VisitsOnly()
    g.add_observer(obs)

    g.do_bfs("a", "c")
    g.do_dijkstra("a", "c")

    assert obs.seen == ["a", "b"]


def test_bfs_ignores_weights():
    # Cheap long route vs expensive direct edge: BFS still reaches d in two hops
    g = _graph(
        "abcd",
        [("a", "d", 1000), ("a", "b", 1), ("b", "c", 1), ("c", "d", 1)],
    )
    rec = _observed(g)

    g.do_bfs("a", "d")

    assert rec.visited() == ["a"]
