"""
Unit tests for the Dijkstra shortest-path engine.

Optimality is checked against brute-force enumeration of simple paths on
small random graphs.
"""

import random

import pytest

from pathfinder.exceptions import VertexNotFoundError
from pathfinder.graph import Graph
from pathfinder.search import INFINITY, DijkstraEngine, PathResult, SearchTable, shortest_path


def brute_force_distance(graph: Graph, start: str, end: str) -> int | None:
    """Minimum weight over all simple paths from start to end, or None."""
    best = None

    def walk(name, visited, total):
        nonlocal best
        if best is not None and total >= best:
            return
        if name == end:
            best = total
            return
        for neighbor, weight in graph.neighbors(name):
            if neighbor not in visited:
                walk(neighbor, visited | {neighbor}, total + weight)

    walk(start, {start}, 0)
    return best


def random_graph(seed: int, vertex_count: int = 8, edge_count: int = 12) -> Graph:
    """Build a random graph; may be disconnected and contain loops or parallel edges."""
    rng = random.Random(seed)
    graph = Graph()
    names = [f"v{i}" for i in range(vertex_count)]
    for name in names:
        graph.add_vertex(name)
    for _ in range(edge_count):
        graph.add_edge(rng.choice(names), rng.choice(names), rng.randint(0, 9))
    return graph


def assert_valid_path(graph: Graph, result: PathResult) -> None:
    """The path should start and end correctly and follow existing edges."""
    assert result.path[0] == result.start
    assert result.path[-1] == result.end
    assert graph.path_weight(result.path) == result.distance


class TestSampleScenarios:
    """Scenarios on the six-vertex sample graph."""

    def test_s_to_t_weight(self, sample_graph, frontier):
        """Shortest s -> t should weigh 8 (two optimal paths exist)."""
        result = DijkstraEngine(sample_graph, frontier=frontier).find_shortest_path("s", "t")
        assert result.found
        assert result.distance == 8
        assert result.path in (["s", "a", "d", "t"], ["s", "c", "d", "t"])
        assert_valid_path(sample_graph, result)

    def test_start_equals_end(self, sample_graph, frontier):
        """Start == end should give a single-vertex path of weight 0."""
        result = DijkstraEngine(sample_graph, frontier=frontier).find_shortest_path("s", "s")
        assert result.path == ["s"]
        assert result.distance == 0
        assert result.hops == 0

    def test_unknown_target_raises(self, sample_graph, frontier):
        """An unknown target name should raise VertexNotFoundError."""
        engine = DijkstraEngine(sample_graph, frontier=frontier)
        with pytest.raises(VertexNotFoundError) as excinfo:
            engine.find_shortest_path("s", "x")
        assert excinfo.value.name == "x"

    def test_unknown_start_raises(self, sample_graph, frontier):
        engine = DijkstraEngine(sample_graph, frontier=frontier)
        with pytest.raises(VertexNotFoundError):
            engine.find_shortest_path("x", "t")

    def test_isolated_vertex_unreachable(self, disconnected_graph, frontier):
        """An isolated vertex should give an explicit no-path result."""
        result = DijkstraEngine(disconnected_graph, frontier=frontier).find_shortest_path("s", "z")
        assert not result.found
        assert result.path is None
        assert result.distance is None
        assert result.hops is None

    def test_other_component_unreachable(self, disconnected_graph, frontier):
        """A vertex in another component should be unreachable in both directions."""
        engine = DijkstraEngine(disconnected_graph, frontier=frontier)
        assert not engine.find_shortest_path("s", "y").found
        assert not engine.find_shortest_path("y", "s").found
        assert engine.find_shortest_path("x", "y").distance == 1

    def test_symmetry(self, sample_graph, frontier):
        """t -> s should weigh the same as s -> t."""
        engine = DijkstraEngine(sample_graph, frontier=frontier)
        forward = engine.find_shortest_path("s", "t")
        backward = engine.find_shortest_path("t", "s")
        assert backward.distance == forward.distance == 8
        assert_valid_path(sample_graph, backward)

    def test_repeated_queries_idempotent(self, sample_graph, frontier):
        """Repeated queries should not change the answer or the graph."""
        engine = DijkstraEngine(sample_graph, frontier=frontier)
        edges_before = sample_graph.edges()
        results = [engine.find_shortest_path("s", "t") for _ in range(3)]
        assert all(r == results[0] for r in results)
        assert sample_graph.edges() == edges_before

    def test_shortest_distances(self, sample_graph, frontier):
        """Distances to every vertex should be final Dijkstra distances."""
        distances = DijkstraEngine(sample_graph, frontier=frontier).shortest_distances("s")
        assert distances == {"s": 0, "a": 4, "b": 7, "c": 3, "d": 6, "t": 8}

    def test_shortest_distances_excludes_unreachable(self, disconnected_graph, frontier):
        distances = DijkstraEngine(disconnected_graph, frontier=frontier).shortest_distances("x")
        assert distances == {"x": 0, "y": 1}


class TestEdgeCases:
    """Self-loops, parallel edges, zero weights."""

    def test_parallel_edges_use_minimum(self, frontier):
        """The lightest of several parallel edges should be used."""
        graph = Graph()
        graph.add_vertex("a")
        graph.add_vertex("b")
        graph.add_edge("a", "b", 9)
        graph.add_edge("a", "b", 2)
        graph.add_edge("a", "b", 5)
        result = shortest_path(graph, "a", "b", frontier=frontier)
        assert result.path == ["a", "b"]
        assert result.distance == 2

    def test_self_loop_ignored(self, frontier):
        """A self-loop should never appear on a shortest path."""
        graph = Graph()
        graph.add_vertex("a")
        graph.add_vertex("b")
        graph.add_edge("a", "a", 0)
        graph.add_edge("a", "b", 3)
        result = shortest_path(graph, "a", "b", frontier=frontier)
        assert result.path == ["a", "b"]
        assert result.distance == 3

    def test_zero_weight_edges(self, frontier):
        graph = Graph()
        for name in "abc":
            graph.add_vertex(name)
        graph.add_edge("a", "b", 0)
        graph.add_edge("b", "c", 0)
        graph.add_edge("a", "c", 1)
        result = shortest_path(graph, "a", "c", frontier=frontier)
        assert result.distance == 0
        assert result.path == ["a", "b", "c"]

    def test_longer_path_with_fewer_weight(self, frontier):
        """The lighter path should win even with more hops."""
        graph = Graph()
        for name in "abcd":
            graph.add_vertex(name)
        graph.add_edge("a", "d", 10)
        graph.add_edge("a", "b", 1)
        graph.add_edge("b", "c", 1)
        graph.add_edge("c", "d", 1)
        result = shortest_path(graph, "a", "d", frontier=frontier)
        assert result.path == ["a", "b", "c", "d"]
        assert result.distance == 3
        assert result.hops == 3

    def test_duplicate_vertex_name_uses_first(self, frontier):
        """A duplicated name should resolve to the first vertex in searches and distances."""
        graph = Graph()
        for name in ["s", "a", "a", "t"]:
            graph.add_vertex(name)
        graph.add_edge("s", "a", 1)
        graph.add_edge("a", "t", 1)
        first_a, second_a = graph.vertices[1], graph.vertices[2]
        assert len(first_a.edges) == 2
        assert second_a.edges == []

        engine = DijkstraEngine(graph, frontier=frontier)
        result = engine.find_shortest_path("s", "t")
        assert result.path == ["s", "a", "t"]
        assert result.distance == 2
        assert engine.shortest_distances("s") == {"s": 0, "a": 1, "t": 2}
        assert engine.shortest_distances("a") == {"s": 1, "a": 0, "t": 1}

        # wire the second "a" in directly; distances still report the first one
        graph.find_vertex("s").add_edge(second_a, 5)
        assert engine.shortest_distances("s") == {"s": 0, "a": 1, "t": 2}

    def test_single_vertex_graph(self, frontier):
        graph = Graph()
        graph.add_vertex("only")
        assert shortest_path(graph, "only", "only", frontier=frontier).path == ["only"]

    def test_tie_broken_by_insertion_order(self, frontier):
        """Among equal-weight routes, the earlier-inserted vertex is finalized first."""
        graph = Graph()
        for name in ["s", "left", "right", "t"]:
            graph.add_vertex(name)
        graph.add_edge("s", "right", 1)
        graph.add_edge("s", "left", 1)
        graph.add_edge("left", "t", 1)
        graph.add_edge("right", "t", 1)
        result = shortest_path(graph, "s", "t", frontier=frontier)
        assert result.path == ["s", "left", "t"]


class TestOptimality:
    """Compare against brute force on random graphs."""

    @pytest.mark.parametrize("seed", range(25))
    def test_matches_brute_force(self, seed, frontier):
        """Distances should equal the brute-force minimum for every pair."""
        graph = random_graph(seed)
        engine = DijkstraEngine(graph, frontier=frontier)
        for start in graph.names():
            for end in graph.names():
                expected = brute_force_distance(graph, start, end)
                result = engine.find_shortest_path(start, end)
                if expected is None:
                    assert not result.found
                else:
                    assert result.distance == expected
                    assert_valid_path(graph, result)

    @pytest.mark.parametrize("seed", range(10))
    def test_frontier_strategies_agree(self, seed):
        """Scan and heap frontiers should return identical results."""
        graph = random_graph(seed, vertex_count=10, edge_count=18)
        scan = DijkstraEngine(graph, frontier="scan")
        heap = DijkstraEngine(graph, frontier="heap")
        for end in graph.names():
            assert scan.find_shortest_path("v0", end) == heap.find_shortest_path("v0", end)


class TestEngineSetup:
    """Engine construction and per-search state."""

    def test_unknown_frontier_rejected(self, sample_graph):
        with pytest.raises(ValueError):
            DijkstraEngine(sample_graph, frontier="bogus")

    def test_frontier_property(self, sample_graph):
        assert DijkstraEngine(sample_graph, frontier="scan").frontier == "scan"

    def test_search_table_initial_state(self, sample_graph):
        """A fresh table should hold one unvisited, unreached record per vertex."""
        table = SearchTable(sample_graph)
        assert len(table) == len(sample_graph)
        for order, state in enumerate(table.states()):
            assert state.order == order
            assert state.visited is False
            assert state.distance == INFINITY
            assert state.predecessor is None
            assert not state.reached
        assert table.visited_count() == 0


class TestPathResult:
    """Rendering of results."""

    def test_format_path(self):
        result = PathResult(start="s", end="t", path=["s", "a", "d", "t"], distance=8)
        assert result.format() == "s -> a -> d -> t"
        assert result.format(separator="") == "sadt"

    def test_format_no_path(self):
        result = PathResult(start="s", end="z", path=None, distance=None)
        assert "no path" in result.format()

    def test_to_dict(self):
        result = PathResult(start="s", end="s", path=["s"], distance=0)
        assert result.to_dict() == {
            "start": "s",
            "end": "s",
            "found": True,
            "path": ["s"],
            "distance": 0,
        }
