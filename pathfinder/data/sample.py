"""
Sample graph used by the command line when no graph file is given.

Two shortest paths of weight 8 join s and t: s -> a -> d -> t and
s -> c -> d -> t.
"""

from __future__ import annotations

from pathfinder.graph.model import Graph

SAMPLE_VERTICES = ["s", "a", "b", "c", "d", "t"]

SAMPLE_EDGES = [
    ("s", "a", 4),
    ("s", "b", 7),
    ("s", "c", 3),
    ("a", "d", 2),
    ("a", "b", 3),
    ("b", "t", 2),
    ("d", "t", 2),
    ("c", "d", 3),
]


def build_sample_graph() -> Graph:
    """Build the six-vertex sample graph (shortest s -> t weight is 8)."""
    graph = Graph()
    for name in SAMPLE_VERTICES:
        graph.add_vertex(name)
    for name_a, name_b, weight in SAMPLE_EDGES:
        graph.add_edge(name_a, name_b, weight)
    return graph
