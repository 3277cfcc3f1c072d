"""
Data module.

Provides graph file I/O and the built-in sample graph.

Usage:
    from pathfinder.data import build_sample_graph, load_graph

    graph = load_graph("data/roads.json")
    graph = build_sample_graph()
"""

from pathfinder.data.loader import graph_from_dict, graph_to_dict, load_graph, save_graph
from pathfinder.data.sample import SAMPLE_EDGES, SAMPLE_VERTICES, build_sample_graph

__all__ = [
    "graph_from_dict",
    "graph_to_dict",
    "load_graph",
    "save_graph",
    "SAMPLE_EDGES",
    "SAMPLE_VERTICES",
    "build_sample_graph",
]
