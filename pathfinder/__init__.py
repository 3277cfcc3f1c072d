"""
Pathfinder.

Shortest paths between named vertices of a weighted, undirected graph,
computed with Dijkstra's label-setting algorithm.
"""

__version__ = "0.1.0"
