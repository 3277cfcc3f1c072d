"""
Search module.

Provides the shortest-path engine:
- DijkstraEngine: single-source search with path reconstruction
- PathResult: path and total weight, or an explicit "no path"
- SearchState / SearchTable: per-search vertex bookkeeping
- shortest_path: one-shot convenience wrapper
"""

from pathfinder.search.engine import DijkstraEngine, PathResult, shortest_path
from pathfinder.search.state import INFINITY, SearchState, SearchTable

__all__ = [
    "DijkstraEngine",
    "PathResult",
    "shortest_path",
    "INFINITY",
    "SearchState",
    "SearchTable",
]
