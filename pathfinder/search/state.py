"""
Per-search bookkeeping for the shortest-path engine.

A SearchTable is created fresh for every search and discarded afterwards,
so searches never share mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathfinder.graph.model import Graph, Vertex

INFINITY = float("inf")


@dataclass
class SearchState:
    """
    Mutable state of one vertex during a search.

    Attributes:
        vertex: Vertex this record describes
        order: Position of the vertex in the graph's insertion order
        visited: Whether the distance is final
        distance: Best known distance from the source
        predecessor: Previous vertex on the best known path
    """

    vertex: Vertex
    order: int
    visited: bool = False
    distance: float = INFINITY
    predecessor: Vertex | None = None

    @property
    def reached(self) -> bool:
        """Whether any path from the source has been found."""
        return self.distance != INFINITY


class SearchTable:
    """One SearchState per graph vertex, keyed by vertex identity."""

    def __init__(self, graph: Graph) -> None:
        self._states: dict[Vertex, SearchState] = {
            vertex: SearchState(vertex=vertex, order=order)
            for order, vertex in enumerate(graph)
        }

    def __getitem__(self, vertex: Vertex) -> SearchState:
        return self._states[vertex]

    def __len__(self) -> int:
        return len(self._states)

    def states(self) -> list[SearchState]:
        """All records in vertex insertion order."""
        return list(self._states.values())

    def visited_count(self) -> int:
        """Number of vertices whose distance is final."""
        return sum(1 for s in self._states.values() if s.visited)

    def predecessor_of(self, vertex: Vertex) -> Vertex | None:
        """Previous vertex on the best path to vertex, or None."""
        return self._states[vertex].predecessor
