"""
Dijkstra shortest-path engine.

Runs a single-source search over a Graph and reconstructs the path to one
target from predecessor links. Two frontier strategies select the next
vertex to finalize:

- scan: linear scan over all vertices for the smallest finite distance
- heap: binary heap keyed by (distance, insertion order), skipping stale entries

Both pick the unvisited vertex with the smallest distance and break ties by
vertex insertion order, so they return identical paths.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pathfinder import config
from pathfinder.config import PATH_SEPARATOR, validate_frontier
from pathfinder.exceptions import PathfinderError
from pathfinder.search.state import SearchState, SearchTable

if TYPE_CHECKING:
    from pathfinder.graph.model import Graph, Vertex

logger = logging.getLogger(__name__)


@dataclass
class PathResult:
    """
    Outcome of a shortest-path query.

    Attributes:
        start: Name of the start vertex
        end: Name of the end vertex
        path: Vertex names from start to end, or None if end is unreachable
        distance: Total weight of path, or None if end is unreachable
    """

    start: str
    end: str
    path: list[str] | None
    distance: int | None

    @property
    def found(self) -> bool:
        """Whether a path exists."""
        return self.path is not None

    @property
    def hops(self) -> int | None:
        """Number of edges on the path (0 when start == end)."""
        if self.path is None:
            return None
        return len(self.path) - 1

    def format(self, separator: str = PATH_SEPARATOR) -> str:
        """Render the path as text, e.g. 's -> a -> d -> t'."""
        if self.path is None:
            return f"no path from '{self.start}' to '{self.end}'"
        return separator.join(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "found": self.found,
            "path": list(self.path) if self.path is not None else None,
            "distance": self.distance,
        }


class DijkstraEngine:
    """
    Shortest-path search over a Graph.

    The engine never modifies the graph. Every query builds its own
    SearchTable, so one engine (or several engines sharing a graph) can
    answer any number of queries.
    """

    def __init__(self, graph: Graph, frontier: str | None = None) -> None:
        """
        Initialize the engine.

        Args:
            graph: Graph to search
            frontier: Frontier strategy, "scan" or "heap" (default: config.DEFAULT_FRONTIER)

        Raises:
            ValueError: If frontier is not a known strategy
        """
        if frontier is None:
            frontier = config.DEFAULT_FRONTIER
        self._graph = graph
        self._frontier = validate_frontier(frontier)

    @property
    def frontier(self) -> str:
        return self._frontier

    # =========================================================================
    # Queries
    # =========================================================================

    def find_shortest_path(self, start: str, end: str) -> PathResult:
        """
        Find one shortest path between two named vertices.

        Args:
            start: Name of the start vertex
            end: Name of the end vertex

        Returns:
            PathResult with the path and its total weight. If end cannot be
            reached from start, path and distance are None.

        Raises:
            VertexNotFoundError: If start or end is not in the graph
        """
        start_vertex = self._graph.get_vertex(start)
        end_vertex = self._graph.get_vertex(end)

        if start_vertex is end_vertex:
            return PathResult(start=start, end=end, path=[start], distance=0)

        table = self._search(start_vertex)
        target = table[end_vertex]

        if not target.reached:
            logger.warning(f"No path from '{start}' to '{end}'")
            return PathResult(start=start, end=end, path=None, distance=None)

        path = self._reconstruct(table, start_vertex, end_vertex)
        logger.debug(f"Shortest path ({target.distance}): {PATH_SEPARATOR.join(path)}")
        return PathResult(start=start, end=end, path=path, distance=target.distance)

    def shortest_distances(self, start: str) -> dict[str, int]:
        """
        Final distance from start to every reachable vertex.

        Raises:
            VertexNotFoundError: If start is not in the graph
        """
        table = self._search(self._graph.get_vertex(start))
        distances: dict[str, int] = {}
        for state in table.states():
            if state.reached:
                distances.setdefault(state.vertex.name, state.distance)
        return distances

    # =========================================================================
    # Search
    # =========================================================================

    def _search(self, source: Vertex) -> SearchTable:
        """Run the relaxation loop from source until the frontier is empty."""
        table = SearchTable(self._graph)
        table[source].distance = 0

        if self._frontier == "heap":
            self._run_heap(table, table[source])
        else:
            self._run_scan(table)

        logger.debug(
            f"Search from '{source.name}' ({self._frontier}) finalized "
            f"{table.visited_count()}/{len(table)} vertices"
        )
        return table

    def _run_scan(self, table: SearchTable) -> None:
        while True:
            current = self._closest_unvisited(table)
            if current is None:
                break
            self._relax(table, current)

    def _run_heap(self, table: SearchTable, source: SearchState) -> None:
        states = table.states()
        heap = [(source.distance, source.order)]

        while heap:
            distance, order = heapq.heappop(heap)
            current = states[order]

            # skip entries superseded by a later relaxation
            if current.visited or distance > current.distance:
                continue

            for updated in self._relax(table, current):
                heapq.heappush(heap, (updated.distance, updated.order))

    @staticmethod
    def _closest_unvisited(table: SearchTable) -> SearchState | None:
        """Unvisited record with the smallest finite distance, first one on ties."""
        closest = None
        for state in table.states():
            if state.visited or not state.reached:
                continue
            if closest is None or state.distance < closest.distance:
                closest = state
        return closest

    @staticmethod
    def _relax(table: SearchTable, current: SearchState) -> list[SearchState]:
        """Finalize current and relax its outgoing edges. Returns updated records."""
        current.visited = True
        updated = []
        for edge in current.vertex.edges:
            neighbor = table[edge.destination]
            if neighbor.visited:
                continue
            candidate = current.distance + edge.weight
            if candidate < neighbor.distance:
                neighbor.distance = candidate
                neighbor.predecessor = current.vertex
                updated.append(neighbor)
        return updated

    @staticmethod
    def _reconstruct(table: SearchTable, start: Vertex, end: Vertex) -> list[str]:
        """Walk predecessor links back from end to start."""
        names = [end.name]
        vertex = end
        while vertex is not start:
            predecessor = table.predecessor_of(vertex)
            if predecessor is None:
                raise PathfinderError(f"Predecessor chain from '{end.name}' stops at '{vertex.name}'")
            vertex = predecessor
            names.append(vertex.name)
        names.reverse()
        return names


def shortest_path(
    graph: Graph,
    start: str,
    end: str,
    frontier: str | None = None,
) -> PathResult:
    """Find one shortest path between two named vertices of graph."""
    return DijkstraEngine(graph, frontier=frontier).find_shortest_path(start, end)
