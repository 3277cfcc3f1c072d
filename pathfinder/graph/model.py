"""
Graph model: named vertices joined by weighted, undirected edges.

Each undirected edge is stored as two directed halves, one in each
endpoint's outgoing edge list. Vertices are looked up by name through a
mapping; the first vertex registered under a name wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from pathfinder.exceptions import InvalidEdgeWeightError, VertexNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """
    Directed half of an undirected connection.

    Attributes:
        destination: Vertex this edge leads to (owned by the graph)
        weight: Non-negative integer weight
    """

    destination: Vertex
    weight: int


@dataclass(eq=False)
class Vertex:
    """
    A named graph vertex and its outgoing edges.

    Vertices compare by identity; names are unique within one graph.

    Attributes:
        name: Vertex name
        edges: Outgoing edges in insertion order
    """

    name: str
    edges: list[Edge] = field(default_factory=list, repr=False)

    def add_edge(self, destination: Vertex, weight: int) -> Edge:
        """Append an outgoing edge to destination."""
        edge = Edge(destination=destination, weight=weight)
        self.edges.append(edge)
        return edge

    def __str__(self) -> str:
        return self.name


def _check_weight(weight: object) -> int:
    """Return weight if it is a non-negative int, else raise InvalidEdgeWeightError."""
    # bool is an int subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidEdgeWeightError(weight, "must be an integer")
    if weight < 0:
        raise InvalidEdgeWeightError(weight, "must not be negative")
    return weight


class Graph:
    """
    Weighted, undirected graph of named vertices.

    The graph is never modified by a search, so one instance can be
    shared by any number of searches.
    """

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._by_name: dict[str, Vertex] = {}
        self._edges: list[tuple[str, str, int]] = []

    # =========================================================================
    # Vertices
    # =========================================================================

    def add_vertex(self, name: str) -> Vertex:
        """
        Add a vertex with an empty edge list.

        Names are not required to be unique, but lookups always resolve a
        duplicated name to the vertex that was added first.
        """
        vertex = Vertex(name)
        self._vertices.append(vertex)
        if name in self._by_name:
            logger.warning(f"Duplicate vertex name '{name}'; lookups resolve to the first one")
        else:
            self._by_name[name] = vertex
        return vertex

    def find_vertex(self, name: str) -> Vertex | None:
        """Get vertex by name, or None if not found."""
        return self._by_name.get(name)

    def get_vertex(self, name: str) -> Vertex:
        """Get vertex by name, raising VertexNotFoundError if not found."""
        vertex = self._by_name.get(name)
        if vertex is None:
            raise VertexNotFoundError(name)
        return vertex

    @property
    def vertices(self) -> list[Vertex]:
        """All vertices in insertion order."""
        return list(self._vertices)

    def names(self) -> list[str]:
        """Vertex names in insertion order."""
        return [v.name for v in self._vertices]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    # =========================================================================
    # Edges
    # =========================================================================

    def add_edge(self, name_a: str, name_b: str, weight: int) -> bool:
        """
        Connect two vertices with an undirected edge.

        Adds the halves A->B and B->A, both carrying weight. If either name
        is unknown nothing is added and False is returned.

        Raises:
            InvalidEdgeWeightError: If weight is negative or not an integer
        """
        weight = _check_weight(weight)

        vertex_a = self.find_vertex(name_a)
        vertex_b = self.find_vertex(name_b)
        if vertex_a is None or vertex_b is None:
            logger.debug(f"Skipping edge '{name_a}' - '{name_b}': vertex not in graph")
            return False

        vertex_a.add_edge(vertex_b, weight)
        vertex_b.add_edge(vertex_a, weight)
        self._edges.append((name_a, name_b, weight))
        return True

    def edges(self) -> list[tuple[str, str, int]]:
        """Undirected edges as (name_a, name_b, weight), in insertion order."""
        return list(self._edges)

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return len(self._edges)

    def neighbors(self, name: str) -> list[tuple[str, int]]:
        """
        Outgoing (neighbor name, weight) pairs of a vertex.

        Raises:
            VertexNotFoundError: If name is not in the graph
        """
        return [(e.destination.name, e.weight) for e in self.get_vertex(name).edges]

    def path_weight(self, names: Iterable[str]) -> int:
        """
        Total weight of a walk given as a sequence of vertex names.

        Each hop uses the lightest edge between its endpoints.

        Raises:
            VertexNotFoundError: If a name is not in the graph
            ValueError: If the sequence is empty or two consecutive
                vertices are not adjacent
        """
        vertices = [self.get_vertex(name) for name in names]
        if not vertices:
            raise ValueError("Path must contain at least one vertex")

        total = 0
        for current, following in zip(vertices, vertices[1:]):
            weights = [e.weight for e in current.edges if e.destination is following]
            if not weights:
                raise ValueError(f"No edge between '{current.name}' and '{following.name}'")
            total += min(weights)
        return total

    # =========================================================================
    # Statistics
    # =========================================================================

    def stats(self) -> dict[str, int]:
        """Summary counts for display."""
        return {
            "vertices": len(self._vertices),
            "edges": len(self._edges),
            "isolated_vertices": sum(1 for v in self._vertices if not v.edges),
            "self_loops": sum(1 for a, b, _ in self._edges if a == b),
            "total_weight": sum(w for _, _, w in self._edges),
        }

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"
