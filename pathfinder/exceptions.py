"""
Exceptions raised by Pathfinder.

An unreachable target is not an error: the search engine reports it as a
PathResult with no path.
"""

from __future__ import annotations


class PathfinderError(Exception):
    """Base class for all Pathfinder errors."""


class VertexNotFoundError(PathfinderError, KeyError):
    """A vertex name was requested that the graph does not contain."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Vertex '{self.name}' not in graph"


class InvalidEdgeWeightError(PathfinderError, ValueError):
    """An edge weight is negative or not an integer."""

    def __init__(self, weight: object, reason: str = "must be a non-negative integer") -> None:
        self.weight = weight
        super().__init__(f"Invalid edge weight {weight!r}: {reason}")


class GraphFormatError(PathfinderError, ValueError):
    """A graph file or document could not be understood."""
