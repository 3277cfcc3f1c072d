"""
Graph module.

Provides the in-memory graph model:
- Vertex: named vertex owning its outgoing edges
- Edge: directed half of an undirected, weighted connection
- Graph: vertex container with name lookup and edge insertion
"""

from pathfinder.graph.model import Edge, Graph, Vertex

__all__ = [
    "Edge",
    "Graph",
    "Vertex",
]
