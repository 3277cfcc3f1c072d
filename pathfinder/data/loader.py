"""
Reading and writing graph files.

A graph document has the shape:

    {
        "vertices": ["s", "a", "t"],
        "edges": [["s", "a", 4], ["a", "t", 2]]
    }

and is stored either as JSON (.json) or MessagePack (.msgpack, .mpk).

Usage:
    from pathfinder.data.loader import load_graph, save_graph

    graph = load_graph("data/roads.json")
    save_graph(graph, "data/roads.msgpack")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from pathfinder.config import GRAPH_FILE_SUFFIXES, graph_format_for
from pathfinder.exceptions import GraphFormatError, PathfinderError
from pathfinder.graph.model import Graph

logger = logging.getLogger(__name__)


# =============================================================================
# Documents
# =============================================================================

def graph_to_dict(graph: Graph) -> dict[str, Any]:
    """Convert a graph to a plain document (each undirected edge once)."""
    return {
        "vertices": graph.names(),
        "edges": [[a, b, w] for a, b, w in graph.edges()],
    }


def graph_from_dict(document: Any) -> Graph:
    """
    Build a graph from a plain document.

    Edges naming unknown vertices are skipped, as with Graph.add_edge.

    Raises:
        GraphFormatError: If the document does not have the expected shape
            or an edge weight is invalid
    """
    if not isinstance(document, dict):
        raise GraphFormatError(f"Graph document must be a mapping, got {type(document).__name__}")

    vertices = document.get("vertices", [])
    edges = document.get("edges", [])
    if not isinstance(vertices, list) or not isinstance(edges, list):
        raise GraphFormatError("'vertices' and 'edges' must be lists")

    graph = Graph()
    for name in vertices:
        if not isinstance(name, str):
            raise GraphFormatError(f"Vertex name must be a string, got {name!r}")
        graph.add_vertex(name)

    for i, edge in enumerate(edges):
        if not isinstance(edge, (list, tuple)) or len(edge) != 3:
            raise GraphFormatError(f"Edge #{i} must be [name_a, name_b, weight], got {edge!r}")
        name_a, name_b, weight = edge
        if not isinstance(name_a, str) or not isinstance(name_b, str):
            raise GraphFormatError(
                f"Edge #{i}: vertex names must be strings, got {name_a!r} and {name_b!r}"
            )
        try:
            added = graph.add_edge(name_a, name_b, weight)
        except PathfinderError as e:
            raise GraphFormatError(f"Edge #{i}: {e}") from e
        if not added:
            logger.warning(f"Edge #{i} ('{name_a}' - '{name_b}') names an unknown vertex, skipped")

    return graph


# =============================================================================
# Files
# =============================================================================

def _format_for(path: Path) -> str:
    fmt = graph_format_for(path)
    if fmt is None:
        supported = ", ".join(GRAPH_FILE_SUFFIXES)
        raise GraphFormatError(f"Unsupported graph file '{path.name}' (expected one of: {supported})")
    return fmt


def load_graph(path: str | Path) -> Graph:
    """
    Load a graph from a JSON or MessagePack file.

    Raises:
        FileNotFoundError: If path does not exist
        GraphFormatError: If the file type is unsupported or the content is malformed
    """
    path = Path(path)
    fmt = _format_for(path)

    logger.info(f"Loading graph from {path}...")
    try:
        if fmt == "json":
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        else:
            with open(path, "rb") as f:
                document = msgpack.load(f)
    # JSONDecodeError and msgpack's unpack errors are all ValueErrors
    except ValueError as e:
        raise GraphFormatError(f"Could not decode {path}: {e}") from e

    graph = graph_from_dict(document)
    logger.info(f"Loaded {len(graph):,} vertices and {graph.edge_count():,} edges")
    return graph


def save_graph(graph: Graph, path: str | Path) -> Path:
    """
    Write a graph to a JSON or MessagePack file, chosen by suffix.

    Raises:
        GraphFormatError: If the file type is unsupported
    """
    path = Path(path)
    fmt = _format_for(path)
    document = graph_to_dict(graph)

    if fmt == "json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2)
    else:
        with open(path, "wb") as f:
            msgpack.pack(document, f)

    logger.info(f"Saved graph ({len(graph):,} vertices) to {path}")
    return path
