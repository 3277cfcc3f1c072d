"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from pathfinder.data import build_sample_graph
from pathfinder.graph import Graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_graph() -> Graph:
    """Return the six-vertex sample graph (s, a, b, c, d, t)."""
    return build_sample_graph()


@pytest.fixture
def disconnected_graph(sample_graph: Graph) -> Graph:
    """Return the sample graph plus an isolated vertex 'z' and a separate pair x - y."""
    sample_graph.add_vertex("z")
    sample_graph.add_vertex("x")
    sample_graph.add_vertex("y")
    sample_graph.add_edge("x", "y", 1)
    return sample_graph


@pytest.fixture(params=["scan", "heap"])
def frontier(request) -> str:
    """Run a test once per frontier strategy."""
    return request.param
