"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from pathheap.config import EXAMPLE_EDGES, EXAMPLE_HEURISTIC, EXAMPLE_LABELS
from pathheap.graph import Graph, GraphEdgeDirection, build_example_graph


@pytest.fixture
def heap_values() -> list[int]:
    """Return the values used by the heap layout tests."""
    return [68, 69, 66, 15, 91, 98, 17, 37]


@pytest.fixture
def example_edges() -> list[tuple[int, int, int]]:
    """Return the (source, target, weight) triples of the example graph."""
    return list(EXAMPLE_EDGES)


@pytest.fixture
def example_labels() -> list[str]:
    return list(EXAMPLE_LABELS)


@pytest.fixture
def example_graph() -> Graph:
    """Return the undirected six-vertex example graph labelled A..F."""
    return build_example_graph()


@pytest.fixture
def directed_example_graph() -> Graph:
    """Return the example graph with every edge directed source -> target."""
    return build_example_graph(GraphEdgeDirection.DIRECTED)


@pytest.fixture
def example_heuristic() -> list[int]:
    """Return admissible estimates of the distance to F."""
    return list(EXAMPLE_HEURISTIC)
