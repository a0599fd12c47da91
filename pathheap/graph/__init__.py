"""
Graph algorithms module.

Provides an adjacency-list graph and algorithms over it:
- Dijkstra: single-source shortest paths
- A*: heuristic-guided shortest path to one target
- BFS / DFS: full traversals
"""

from pathheap.config import EXAMPLE_EDGES, EXAMPLE_LABELS
from pathheap.graph.a_star import a_star_path_finding
from pathheap.graph.dijkstra import find_dijkstra_shortest_path
from pathheap.graph.graph import Edge, Graph, GraphEdgeDirection, Vertex
from pathheap.graph.results import PathResult, ShortestPaths, reconstruct_path
from pathheap.graph.traversal import bfs_graph_traversal, dfs_graph_traversal

__all__ = [
    "Graph",
    "GraphEdgeDirection",
    "Vertex",
    "Edge",
    "ShortestPaths",
    "PathResult",
    "reconstruct_path",
    "find_dijkstra_shortest_path",
    "a_star_path_finding",
    "bfs_graph_traversal",
    "dfs_graph_traversal",
    "build_example_graph",
]


def build_example_graph(direction: GraphEdgeDirection = GraphEdgeDirection.UNDIRECTED) -> Graph:
    """
    Build the six-vertex example graph from pathheap.config.

    Args:
        direction: Direction mode of the returned graph

    Returns:
        Graph labelled A..F with the example edges added
    """
    graph = Graph(direction, len(EXAMPLE_LABELS), labels=EXAMPLE_LABELS)
    for source, target, weight in EXAMPLE_EDGES:
        graph.add_edge(source, target, weight)
    return graph
