"""
Breadth-first and depth-first traversal, O(V + E).

Both visit every vertex exactly once. They start from vertex 0 and restart
from the next unvisited vertex so disconnected components are covered.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from pathheap.graph.graph import Graph

Visitor = Callable[[int], None]


def bfs_graph_traversal(graph: Graph, visit: Visitor | None = None) -> list[int]:
    """
    Breadth-first traversal.

    Args:
        graph: Graph to traverse
        visit: Optional callback, called with each vertex id in visiting order

    Returns:
        Vertex ids in visiting order
    """
    visited = [False] * len(graph)
    order: list[int] = []

    for start in range(len(graph)):
        queue = deque([start])
        while queue:
            vertex_id = queue.popleft()
            if visited[vertex_id]:
                continue
            visited[vertex_id] = True
            order.append(vertex_id)
            if visit:
                visit(vertex_id)
            queue.extend(graph.neighbours(vertex_id))

    return order


def dfs_graph_traversal(graph: Graph, visit: Visitor | None = None) -> list[int]:
    """
    Depth-first traversal (pre-order).

    Uses an explicit stack; neighbours are pushed in reverse so they are
    explored in edge insertion order, as a recursive walk would.

    Args:
        graph: Graph to traverse
        visit: Optional callback, called with each vertex id in visiting order

    Returns:
        Vertex ids in visiting order
    """
    visited = [False] * len(graph)
    order: list[int] = []

    for start in range(len(graph)):
        stack = [start]
        while stack:
            vertex_id = stack.pop()
            if visited[vertex_id]:
                continue
            visited[vertex_id] = True
            order.append(vertex_id)
            if visit:
                visit(vertex_id)
            stack.extend(reversed(list(graph.neighbours(vertex_id))))

    return order
