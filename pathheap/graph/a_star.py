"""
A* path finding, O((V + E) log V).

Dijkstra always expands the closest vertex, with no sense of where the
target is:

        ...
         |
         C
       1 |
   A --- B --- D --- E
            3

Looking for A -> E, Dijkstra explores B -> C first because it is shorter,
even though it leads away from E. A* adds a heuristic estimate h of the
remaining distance to each vertex and orders the heap by f = g + h, where g
is the distance from the source. With h(D) < h(C), B -> D is explored first.

The heuristic must never overestimate the true remaining distance
(admissible), otherwise the path found may not be the shortest one.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pathheap.config import INFINITY
from pathheap.graph.dijkstra import build_search_heap
from pathheap.graph.graph import Graph, Vertex
from pathheap.graph.results import PathResult, reconstruct_path

logger = logging.getLogger(__name__)


def a_star_path_finding(
    graph: Graph,
    source_id: int,
    target_id: int,
    heuristic_values: Sequence[float],
) -> PathResult:
    """
    Find a shortest path from `source_id` to `target_id`.

    Same relaxation loop as Dijkstra, but entries are prioritised by
    distance + heuristic and the search stops as soon as the target is
    popped.

    Args:
        graph: Graph with non-negative edge weights
        source_id: Id of the source vertex
        target_id: Id of the target vertex
        heuristic_values: Estimated remaining distance to the target, indexed by vertex id

    Returns:
        PathResult with the labels along the path and its total weight,
        or an empty path and math.inf if the target is unreachable

    Raises:
        IndexError: If source_id or target_id is not a vertex of the graph
        ValueError: If there isn't one heuristic value per vertex
    """
    source = graph.vertex(source_id)
    goal = graph.vertex(target_id)
    if len(heuristic_values) != len(graph):
        raise ValueError(
            f"Expected {len(graph)} heuristic values, got {len(heuristic_values)}"
        )

    logger.debug(f"A* from '{source.label}' to '{goal.label}'")

    heap = build_search_heap(graph, source_id, source_cost=heuristic_values[source_id])
    distances: dict[str, float] = {}
    parents: dict[str, Vertex | None] = {}

    while not heap.is_empty():
        entry = heap.pop()
        vertex = entry.vertex
        # Everything left is unreachable
        if entry.distance == INFINITY:
            break
        distances[vertex.label] = entry.distance
        parents[vertex.label] = entry.parent
        if vertex is goal:
            break

        for edge in vertex.edges:
            target_entry = heap.find(edge.target.id)
            if target_entry is None:
                continue
            new_distance = entry.distance + edge.weight
            new_cost = new_distance + heuristic_values[edge.target.id]
            if target_entry.cost > new_cost:
                target_entry.distance = new_distance
                target_entry.cost = new_cost
                target_entry.parent = vertex
                heap.decrease_key(target_entry.key)

    if goal.label not in distances:
        logger.info(f"A*: No path from '{source.label}' to '{goal.label}'")
        return PathResult(path=[], distance=INFINITY)

    path = reconstruct_path(parents, goal.label)
    logger.debug(f"A* found path ({len(path) - 1} edges): {' -> '.join(path)}")
    return PathResult(path=path, distance=distances[goal.label])
