"""
Dijkstra's single-source shortest paths, O((V + E) log V).

Finds the shortest distance from one source vertex to every other vertex
of a graph whose edge weights are all non-negative. Negative weights are
not detected; the result is simply not guaranteed to be correct then.

           (4)
        B ----- C
    (2)/         \\(3)
      A --------- F
      \\    (4)   /
    (5)\\        /(2)
        \\      /
          D ------- E
               (1)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pathheap.config import INFINITY
from pathheap.graph.graph import Graph, Vertex
from pathheap.graph.results import ShortestPaths
from pathheap.heap import IndexedBinaryHeap

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class SearchEntry:
    """
    Per-vertex search state held in the heap.

    Attributes:
        vertex: Vertex this entry describes
        distance: Best known distance from the source (g)
        cost: Heap priority; equals distance for Dijkstra, g + h for A*
        parent: Predecessor on the best known path
    """

    vertex: Vertex
    distance: float = INFINITY
    cost: float = INFINITY
    parent: Vertex | None = None

    @property
    def key(self) -> int:
        return self.vertex.id


def lower_cost(a: SearchEntry, b: SearchEntry) -> bool:
    """Entries with a lower cost have higher priority."""
    return a.cost < b.cost


def build_search_heap(
    graph: Graph,
    source_id: int,
    source_cost: float = 0,
) -> IndexedBinaryHeap[SearchEntry]:
    """One entry per vertex: the source at distance 0, everything else at infinity."""
    entries = [SearchEntry(vertex) for vertex in graph.vertices]
    entries[source_id].distance = 0
    entries[source_id].cost = source_cost
    return IndexedBinaryHeap.build_heap_in_place(entries, lower_cost, key=lambda entry: entry.key)


def find_dijkstra_shortest_path(graph: Graph, source_id: int) -> ShortestPaths:
    """
    Compute shortest distances and predecessors from `source_id`.

    Every vertex starts in a min-heap keyed by distance. The closest one is
    popped and committed, then each edge leaving it is relaxed: if going
    through it shortens the distance to a vertex still in the heap, that
    entry's distance and parent are updated and it is sifted up. Distances
    only ever decrease, which cannot break order with its children, so
    sifting up is enough. The heap is drained completely.

    Args:
        graph: Graph with non-negative edge weights
        source_id: Id of the source vertex

    Returns:
        ShortestPaths keyed by vertex label

    Raises:
        IndexError: If source_id is not a vertex of the graph
    """
    source = graph.vertex(source_id)
    logger.debug(f"Dijkstra from '{source.label}' over {len(graph)} vertices")

    heap = build_search_heap(graph, source_id)
    distances: dict[str, float] = {}
    parents: dict[str, Vertex | None] = {}

    while not heap.is_empty():
        entry = heap.pop()
        vertex = entry.vertex
        distances[vertex.label] = entry.distance
        parents[vertex.label] = entry.parent

        for edge in vertex.edges:
            target_entry = heap.find(edge.target.id)
            # Already committed (includes self loops)
            if target_entry is None:
                continue
            new_distance = entry.distance + edge.weight
            if target_entry.distance > new_distance:
                target_entry.distance = new_distance
                target_entry.cost = new_distance
                target_entry.parent = vertex
                heap.decrease_key(target_entry.key)

    reachable = sum(1 for distance in distances.values() if distance < INFINITY)
    logger.debug(f"Dijkstra from '{source.label}' reached {reachable}/{len(graph)} vertices")

    return ShortestPaths(source=source.label, distances=distances, parents=parents)
