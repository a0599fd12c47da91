"""
Weighted graph stored as adjacency lists.

Vertices are numbered 0..n-1 at construction. Each vertex owns a linked
list of the edges leaving it; an undirected edge is stored as two directed
edges, one in each endpoint's list.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

from pathheap.config import DEFAULT_EDGE_WEIGHT
from pathheap.linked_list import SinglyLinkedList


class GraphEdgeDirection(str, Enum):
    UNDIRECTED = "undirected"
    DIRECTED = "directed"


@dataclass(eq=False)
class Vertex:
    """
    A graph vertex.

    Attributes:
        id: Permanent position in Graph.vertices
        label: Display name, defaults to str(id)
        edges: Outgoing edges, in insertion order
    """

    id: int
    label: str = ""
    edges: SinglyLinkedList[Edge] = field(default_factory=SinglyLinkedList, repr=False)

    def __post_init__(self) -> None:
        if not self.label:
            self.label = str(self.id)


@dataclass(frozen=True, eq=False)
class Edge:
    """A directed, weighted edge. Weights are expected to be non-negative."""

    source: Vertex
    target: Vertex
    weight: float = DEFAULT_EDGE_WEIGHT


class Graph:
    """
    Adjacency-list graph with a fixed vertex count and direction.

    Self loops and parallel edges are allowed.
    """

    def __init__(
        self,
        direction: GraphEdgeDirection,
        number_of_vertices: int,
        labels: Sequence[str] | None = None,
    ) -> None:
        """
        Args:
            direction: Whether add_edge() also stores the reverse edge
            number_of_vertices: Vertices are created with ids 0..n-1
            labels: Optional display labels, one per vertex, must be unique

        Raises:
            ValueError: If the vertex count is negative or labels are invalid
        """
        if number_of_vertices < 0:
            raise ValueError(f"Vertex count must be non-negative, got {number_of_vertices}")
        self._direction = GraphEdgeDirection(direction)
        self.vertices: list[Vertex] = [Vertex(vertex_id) for vertex_id in range(number_of_vertices)]
        if labels is not None:
            self.relabel(labels)

    @property
    def direction(self) -> GraphEdgeDirection:
        return self._direction

    @property
    def number_of_vertices(self) -> int:
        return len(self.vertices)

    def is_undirected(self) -> bool:
        return self._direction is GraphEdgeDirection.UNDIRECTED

    def relabel(self, labels: Sequence[str]) -> None:
        """
        Assign display labels to all vertices.

        Raises:
            ValueError: If the count doesn't match or labels repeat
        """
        if len(labels) != len(self.vertices):
            raise ValueError(f"Expected {len(self.vertices)} labels, got {len(labels)}")
        if len(set(labels)) != len(labels):
            raise ValueError("Vertex labels must be unique")
        for vertex, label in zip(self.vertices, labels):
            vertex.label = label

    def vertex(self, vertex_id: int) -> Vertex:
        """Get vertex by id."""
        if 0 <= vertex_id < len(self.vertices):
            return self.vertices[vertex_id]
        raise IndexError(f"Vertex {vertex_id} out of range [0, {len(self.vertices)})")

    def vertex_by_label(self, label: str) -> Vertex | None:
        """Get vertex by label, or None if not found."""
        for vertex in self.vertices:
            if vertex.label == label:
                return vertex
        return None

    def add_edge(self, source: int, target: int, weight: float = DEFAULT_EDGE_WEIGHT) -> None:
        """Add an edge; undirected graphs also get the mirror edge."""
        source_vertex = self.vertex(source)
        target_vertex = self.vertex(target)
        source_vertex.edges.insert_at_tail(Edge(source_vertex, target_vertex, weight))
        if self.is_undirected():
            target_vertex.edges.insert_at_tail(Edge(target_vertex, source_vertex, weight))

    def edges_from(self, vertex_id: int) -> SinglyLinkedList[Edge]:
        return self.vertex(vertex_id).edges

    def neighbours(self, vertex_id: int) -> Iterator[int]:
        """Ids of edge targets leaving `vertex_id`, repeated for parallel edges."""
        for edge in self.vertex(vertex_id).edges:
            yield edge.target.id

    def edge_count(self) -> int:
        """Number of stored directed edges (undirected edges count twice)."""
        return sum(len(vertex.edges) for vertex in self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __str__(self) -> str:
        parts = []
        for vertex in self.vertices:
            parts.append(f"|{vertex.id}|->")
            parts.extend(f"[{edge.target.id}]->" for edge in vertex.edges)
            parts.append("null,")
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"Graph(direction={self._direction.value!r}, "
            f"vertices={len(self.vertices)}, edges={self.edge_count()})"
        )
