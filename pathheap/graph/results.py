"""
Result records returned by the shortest-path searches.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathheap.graph.graph import Vertex


def reconstruct_path(parents: Mapping[str, Vertex | None], label: str) -> list[str]:
    """
    Walk predecessors back from `label` to the search source.

    Returns:
        Labels from the source to `label`, inclusive
    """
    path = [label]
    parent = parents.get(label)
    while parent is not None:
        path.append(parent.label)
        parent = parents.get(parent.label)
    return list(reversed(path))


@dataclass(frozen=True)
class ShortestPaths:
    """
    Single-source shortest paths to every vertex.

    Attributes:
        source: Label of the source vertex
        distances: Label -> shortest distance (math.inf if unreachable)
        parents: Label -> predecessor on a shortest path (None for the
            source and for unreachable vertices)
    """

    source: str
    distances: dict[str, float] = field(default_factory=dict)
    parents: dict[str, Vertex | None] = field(default_factory=dict)

    def distance_to(self, label: str) -> float:
        return self.distances.get(label, math.inf)

    def is_reachable(self, label: str) -> bool:
        return self.distance_to(label) < math.inf

    def path_to(self, label: str) -> list[str] | None:
        """Labels along a shortest path from the source, or None if unreachable."""
        if not self.is_reachable(label):
            return None
        return reconstruct_path(self.parents, label)

    @property
    def reachable(self) -> list[str]:
        """Reachable labels, nearest first."""
        labels = [label for label in self.distances if self.is_reachable(label)]
        return sorted(labels, key=self.distances.__getitem__)


@dataclass(frozen=True)
class PathResult:
    """
    A single source-to-target path.

    Attributes:
        path: Labels from source to target, empty if the target is unreachable
        distance: Total edge weight along the path (math.inf if unreachable)
    """

    path: list[str]
    distance: float

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, or None if no path was found."""
        if not self.path:
            return None
        return len(self.path) - 1
