"""
Heuristic estimates of remaining distance for A*.

All builders return one value per vertex, indexed by vertex id, ready to be
passed as `heuristic_values` to a_star_path_finding().
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def zero_heuristic(number_of_vertices: int) -> list[float]:
    """
    Heuristic that estimates 0 everywhere.

    Always admissible; A* then expands vertices exactly like Dijkstra.
    """
    return [0.0] * number_of_vertices


def euclidean_heuristic(
    positions: Sequence[Sequence[float]] | np.ndarray,
    target_id: int,
    scale: float = 1.0,
) -> list[float]:
    """
    Straight-line distance from every vertex to the target.

    Admissible as long as no edge weight is smaller than `scale` times the
    straight-line distance between its endpoints (e.g. road lengths with
    scale=1, or travel times with scale=1/max_speed).

    Args:
        positions: (n, d) coordinates, row i belongs to vertex i
        target_id: Id of the target vertex
        scale: Multiplier applied to each distance

    Returns:
        n heuristic values

    Raises:
        ValueError: If positions isn't 2-dimensional or target_id is out of range
    """
    coords = np.asarray(positions, dtype=np.float64)
    if coords.ndim != 2:
        raise ValueError(f"Positions must be an (n, d) array, got shape {coords.shape}")
    if not 0 <= target_id < len(coords):
        raise ValueError(f"Target {target_id} out of range [0, {len(coords)})")

    distances = np.linalg.norm(coords - coords[target_id], axis=1) * scale
    return distances.tolist()
