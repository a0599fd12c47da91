"""
Heuristics module.

Provides heuristic functions for guiding A*:
- zero_heuristic: Always 0 (Dijkstra baseline)
- euclidean_heuristic: Straight-line distance from vertex coordinates
"""

from pathheap.heuristics.geometric import euclidean_heuristic, zero_heuristic

__all__ = ["euclidean_heuristic", "zero_heuristic"]
