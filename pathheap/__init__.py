"""
Indexed binary heaps and shortest-path search.

A small teaching library: a binary heap augmented with an identity index
for O(log n) decrease-key and removal, and the Dijkstra and A* searches
built on top of it over an adjacency-list graph.
"""

__version__ = "0.1.0"
