#!/usr/bin/env python3
"""
Shortest path CLI - run Dijkstra or A* on the bundled example graph.

Usage:
    python scripts/find_path.py --source A --target F
    python scripts/find_path.py --source C --algorithm dijkstra
    python scripts/find_path.py --source A --target F --algorithm astar --verbose
    python scripts/find_path.py --source A --target D --directed

Example graph (undirected unless --directed):

                   (2)
            B ------------ C
       (5)/                 \\(3)
         /        (9)        \\
        A ------------------- D
         \\                   /
       (2)\\                 /(2)
            E ------------ F
                   (3)

Algorithms:
    dijkstra - distances to every vertex (path to --target if given)
    astar    - path to --target, guided by the bundled heuristic (only
               admissible for target F; zero heuristic otherwise)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathheap.config import (  # noqa: E402
    EXAMPLE_HEURISTIC,
    EXAMPLE_LABELS,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from pathheap.graph import (  # noqa: E402
    GraphEdgeDirection,
    a_star_path_finding,
    build_example_graph,
    find_dijkstra_shortest_path,
)
from pathheap.heuristics import zero_heuristic  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find shortest paths in the example graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--source",
        type=str,
        required=True,
        choices=EXAMPLE_LABELS,
        help="Source vertex label",
    )
    parser.add_argument(
        "--target",
        type=str,
        default=None,
        choices=EXAMPLE_LABELS,
        help="Target vertex label (required for astar)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default="astar",
        choices=["dijkstra", "astar"],
        help="Search algorithm (default: astar)",
    )
    parser.add_argument(
        "--directed",
        action="store_true",
        help="Treat example edges as directed",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if args.algorithm == "astar" and args.target is None:
        print("Error: --target is required for astar", file=sys.stderr)
        return 2

    direction = GraphEdgeDirection.DIRECTED if args.directed else GraphEdgeDirection.UNDIRECTED
    graph = build_example_graph(direction)
    source_id = EXAMPLE_LABELS.index(args.source)

    print("\n" + "=" * 60)
    print(f"  Graph:     {graph!r}")
    print(f"  Algorithm: {args.algorithm}")
    print(f"  Source:    {args.source}")
    if args.target:
        print(f"  Target:    {args.target}")
    print("=" * 60 + "\n")

    if args.algorithm == "dijkstra":
        result = find_dijkstra_shortest_path(graph, source_id)
        labels = [args.target] if args.target else EXAMPLE_LABELS
        for label in labels:
            path = result.path_to(label)
            if path is None:
                print(f"  {label}: unreachable")
            else:
                print(f"  {label}: {result.distance_to(label):g} via {' -> '.join(path)}")
        return 0 if all(result.is_reachable(label) for label in labels) else 1

    target_id = EXAMPLE_LABELS.index(args.target)
    # The bundled estimates are only admissible towards F
    if args.target == EXAMPLE_LABELS[-1]:
        heuristic = EXAMPLE_HEURISTIC
    else:
        heuristic = zero_heuristic(len(graph))

    path_result = a_star_path_finding(graph, source_id, target_id, heuristic)
    if not path_result.found:
        print(f"No path from '{args.source}' to '{args.target}'")
        return 1

    print(f"Path ({path_result.hops} edges, distance {path_result.distance:g}):")
    for i, label in enumerate(path_result.path):
        marker = " (SOURCE)" if i == 0 else " (TARGET)" if label == args.target else ""
        print(f"  {i}. {label}{marker}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
