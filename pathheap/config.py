"""
Configuration constants for pathheap.

All tunable defaults and the bundled example graph are defined here.
Nothing is read from disk; only the log level comes from the environment.
"""

import math
import os

# =============================================================================
# Search Configuration
# =============================================================================

# Distance assigned to vertices that have not been reached yet
INFINITY = math.inf

# Weight used by Graph.add_edge when none is given
DEFAULT_EDGE_WEIGHT = 0

# =============================================================================
# Example Graph
# =============================================================================

#               (2)
#        [1]B ------- C[2]
#       (5)/           \
#         /     (9)     \(3)
#     [0]A ------------- D[3]
#        \              /
#      (2)\            /(2)
#       [4]E -------- F[5]
#               (3)

EXAMPLE_LABELS = ["A", "B", "C", "D", "E", "F"]

# (source, target, weight) triples
EXAMPLE_EDGES = [
    (0, 1, 5),
    (0, 3, 9),
    (0, 4, 2),
    (1, 2, 2),
    (2, 3, 3),
    (3, 5, 2),
    (4, 5, 3),
]

# Admissible estimates of the remaining distance to F
EXAMPLE_HEURISTIC = [3, 3, 3, 1, 2, 0]

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
