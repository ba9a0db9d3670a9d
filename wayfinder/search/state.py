"""
Result types produced by the traversal algorithms.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

# Predecessor sentinel: the node was never reached (or is the start)
NO_PREDECESSOR = -1

# Distance sentinel: the node is unreachable from the start
UNREACHABLE = np.inf


def new_predecessors(num_nodes: int) -> np.ndarray:
    """Fresh predecessor array with every entry set to NO_PREDECESSOR."""
    return np.full(num_nodes, NO_PREDECESSOR, dtype=np.int64)


class SearchResult(NamedTuple):
    """
    Outcome of a BFS or DFS call.

    Attributes:
        found: Whether the end node was reached
        predecessors: Per-node predecessor index, NO_PREDECESSOR if none
    """

    found: bool
    predecessors: np.ndarray


class ShortestPaths(NamedTuple):
    """
    Outcome of a Dijkstra call: costs from one start to every node.

    Attributes:
        distances: Minimum total weight per node, UNREACHABLE if none
        predecessors: Per-node predecessor on a cheapest path
    """

    distances: np.ndarray
    predecessors: np.ndarray

    def distance_to(self, node: int) -> float:
        return float(self.distances[node])

    def is_reachable(self, node: int) -> bool:
        return bool(np.isfinite(self.distances[node]))
