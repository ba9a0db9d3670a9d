"""
Dijkstra's single-source shortest paths, linear-scan variant.

Selection scans every node on each round (O(N^2) overall) instead of
using a priority queue. Node counts here are small, and the scan makes
the tie-break between equally distant nodes explicit.
"""

from __future__ import annotations

import logging

import numpy as np

from wayfinder.config import DIJKSTRA_TIE_BREAK, TIE_BREAK_POLICIES
from wayfinder.graph.core import Graph
from wayfinder.search.state import UNREACHABLE, ShortestPaths, new_predecessors

logger = logging.getLogger(__name__)


def _select_closest(distances: np.ndarray, visited: np.ndarray, tie_break: str) -> int | None:
    """
    Pick the unvisited node with the smallest finite distance.

    With ``tie_break="last"`` the highest index among equal minima wins,
    with ``"first"`` the lowest. Returns None when no unvisited node is
    reachable.
    """
    pending = np.where(visited, UNREACHABLE, distances)
    best = pending.min()
    if not np.isfinite(best):
        return None
    candidates = np.flatnonzero(pending == best)
    return int(candidates[-1] if tie_break == "last" else candidates[0])


def dijkstra(graph: Graph, start: int, *, tie_break: str | None = None) -> ShortestPaths:
    """
    Compute minimum-cost distances from ``start`` to every node.

    Args:
        graph: Graph with non-negative edge weights
        start: Source node index
        tie_break: "last" or "first"; defaults to config.DIJKSTRA_TIE_BREAK

    Returns:
        ShortestPaths with distance and predecessor arrays for all nodes.
        Unreachable nodes keep an infinite distance and no predecessor.

    Raises:
        BoundsError: If start is not a node of the graph
        ValueError: If the tie-break policy is unknown
    """
    policy = tie_break or DIJKSTRA_TIE_BREAK
    if policy not in TIE_BREAK_POLICIES:
        raise ValueError(
            f"Unknown tie-break policy '{policy}'. Available: {', '.join(TIE_BREAK_POLICIES)}"
        )
    graph.check_node(start)

    n = graph.num_nodes
    distances = np.full(n, UNREACHABLE, dtype=np.float64)
    predecessors = new_predecessors(n)
    visited = np.zeros(n, dtype=bool)
    distances[start] = 0

    settled = 0
    for _ in range(n - 1):
        u = _select_closest(distances, visited, policy)
        if u is None:
            break
        visited[u] = True
        settled += 1

        for dest, weight in graph.neighbors(u):
            candidate = distances[u] + weight
            if not visited[dest] and candidate < distances[dest]:
                distances[dest] = candidate
                predecessors[dest] = u

    reachable = int(np.isfinite(distances).sum())
    logger.debug(
        f"Dijkstra from {start}: settled {settled} nodes, {reachable}/{n} reachable "
        f"(tie-break={policy})"
    )
    return ShortestPaths(distances, predecessors)
