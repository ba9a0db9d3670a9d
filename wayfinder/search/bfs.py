"""
Breadth-first search for the fewest-edges path between two nodes.
"""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from wayfinder.graph.core import Graph
from wayfinder.search.state import SearchResult, new_predecessors

logger = logging.getLogger(__name__)


def bfs(graph: Graph, start: int, end: int) -> SearchResult:
    """
    Find a shortest (fewest edges) path using BFS.

    The search stops the first time ``end`` is dequeued. Neighbours are
    enqueued in adjacency order, so ties between equally short paths are
    decided by the order edges were added to the graph.

    Args:
        graph: Graph to search (edge weights are ignored)
        start: Source node index
        end: Target node index

    Returns:
        SearchResult with the found flag and predecessor array

    Raises:
        BoundsError: If start or end is not a node of the graph
    """
    graph.check_node(start)
    graph.check_node(end)

    visited = np.zeros(graph.num_nodes, dtype=bool)
    predecessors = new_predecessors(graph.num_nodes)

    queue = deque([start])
    visited[start] = True
    expanded = 0

    while queue:
        current = queue.popleft()
        if current == end:
            logger.debug(f"BFS reached {end} from {start} after expanding {expanded} nodes")
            return SearchResult(True, predecessors)

        expanded += 1
        for dest, _ in graph.neighbors(current):
            if visited[dest]:
                continue
            visited[dest] = True
            predecessors[dest] = current
            queue.append(dest)

    logger.debug(f"BFS exhausted {expanded} nodes without reaching {end} from {start}")
    return SearchResult(False, predecessors)
