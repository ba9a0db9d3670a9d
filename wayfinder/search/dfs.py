"""
Depth-first search: reachability plus *a* path, not necessarily shortest.
"""

from __future__ import annotations

import logging

import numpy as np

from wayfinder.graph.core import Graph
from wayfinder.search.state import SearchResult, new_predecessors

logger = logging.getLogger(__name__)


def dfs(graph: Graph, start: int, end: int) -> SearchResult:
    """
    Find a path from ``start`` to ``end`` by depth-first search.

    Uses an explicit stack of neighbour iterators, one per node on the
    current branch, so deep graphs do not hit the recursion limit. Visit
    order matches the recursive formulation: the first unvisited neighbour
    in adjacency order is entered, and the search returns the moment
    ``end`` is reached without trying further siblings.

    Returns:
        SearchResult with the found flag and predecessor array

    Raises:
        BoundsError: If start or end is not a node of the graph
    """
    graph.check_node(start)
    graph.check_node(end)

    visited = np.zeros(graph.num_nodes, dtype=bool)
    predecessors = new_predecessors(graph.num_nodes)

    visited[start] = True
    if start == end:
        return SearchResult(True, predecessors)

    stack = [(start, iter(graph.neighbors(start)))]
    max_depth = 1

    while stack:
        current, remaining = stack[-1]
        for dest, _ in remaining:
            if visited[dest]:
                continue
            visited[dest] = True
            predecessors[dest] = current
            if dest == end:
                logger.debug(f"DFS reached {end} from {start} at depth {len(stack)}")
                return SearchResult(True, predecessors)
            stack.append((dest, iter(graph.neighbors(dest))))
            max_depth = max(max_depth, len(stack))
            break
        else:
            stack.pop()

    logger.debug(f"DFS found no path from {start} to {end} (max depth {max_depth})")
    return SearchResult(False, predecessors)
