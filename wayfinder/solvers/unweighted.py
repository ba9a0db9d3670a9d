"""
Solvers that ignore edge weights: BFS (fewest hops) and DFS (any path).
"""

from __future__ import annotations

from wayfinder.graph.core import Graph
from wayfinder.search import bfs, dfs, reconstruct_path
from wayfinder.solvers.base import Solver


class BFSSolver(Solver):
    """Breadth-first search. Always returns a fewest-hops path."""

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first search (shortest by number of steps)"

    def find_path(self, graph: Graph, start: int, end: int) -> list[int]:
        found, predecessors = bfs(graph, start, end)
        if not found:
            return []
        return reconstruct_path(predecessors, start, end)


class DFSSolver(Solver):
    """
    Depth-first search.

    Returns the first path found down the deepest branch, which may be
    much longer than the shortest one.
    """

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        return "Depth-first search (some path, not necessarily shortest)"

    def find_path(self, graph: Graph, start: int, end: int) -> list[int]:
        found, predecessors = dfs(graph, start, end)
        if not found:
            return []
        return reconstruct_path(predecessors, start, end)
