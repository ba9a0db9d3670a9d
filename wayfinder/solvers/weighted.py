"""
Minimum-cost solver backed by Dijkstra's algorithm.
"""

from __future__ import annotations

from wayfinder.graph.core import Graph
from wayfinder.search import dijkstra, reconstruct_path
from wayfinder.search.state import ShortestPaths
from wayfinder.solvers.base import Solver


class DijkstraSolver(Solver):
    """
    Dijkstra shortest paths.

    Keeps the distance table of the most recent call so callers can read
    costs to other destinations from the same start.
    """

    def __init__(self, tie_break: str | None = None) -> None:
        """
        Initialize the solver.

        Args:
            tie_break: "last" or "first"; None uses the configured default
        """
        self._tie_break = tie_break
        self.last_result: ShortestPaths | None = None

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Dijkstra (minimum total edge weight)"

    @property
    def weighted(self) -> bool:
        return True

    def find_path(self, graph: Graph, start: int, end: int) -> list[int]:
        graph.check_node(end)
        self.last_result = dijkstra(graph, start, tie_break=self._tie_break)
        if not self.last_result.is_reachable(end):
            return []
        return reconstruct_path(self.last_result.predecessors, start, end)
