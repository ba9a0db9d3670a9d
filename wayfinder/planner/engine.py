"""
Route planner that runs solvers against a graph and packages the results.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from wayfinder.planner.state import RouteResult
from wayfinder.search.path import path_cost

if TYPE_CHECKING:
    from wayfinder.graph.core import Graph
    from wayfinder.solvers.base import Solver

logger = logging.getLogger(__name__)


class RoutePlanner:
    """
    Runs route queries on a single, read-only graph.

    The planner handles:
    - Validating endpoints
    - Timing each solver call
    - Computing the path cost by walking the graph
    - Labelling nodes for display (cells, station names)
    """

    def __init__(self, graph: Graph, labeler: Callable[[int], str] | None = None) -> None:
        """
        Initialize the planner.

        Args:
            graph: Graph every query runs against
            labeler: Maps a node index to its display label; defaults to str
        """
        self._graph = graph
        self._labeler = labeler or str

    @property
    def graph(self) -> Graph:
        return self._graph

    def run(self, solver: Solver, start: int, end: int) -> RouteResult:
        """
        Find a route from start to end with one solver.

        Returns:
            RouteResult; ``found`` is False when no path exists

        Raises:
            BoundsError: If start or end is not a node of the graph
        """
        self._graph.check_node(start)
        self._graph.check_node(end)

        started = time.perf_counter()
        path = solver.find_path(self._graph, start, end)
        elapsed_ms = (time.perf_counter() - started) * 1000

        found = bool(path)
        cost = path_cost(self._graph, path) if found else None
        labels = [self._labeler(node) for node in path]

        result = RouteResult(
            solver_name=solver.name,
            start=start,
            end=end,
            path=path,
            found=found,
            cost=cost,
            elapsed_ms=elapsed_ms,
            labels=labels,
        )

        if found:
            logger.info(
                f"{solver.name}: {result.hops} steps, cost {cost:g} "
                f"({elapsed_ms:.2f} ms): {result.format_path()}"
            )
        else:
            logger.warning(
                f"{solver.name}: no path from {self._labeler(start)} to {self._labeler(end)}"
            )
        return result

    def compare(self, solvers: Iterable[Solver], start: int, end: int) -> list[RouteResult]:
        """Run several solvers on the same query."""
        return [self.run(solver, start, end) for solver in solvers]
