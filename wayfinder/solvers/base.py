"""
Solver base class for route-finding strategies.

All solvers implement find_path() to turn a graph and two endpoints into
an ordered list of nodes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wayfinder.graph.core import Graph


class Solver(ABC):
    """
    Abstract base class for route-finding solvers.

    Each solver wraps one traversal algorithm behind the same call so the
    planner can run and compare them interchangeably.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the solver (e.g., 'bfs', 'dijkstra')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the solver's strategy."""
        ...

    @property
    def weighted(self) -> bool:
        """Whether the solver minimises total edge weight rather than hops."""
        return False

    @abstractmethod
    def find_path(self, graph: Graph, start: int, end: int) -> list[int]:
        """
        Find a path from start to end.

        Args:
            graph: Graph to search
            start: Source node index
            end: Target node index

        Returns:
            Node indices from start to end inclusive, or [] if no path exists

        Raises:
            BoundsError: If start or end is not a node of the graph
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
