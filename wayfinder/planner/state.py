"""
Route result dataclass produced by the planner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class RouteResult:
    """
    Complete record of one solver run.

    Attributes:
        solver_name: Name of the solver that produced the route
        start: Source node index
        end: Target node index
        path: Node indices from start to end (empty if not found)
        found: Whether a path exists
        cost: Total edge weight along the path (None if not found)
        elapsed_ms: Wall-clock time spent in the solver (milliseconds)
        labels: Display label for each node in path
        timestamp: When the route was computed
    """

    solver_name: str
    start: int
    end: int
    path: list[int]
    found: bool
    cost: float | None
    elapsed_ms: float
    labels: list[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, None if not found."""
        return len(self.path) - 1 if self.found else None

    def format_path(self, sep: str = " -> ") -> str:
        """Join the path labels (or raw indices when unlabelled)."""
        parts = self.labels or [str(node) for node in self.path]
        return sep.join(parts)
