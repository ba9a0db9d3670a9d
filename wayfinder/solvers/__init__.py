"""
Solvers module.

Provides interchangeable route-finding strategies:
- BFSSolver: Fewest steps
- DFSSolver: Any path, depth first
- DijkstraSolver: Minimum total weight
"""

from wayfinder.solvers.base import Solver
from wayfinder.solvers.unweighted import BFSSolver, DFSSolver
from wayfinder.solvers.weighted import DijkstraSolver

__all__ = [
    "Solver",
    "BFSSolver",
    "DFSSolver",
    "DijkstraSolver",
    "SOLVER_NAMES",
    "get_solver",
]

SOLVER_NAMES = ("bfs", "dfs", "dijkstra")


def get_solver(name: str, **kwargs) -> Solver:
    """
    Get a solver by name.

    Args:
        name: Solver identifier (bfs, dfs, dijkstra)
        **kwargs: Passed to the solver constructor (e.g., tie_break)

    Returns:
        Instantiated solver

    Raises:
        ValueError: If solver name is unknown
    """
    solvers = {
        "bfs": BFSSolver,
        "dfs": DFSSolver,
        "dijkstra": DijkstraSolver,
    }

    if name not in solvers:
        available = ", ".join(solvers.keys())
        raise ValueError(f"Unknown solver '{name}'. Available: {available}")

    # Only Dijkstra takes options
    if name == "dijkstra":
        return DijkstraSolver(**kwargs)

    return solvers[name]()
