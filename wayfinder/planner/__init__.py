"""
Planner module.

Provides route execution and results:
- RoutePlanner: Runs solvers on a graph, timing and labelling the output
- RouteResult: Complete record of one run
"""

from wayfinder.planner.engine import RoutePlanner
from wayfinder.planner.state import RouteResult

__all__ = [
    "RoutePlanner",
    "RouteResult",
]
