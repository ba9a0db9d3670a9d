"""
Traversal module.

Provides the search algorithms over a Graph:
- bfs: Fewest-edges path between two nodes
- dfs: Reachability and some path between two nodes
- dijkstra: Minimum-cost distances from one node to all others
- reconstruct_path: Predecessor array -> ordered node list
"""

from wayfinder.search.bfs import bfs
from wayfinder.search.dfs import dfs
from wayfinder.search.dijkstra import dijkstra
from wayfinder.search.path import path_cost, reconstruct_path
from wayfinder.search.state import (
    NO_PREDECESSOR,
    UNREACHABLE,
    SearchResult,
    ShortestPaths,
)

__all__ = [
    "bfs",
    "dfs",
    "dijkstra",
    "reconstruct_path",
    "path_cost",
    "NO_PREDECESSOR",
    "UNREACHABLE",
    "SearchResult",
    "ShortestPaths",
]
