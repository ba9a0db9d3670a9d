"""
Wayfinder.

Path finding over mazes and weighted transit networks: BFS, DFS and
Dijkstra on an adjacency-list graph, with path reconstruction.
"""

from wayfinder.graph import Graph, build_graph
from wayfinder.search import bfs, dfs, dijkstra, reconstruct_path

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "build_graph",
    "bfs",
    "dfs",
    "dijkstra",
    "reconstruct_path",
]
