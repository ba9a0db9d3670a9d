"""
Graph module.

Provides the adjacency-list graph and the builders that feed it:
- Graph / build_graph: Directed, optionally weighted graph over int nodes
- Maze / build_maze_graph: Grid mazes and the cell <-> node mapping
- TransitNetwork / build_transit_graph: Named stations with timed connections
"""

from wayfinder.graph.core import Edge, Graph, Neighbors, build_graph
from wayfinder.graph.grid import (
    Cell,
    Maze,
    MazeGraph,
    build_maze_graph,
    coord_to_index,
    index_to_coord,
    is_valid,
)
from wayfinder.graph.transit import Connection, TransitNetwork, build_transit_graph

__all__ = [
    "Edge",
    "Graph",
    "Neighbors",
    "build_graph",
    "Cell",
    "Maze",
    "MazeGraph",
    "build_maze_graph",
    "coord_to_index",
    "index_to_coord",
    "is_valid",
    "Connection",
    "TransitNetwork",
    "build_transit_graph",
]
