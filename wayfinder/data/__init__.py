"""
Data loading module.

Reads maze and transit network input files.

Usage:
    from wayfinder.data import load_maze, load_network

    load_maze("data/maze.txt")
    load_network("data/transit.json")
"""

from wayfinder.data.loader import load_maze, load_network, parse_network

__all__ = ["load_maze", "load_network", "parse_network"]
