"""
Loaders for maze text files and transit network documents.

Usage:
    from wayfinder.data import load_maze, load_network

    maze = load_maze("data/maze.txt")
    network = load_network("data/transit.json")      # or .msgpack
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from wayfinder.exceptions import InvalidNetworkError
from wayfinder.graph.grid import Maze
from wayfinder.graph.transit import Connection, TransitNetwork, build_transit_graph

logger = logging.getLogger(__name__)

NETWORK_SUFFIXES = (".json", ".msgpack")


def load_maze(path: str | Path) -> Maze:
    """Read and parse a maze text file."""
    path = Path(path)
    logger.info(f"Loading maze from {path}...")
    with open(path, encoding="utf-8") as f:
        maze = Maze.parse(f)
    logger.info(f"Loaded {maze.num_rows}x{maze.num_cols} maze")
    return maze


def _read_document(path: Path) -> Any:
    """Decode a network document according to its suffix."""
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    if suffix == ".msgpack":
        with open(path, "rb") as f:
            return msgpack.load(f)
    raise ValueError(
        f"Unsupported network file '{path.name}'. Expected one of: {', '.join(NETWORK_SUFFIXES)}"
    )


def _parse_connection(raw: Any, position: int) -> Connection:
    """Accept either [source, dest, weight] or {"from", "to", "weight"}."""
    if isinstance(raw, dict):
        try:
            return Connection(raw["from"], raw["to"], raw["weight"])
        except KeyError as e:
            raise InvalidNetworkError(f"Connection {position} is missing field {e}") from e
    if isinstance(raw, (list, tuple)) and len(raw) == 3:
        return Connection(*raw)
    raise InvalidNetworkError(
        f"Connection {position} must be [from, to, weight] or an object, got {raw!r}"
    )


def parse_network(document: Any) -> TransitNetwork:
    """
    Build a TransitNetwork from a decoded document.

    Expected shape:
        {"stations": ["A", "B", ...],
         "connections": [["A", "B", 10], {"from": 1, "to": 0, "weight": 12}, ...]}
    """
    if not isinstance(document, dict):
        raise InvalidNetworkError("Network document must be an object")
    for key in ("stations", "connections"):
        if key not in document:
            raise InvalidNetworkError(f"Network document is missing '{key}'")

    stations = document["stations"]
    connections = [
        _parse_connection(raw, position)
        for position, raw in enumerate(document["connections"])
    ]
    return build_transit_graph(stations, connections)


def load_network(path: str | Path) -> TransitNetwork:
    """Read a transit network from a .json or .msgpack file."""
    path = Path(path)
    logger.info(f"Loading transit network from {path}...")
    network = parse_network(_read_document(path))
    logger.info(
        f"Loaded {network.num_stations:,} stations with "
        f"{network.graph.edge_count:,} connections"
    )
    return network
