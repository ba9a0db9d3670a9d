"""
Path reconstruction from predecessor arrays.
"""

from __future__ import annotations

from collections.abc import Sequence

from wayfinder.exceptions import BoundsError, CycleDetectedError
from wayfinder.graph.core import Graph
from wayfinder.search.state import NO_PREDECESSOR


def reconstruct_path(predecessors: Sequence[int], start: int, end: int) -> list[int]:
    """
    Walk predecessors back from ``end`` to ``start``.

    Returns:
        Node indices from start to end inclusive; ``[start]`` when the two
        are equal; ``[]`` when the chain never reaches ``start``

    Raises:
        BoundsError: If start or end is outside the array
        CycleDetectedError: If the walk takes more steps than there are
            nodes, meaning the predecessors loop
    """
    n = len(predecessors)
    for node in (start, end):
        if not 0 <= node < n:
            raise BoundsError(f"Node {node} out of range [0, {n})")

    if start == end:
        return [start]

    path = [end]
    current = end
    while current != start:
        current = int(predecessors[current])
        if current == NO_PREDECESSOR:
            return []
        if not 0 <= current < n:
            raise BoundsError(f"Predecessor {current} out of range [0, {n})")
        path.append(current)
        if len(path) > n:
            raise CycleDetectedError(
                f"Predecessor chain from {end} exceeds {n} nodes without reaching {start}"
            )

    path.reverse()
    return path


def path_cost(graph: Graph, path: Sequence[int]) -> float:
    """
    Total weight of a path, walked edge by edge.

    Where parallel edges exist, the cheapest one is used.

    Raises:
        ValueError: If a consecutive pair is not joined by an edge
    """
    total = 0
    for src, dest in zip(path, path[1:]):
        weights = [edge.weight for edge in graph.neighbors(src) if edge.dest == dest]
        if not weights:
            raise ValueError(f"Path steps over missing edge {src} -> {dest}")
        total += min(weights)
    return total
