"""
Adjacency-list graph over integer node indices.

Nodes are the integers [0, num_nodes). Each node owns an ordered list of
outgoing edges that can only grow. Neighbour iteration yields the most
recently added edge first.

Usage:
    from wayfinder.graph import Graph, build_graph

    graph = Graph(3)
    graph.add_edge(0, 1, 10)
    graph.add_undirected_edge(1, 2)
    list(graph.neighbors(1))   # [Edge(dest=2, weight=1)]

    graph = build_graph(3, [(0, 1, 10), (1, 2, 5), (0, 2, 20)])
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from numbers import Integral
from typing import NamedTuple

from wayfinder.config import DEFAULT_EDGE_WEIGHT
from wayfinder.exceptions import AllocationError, BoundsError, InvalidWeightError

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    """An outgoing edge as stored in a node's adjacency list."""

    dest: int
    weight: float = DEFAULT_EDGE_WEIGHT


class Neighbors:
    """
    Restartable view over one node's outgoing edges.

    Iteration order is newest edge first. Each call to iter() starts a
    fresh pass over the list as it is at that moment.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: list[Edge]) -> None:
        self._edges = edges

    def __iter__(self) -> Iterator[Edge]:
        return reversed(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"Neighbors({list(self)!r})"


class Graph:
    """
    Directed, optionally weighted graph with a fixed node count.

    Attributes:
        num_nodes: Number of nodes, fixed at construction
        edge_count: Number of directed edges inserted so far
    """

    def __init__(self, num_nodes: int) -> None:
        """
        Allocate empty adjacency lists for ``num_nodes`` nodes.

        Raises:
            AllocationError: If the node count is invalid or storage
                cannot be obtained
        """
        if isinstance(num_nodes, bool) or not isinstance(num_nodes, Integral) or num_nodes < 0:
            raise AllocationError(f"Cannot allocate a graph with {num_nodes!r} nodes")
        try:
            self._adjacency: list[list[Edge]] = [[] for _ in range(num_nodes)]
            self._names: list[str | None] = [None] * num_nodes
        except MemoryError as e:
            raise AllocationError(f"Out of memory allocating {num_nodes:,} nodes") from e

        self._name_to_idx: dict[str, int] = {}
        self._num_nodes = int(num_nodes)
        self._edge_count = 0

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __len__(self) -> int:
        return self._num_nodes

    def __repr__(self) -> str:
        return f"Graph(num_nodes={self._num_nodes}, edge_count={self._edge_count})"

    def check_node(self, node: int) -> int:
        """Return ``node`` as an int, or raise BoundsError if it is out of range."""
        if isinstance(node, bool) or not isinstance(node, Integral) or not 0 <= node < self._num_nodes:
            raise BoundsError(f"Node {node!r} out of range [0, {self._num_nodes})")
        return int(node)

    # =========================================================================
    # Construction
    # =========================================================================

    def add_edge(self, src: int, dest: int, weight: float = DEFAULT_EDGE_WEIGHT) -> None:
        """Append a directed edge ``src -> dest``."""
        src = self.check_node(src)
        dest = self.check_node(dest)
        if not weight >= 0:
            raise InvalidWeightError(
                f"Edge {src} -> {dest} has invalid weight {weight}, must be non-negative"
            )
        self._adjacency[src].append(Edge(dest, weight))
        self._edge_count += 1

    def add_undirected_edge(self, u: int, v: int, weight: float = DEFAULT_EDGE_WEIGHT) -> None:
        """Insert ``u -> v`` and ``v -> u`` with the same weight."""
        self.check_node(u)
        self.check_node(v)
        self.add_edge(u, v, weight)
        self.add_edge(v, u, weight)

    def set_name(self, node: int, name: str) -> None:
        """
        Attach a display name to a node.

        Names are write-once and unique across the graph.

        Raises:
            ValueError: If the node is already named or the name is taken
        """
        node = self.check_node(node)
        current = self._names[node]
        if current is not None:
            raise ValueError(f"Node {node} is already named {current!r}")
        owner = self._name_to_idx.get(name)
        if owner is not None:
            raise ValueError(f"Name {name!r} already belongs to node {owner}")
        self._names[node] = name
        self._name_to_idx[name] = node

    # =========================================================================
    # Accessors
    # =========================================================================

    def neighbors(self, node: int) -> Neighbors:
        """Outgoing edges of ``node``, most recently added first."""
        self.check_node(node)
        return Neighbors(self._adjacency[node])

    def name(self, node: int) -> str | None:
        """Display name of ``node``, or None if it was never named."""
        self.check_node(node)
        return self._names[node]

    def index_of(self, name: str) -> int | None:
        """Node index for a display name, or None if not found."""
        return self._name_to_idx.get(name)

    def names(self) -> list[str | None]:
        """Display names of all nodes, by index."""
        return list(self._names)

    def has_edge(self, src: int, dest: int) -> bool:
        """Check whether at least one ``src -> dest`` edge exists."""
        self.check_node(dest)
        return any(edge.dest == dest for edge in self.neighbors(src))

    def edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield every edge as ``(src, dest, weight)``, grouped by source."""
        for src in range(self._num_nodes):
            for edge in self.neighbors(src):
                yield src, edge.dest, edge.weight


def build_graph(
    num_nodes: int,
    edges: Iterable[Sequence],
    *,
    undirected: bool = False,
    names: Sequence[str] | None = None,
) -> Graph:
    """
    Build a graph from an edge list.

    Args:
        num_nodes: Number of nodes
        edges: ``(src, dest)`` or ``(src, dest, weight)`` tuples
        undirected: Insert every edge in both directions
        names: Optional display names, one per node from index 0

    Returns:
        The populated Graph
    """
    graph = Graph(num_nodes)

    if names is not None:
        if len(names) > num_nodes:
            raise BoundsError(f"{len(names)} names given for {num_nodes} nodes")
        for idx, name in enumerate(names):
            graph.set_name(idx, name)

    insert = graph.add_undirected_edge if undirected else graph.add_edge
    for edge in edges:
        if len(edge) == 2:
            src, dest = edge
            insert(src, dest)
        elif len(edge) == 3:
            src, dest, weight = edge
            insert(src, dest, weight)
        else:
            raise ValueError(f"Edge must be (src, dest[, weight]), got {edge!r}")

    logger.debug(f"Built {graph!r}")
    return graph
