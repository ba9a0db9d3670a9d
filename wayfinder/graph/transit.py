"""
Named transit networks: stations joined by directed, timed connections.

Connections are inserted exactly as given, so A -> B and B -> A may carry
different travel times, or exist in one direction only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from numbers import Integral

from wayfinder.exceptions import MissingEndpointError
from wayfinder.graph.core import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Connection:
    """
    A directed connection between two stations.

    Attributes:
        source: Station name or index the connection leaves from
        dest: Station name or index the connection arrives at
        weight: Travel time (non-negative)
    """

    source: str | int
    dest: str | int
    weight: float


class TransitNetwork:
    """A graph whose nodes are named stations."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    @property
    def num_stations(self) -> int:
        return self.graph.num_nodes

    def stations(self) -> list[str]:
        """Station names in index order."""
        return [self.label(idx) for idx in range(self.num_stations)]

    def label(self, index: int) -> str:
        name = self.graph.name(index)
        return name if name is not None else f"#{index}"

    def resolve(self, identifier: str | int) -> int:
        """
        Turn a station name or index into a node index.

        Integers are indices. Text matches an exact station name first,
        then is read as an index if it is all digits, then matches names
        case-insensitively.

        Raises:
            BoundsError: If an index is out of range
            MissingEndpointError: If no station has that name, or the
                identifier is neither text nor an integer
        """
        if isinstance(identifier, Integral):
            return self.graph.check_node(identifier)
        if not isinstance(identifier, str):
            raise MissingEndpointError(
                f"Station must be a name or an integer index, got {identifier!r}"
            )

        text = identifier.strip()
        idx = self.graph.index_of(text)
        if idx is not None:
            return idx

        if text.isdigit():
            return self.graph.check_node(int(text))

        folded = text.casefold()
        for candidate, name in enumerate(self.graph.names()):
            if name is not None and name.casefold() == folded:
                return candidate

        raise MissingEndpointError(f"Unknown station '{identifier}'")

    def __repr__(self) -> str:
        return f"TransitNetwork(stations={self.num_stations}, connections={self.graph.edge_count})"


def build_transit_graph(
    stations: Sequence[str],
    connections: Iterable[Connection | Sequence],
) -> TransitNetwork:
    """
    Build a transit network.

    Args:
        stations: Station names; a station's position is its node index
        connections: Connection objects or ``(source, dest, weight)`` triples,
            endpoints given by name or index

    Returns:
        TransitNetwork wrapping the populated graph
    """
    graph = Graph(len(stations))
    for idx, name in enumerate(stations):
        graph.set_name(idx, name)

    network = TransitNetwork(graph)
    for conn in connections:
        if not isinstance(conn, Connection):
            conn = Connection(*conn)
        graph.add_edge(network.resolve(conn.source), network.resolve(conn.dest), conn.weight)

    logger.debug(f"Built {network!r}")
    return network
