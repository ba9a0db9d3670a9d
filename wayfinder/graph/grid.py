"""
Maze grids and the mapping between grid cells and graph nodes.

A cell at (row, col) is node ``row * num_cols + col``. Walls keep their
index but never receive edges, so every index maps back to a cell.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from wayfinder.config import DIRECTIONS, END, PATH_MARK, START, WALL
from wayfinder.exceptions import BoundsError, InvalidMazeError, MissingEndpointError
from wayfinder.graph.core import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    """A (row, col) position in the grid."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


def coord_to_index(row: int, col: int, num_cols: int) -> int:
    """Flatten a (row, col) pair into a node index."""
    return row * num_cols + col


def index_to_coord(index: int, num_cols: int) -> Cell:
    """Expand a node index back into its cell."""
    return Cell(index // num_cols, index % num_cols)


def is_valid(row: int, col: int, num_rows: int, num_cols: int) -> bool:
    """Check that (row, col) lies inside the grid."""
    return 0 <= row < num_rows and 0 <= col < num_cols


@dataclass(frozen=True)
class Maze:
    """
    A rectangular character grid.

    Attributes:
        rows: One string per grid row, all the same length
        start: Cell marked with START
        end: Cell marked with END
    """

    rows: tuple[str, ...]
    start: Cell
    end: Cell

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_cols(self) -> int:
        return len(self.rows[0])

    @classmethod
    def parse(cls, lines: Iterable[str]) -> Maze:
        """
        Parse maze text.

        Trailing newlines and trailing empty lines are ignored. Lines of
        spaces are open rows.

        Raises:
            InvalidMazeError: If the grid is empty, ragged, or has more
                than one start or end marker
            MissingEndpointError: If the start or end marker is absent
        """
        rows = [line.rstrip("\r\n") for line in lines]
        while rows and rows[-1] == "":
            rows.pop()

        if not rows or not rows[0]:
            raise InvalidMazeError("Maze is empty")

        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidMazeError(
                    f"Maze is not rectangular: row {r} has {len(row)} cells, expected {width}"
                )

        markers: dict[str, list[Cell]] = {START: [], END: []}
        for r, row in enumerate(rows):
            for c, symbol in enumerate(row):
                if symbol in markers:
                    markers[symbol].append(Cell(r, c))

        for symbol, found in markers.items():
            if not found:
                raise MissingEndpointError(f"Maze has no '{symbol}' marker")
            if len(found) > 1:
                cells = ", ".join(str(cell) for cell in found)
                raise InvalidMazeError(f"Maze has {len(found)} '{symbol}' markers: {cells}")

        return cls(rows=tuple(rows), start=markers[START][0], end=markers[END][0])

    def is_open(self, row: int, col: int) -> bool:
        """Whether (row, col) is inside the grid and not a wall."""
        return is_valid(row, col, self.num_rows, self.num_cols) and self.rows[row][col] != WALL

    def render(self, path: Iterable[Cell] = ()) -> str:
        """Draw the maze, marking path cells other than S and E."""
        grid = [list(row) for row in self.rows]
        for cell in path:
            if grid[cell.row][cell.col] not in (START, END):
                grid[cell.row][cell.col] = PATH_MARK
        return "\n".join(" ".join(row) for row in grid)


@dataclass
class MazeGraph:
    """A maze together with the graph built from it."""

    maze: Maze
    graph: Graph

    @property
    def start_node(self) -> int:
        return self.node_of(self.maze.start)

    @property
    def end_node(self) -> int:
        return self.node_of(self.maze.end)

    def node_of(self, cell: Cell) -> int:
        """Node index for a cell."""
        if not is_valid(cell.row, cell.col, self.maze.num_rows, self.maze.num_cols):
            raise BoundsError(f"Cell {cell} is outside the {self.maze.num_rows}x{self.maze.num_cols} maze")
        return coord_to_index(cell.row, cell.col, self.maze.num_cols)

    def cell_of(self, index: int) -> Cell:
        """Cell for a node index."""
        self.graph.check_node(index)
        return index_to_coord(index, self.maze.num_cols)

    def label(self, index: int) -> str:
        return str(self.cell_of(index))


def build_maze_graph(maze: Maze) -> MazeGraph:
    """
    Build the undirected unit-weight graph of a maze.

    Cells are scanned in row-major order and each open neighbour is linked
    in DIRECTIONS order. Every pair of adjacent open cells is therefore
    linked twice (once from each side); the duplicates are kept because
    they fix the neighbour order that BFS and DFS follow.
    """
    graph = Graph(maze.num_rows * maze.num_cols)

    for r in range(maze.num_rows):
        for c in range(maze.num_cols):
            if not maze.is_open(r, c):
                continue
            u = coord_to_index(r, c, maze.num_cols)
            for dr, dc in DIRECTIONS:
                nr, nc = r + dr, c + dc
                if maze.is_open(nr, nc):
                    graph.add_undirected_edge(u, coord_to_index(nr, nc, maze.num_cols))

    logger.debug(
        f"Built maze graph {maze.num_rows}x{maze.num_cols}: {graph.edge_count} directed edges"
    )
    return MazeGraph(maze=maze, graph=graph)
