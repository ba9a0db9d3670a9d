"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from wayfinder.graph import Graph, Maze, build_graph, build_maze_graph, build_transit_graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def tiny_maze_lines() -> list[str]:
    """A 4x4 maze: S at (1, 1), E at (2, 2), open cells at (1, 2) and (2, 1)."""
    return [
        "####",
        "#S.#",
        "#.E#",
        "####",
    ]


@pytest.fixture
def sample_maze_lines() -> list[str]:
    """The 10x10 demo maze; shortest S -> E route is 13 steps."""
    return [
        "##########",
        "#S #   #E#",
        "#  # # # #",
        "# ## #   #",
        "#      # #",
        "###### # #",
        "#        #",
        "# ###### #",
        "#        #",
        "##########",
    ]


@pytest.fixture
def tiny_maze_graph(tiny_maze_lines):
    return build_maze_graph(Maze.parse(tiny_maze_lines))


@pytest.fixture
def sample_maze_graph(sample_maze_lines):
    return build_maze_graph(Maze.parse(sample_maze_lines))


@pytest.fixture
def triangle_graph() -> Graph:
    """A=0, B=1, C=2 with A->B 10, B->C 5, A->C 20."""
    return build_graph(3, [(0, 1, 10), (1, 2, 5), (0, 2, 20)], names=["A", "B", "C"])


@pytest.fixture
def disconnected_graph() -> Graph:
    """0 -> 1 -> 2, and node 3 with no edges at all."""
    return build_graph(4, [(0, 1), (1, 2)])


@pytest.fixture
def sample_stations() -> list[str]:
    return [
        "Centro",
        "Rodoviaria",
        "Shopping",
        "Parque",
        "Hospital",
        "Aeroporto",
        "Praia",
        "Bairro Norte",
        "Bairro Sul",
        "Terminal Central",
    ]


@pytest.fixture
def sample_connections() -> list[tuple[int, int, int]]:
    """Directed travel times in minutes, by station index."""
    return [
        (0, 1, 10),
        (0, 2, 15),
        (1, 0, 12),
        (1, 3, 20),
        (2, 4, 8),
        (3, 5, 25),
        (4, 1, 7),
        (4, 6, 18),
        (5, 9, 30),
        (6, 9, 22),
        (7, 0, 5),
        (8, 0, 8),
        (9, 5, 28),
        (9, 6, 20),
        (3, 8, 10),
    ]


@pytest.fixture
def sample_network(sample_stations, sample_connections):
    return build_transit_graph(sample_stations, sample_connections)
