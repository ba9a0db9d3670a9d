"""
Unit tests for the solver registry and the route planner.
"""

import pytest

from wayfinder.exceptions import BoundsError
from wayfinder.planner import RoutePlanner, RouteResult
from wayfinder.solvers import (
    SOLVER_NAMES,
    BFSSolver,
    DFSSolver,
    DijkstraSolver,
    get_solver,
)


class TestRegistry:
    """Test solver lookup."""

    @pytest.mark.parametrize(
        "name,cls", [("bfs", BFSSolver), ("dfs", DFSSolver), ("dijkstra", DijkstraSolver)]
    )
    def test_get_solver(self, name, cls):
        """Every registered name builds its solver."""
        solver = get_solver(name)
        assert isinstance(solver, cls)
        assert solver.name == name
        assert solver.description

    def test_names_match_registry(self):
        """SOLVER_NAMES lists every solver."""
        assert [get_solver(name).name for name in SOLVER_NAMES] == list(SOLVER_NAMES)

    def test_unknown_solver(self):
        """Should raise ValueError naming the available solvers."""
        with pytest.raises(ValueError, match="Available"):
            get_solver("astar")

    def test_dijkstra_options(self):
        """Dijkstra accepts a tie-break policy."""
        solver = get_solver("dijkstra", tie_break="first")
        assert solver.weighted
        assert not get_solver("bfs").weighted

    def test_repr(self):
        """repr names the class and solver."""
        assert repr(BFSSolver()) == "BFSSolver(name='bfs')"


class TestSolvers:
    """Test solver paths."""

    def test_bfs_solver(self, tiny_maze_graph):
        """BFS solver returns the reconstructed path."""
        path = BFSSolver().find_path(
            tiny_maze_graph.graph, tiny_maze_graph.start_node, tiny_maze_graph.end_node
        )
        assert path == [5, 9, 10]

    def test_not_found_is_empty(self, disconnected_graph):
        """Unreachable targets give an empty path from every solver."""
        for name in SOLVER_NAMES:
            assert get_solver(name).find_path(disconnected_graph, 0, 3) == []

    def test_dijkstra_keeps_table(self, sample_network):
        """The distance table of the last call is kept."""
        solver = DijkstraSolver()
        solver.find_path(sample_network.graph, 0, 9)
        assert solver.last_result.distance_to(4) == 23

    def test_dijkstra_bad_end(self, triangle_graph):
        """Should raise BoundsError for an unknown end."""
        with pytest.raises(BoundsError):
            DijkstraSolver().find_path(triangle_graph, 0, 5)


class TestRoutePlanner:
    """Test planner runs."""

    def test_maze_route(self, tiny_maze_graph):
        """Maze routes carry cell labels and unit costs."""
        planner = RoutePlanner(tiny_maze_graph.graph, labeler=tiny_maze_graph.label)
        result = planner.run(
            BFSSolver(), tiny_maze_graph.start_node, tiny_maze_graph.end_node
        )
        assert isinstance(result, RouteResult)
        assert result.found
        assert result.solver_name == "bfs"
        assert result.hops == 2
        assert result.cost == 2
        assert result.labels == ["(1, 1)", "(2, 1)", "(2, 2)"]
        assert result.format_path() == "(1, 1) -> (2, 1) -> (2, 2)"
        assert result.elapsed_ms >= 0

    def test_transit_route(self, sample_network):
        """Transit routes report total travel time."""
        planner = RoutePlanner(sample_network.graph, labeler=sample_network.label)
        result = planner.run(DijkstraSolver(), 0, 9)
        assert result.cost == 63
        assert result.format_path(" > ") == "Centro > Shopping > Hospital > Praia > Terminal Central"

    def test_no_route(self, disconnected_graph):
        """Missing routes are a result, not an error."""
        result = RoutePlanner(disconnected_graph).run(BFSSolver(), 0, 3)
        assert not result.found
        assert result.path == []
        assert result.cost is None
        assert result.hops is None

    def test_same_start_and_end(self, sample_network):
        """A trip to where you are costs nothing."""
        result = RoutePlanner(sample_network.graph).run(DijkstraSolver(), 4, 4)
        assert result.found
        assert result.path == [4]
        assert result.cost == 0
        assert result.hops == 0

    def test_unlabelled_format(self, triangle_graph):
        """Without a labeler, node indices are shown."""
        result = RoutePlanner(triangle_graph).run(DijkstraSolver(), 0, 2)
        assert result.format_path() == "0 -> 1 -> 2"

    def test_compare(self, sample_maze_graph):
        """compare runs each solver; BFS is never longer than DFS."""
        planner = RoutePlanner(sample_maze_graph.graph, labeler=sample_maze_graph.label)
        bfs_result, dfs_result, dijkstra_result = planner.compare(
            [BFSSolver(), DFSSolver(), DijkstraSolver()],
            sample_maze_graph.start_node,
            sample_maze_graph.end_node,
        )
        assert bfs_result.hops == 13
        assert dfs_result.hops >= bfs_result.hops
        assert dijkstra_result.cost == 13

    def test_bad_endpoint(self, triangle_graph):
        """Should raise BoundsError before running the solver."""
        with pytest.raises(BoundsError):
            RoutePlanner(triangle_graph).run(BFSSolver(), 0, 9)
