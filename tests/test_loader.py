"""
Unit tests for the maze and network loaders.
"""

import json

import msgpack
import pytest

from wayfinder import config
from wayfinder.config import (
    DEFAULT_MAZE_PATH,
    DEFAULT_NETWORK_PATH,
    get_missing_data_files,
    validate_data_files,
)
from wayfinder.data import load_maze, load_network, parse_network
from wayfinder.exceptions import InvalidNetworkError, InvalidWeightError, MissingEndpointError
from wayfinder.graph import Cell


@pytest.fixture
def network_document(sample_stations) -> dict:
    return {
        "stations": sample_stations[:3],
        "connections": [
            ["Centro", "Rodoviaria", 10],
            {"from": 1, "to": 0, "weight": 12},
            [0, "Shopping", 15],
        ],
    }


class TestLoadMaze:
    """Test reading maze files."""

    def test_reads_file(self, tmp_path, tiny_maze_lines):
        """A maze file parses to the same grid as its lines."""
        path = tmp_path / "maze.txt"
        path.write_text("\n".join(tiny_maze_lines) + "\n", encoding="utf-8")
        maze = load_maze(path)
        assert maze.rows == tuple(tiny_maze_lines)
        assert maze.start == Cell(1, 1)

    def test_missing_marker(self, tmp_path):
        """Should raise MissingEndpointError for a maze without E."""
        path = tmp_path / "maze.txt"
        path.write_text("####\n#S.#\n####\n", encoding="utf-8")
        with pytest.raises(MissingEndpointError):
            load_maze(path)

    def test_missing_file(self, tmp_path):
        """Should raise FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            load_maze(tmp_path / "nope.txt")


class TestLoadNetwork:
    """Test reading transit network documents."""

    def test_json(self, tmp_path, network_document):
        """JSON documents load with names, indices and object connections."""
        path = tmp_path / "net.json"
        path.write_text(json.dumps(network_document), encoding="utf-8")
        network = load_network(path)
        assert network.stations() == ["Centro", "Rodoviaria", "Shopping"]
        assert network.graph.edge_count == 3
        assert network.graph.has_edge(1, 0)
        assert network.graph.has_edge(0, 2)

    def test_msgpack(self, tmp_path, network_document):
        """msgpack documents load the same as JSON."""
        path = tmp_path / "net.msgpack"
        path.write_bytes(msgpack.packb(network_document))
        network = load_network(path)
        assert network.num_stations == 3
        assert network.graph.has_edge(0, 1)

    def test_unsupported_suffix(self, tmp_path):
        """Should raise ValueError for unknown file types."""
        path = tmp_path / "net.yaml"
        path.write_text("stations: []", encoding="utf-8")
        with pytest.raises(ValueError):
            load_network(path)

    @pytest.mark.parametrize("missing", ["stations", "connections"])
    def test_missing_key(self, network_document, missing):
        """Should raise InvalidNetworkError when a section is absent."""
        del network_document[missing]
        with pytest.raises(InvalidNetworkError):
            parse_network(network_document)

    def test_bad_connection_shape(self, network_document):
        """Connections must be triples or objects."""
        network_document["connections"].append(["Centro", "Shopping"])
        with pytest.raises(InvalidNetworkError):
            parse_network(network_document)

    def test_connection_missing_field(self, network_document):
        """Object connections need from, to and weight."""
        network_document["connections"].append({"from": 0, "to": 1})
        with pytest.raises(InvalidNetworkError):
            parse_network(network_document)

    def test_nan_weight_rejected(self, tmp_path, network_document):
        """A NaN travel time in JSON is rejected at load time."""
        network_document["connections"].append(["Shopping", "Centro", float("nan")])
        path = tmp_path / "net.json"
        path.write_text(json.dumps(network_document), encoding="utf-8")
        with pytest.raises(InvalidWeightError):
            load_network(path)

    def test_float_endpoint_rejected(self, network_document):
        """Connection endpoints must be names or integer indices."""
        network_document["connections"].append([1.0, "Centro", 3])
        with pytest.raises(MissingEndpointError):
            parse_network(network_document)

    def test_not_an_object(self):
        """Top level must be an object."""
        with pytest.raises(InvalidNetworkError):
            parse_network([])


@pytest.mark.skipif(
    not all(validate_data_files().values()),
    reason="Sample data files not available",
)
class TestSampleData:
    """Test the shipped sample files."""

    def test_sample_maze(self, sample_maze_lines):
        """data/maze.txt is the 10x10 demo maze."""
        maze = load_maze(DEFAULT_MAZE_PATH)
        assert maze.rows == tuple(sample_maze_lines)

    def test_sample_network(self, sample_stations):
        """data/transit.json holds ten stations and fifteen connections."""
        network = load_network(DEFAULT_NETWORK_PATH)
        assert network.stations() == sample_stations
        assert network.graph.edge_count == 15


class TestDataFileChecks:
    """Test the sample data file helpers."""

    def test_reports_missing_files(self, tmp_path, monkeypatch):
        """Missing sample files are listed by name."""
        monkeypatch.setattr(config, "DEFAULT_MAZE_PATH", tmp_path / "absent.txt")
        network_path = tmp_path / "transit.json"
        network_path.write_text("{}", encoding="utf-8")
        monkeypatch.setattr(config, "DEFAULT_NETWORK_PATH", network_path)
        assert validate_data_files() == {"maze": False, "network": True}
        assert get_missing_data_files() == ["maze"]

    def test_nothing_missing(self, tmp_path, monkeypatch):
        """An empty list when every file exists."""
        for attr in ("DEFAULT_MAZE_PATH", "DEFAULT_NETWORK_PATH"):
            path = tmp_path / attr.lower()
            path.write_text("x", encoding="utf-8")
            monkeypatch.setattr(config, attr, path)
        assert get_missing_data_files() == []
