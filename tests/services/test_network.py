"""Tests for NetworkService — load, stats, connection."""

from __future__ import annotations

from pathlib import Path

import pytest

from socialtrack.domain.graph import GraphStore
from socialtrack.infrastructure.network import SocialNetwork
from socialtrack.services.network import NetworkService, format_summary
from tests.conftest import build_store


@pytest.fixture
def loaded(network: SocialNetwork, dot_file: Path) -> NetworkService:
    svc = NetworkService(network)
    assert svc.load(dot_file).ok
    return svc


def _service_over(store: GraphStore[str]) -> NetworkService:
    return NetworkService(SocialNetwork(store=store))


class TestLoad:
    def test_load_ok(self, network: SocialNetwork, dot_file: Path) -> None:
        result = NetworkService(network).load(dot_file)
        assert result.ok
        assert result.op == "load"
        assert result.data["path"] == str(dot_file)
        assert result.data["node_count"] == 21
        assert result.data["edge_count"] == 22
        assert result.data["edges_read"] == 22
        assert result.warnings == []

    def test_missing_file_reported(self, network: SocialNetwork, tmp_path: Path) -> None:
        result = NetworkService(network).load(tmp_path / "incorrectFile")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "SOURCE_UNAVAILABLE"
        assert "incorrectFile" in result.error.message
        assert result.error.detail["nodes_added"] == 0
        assert network.is_empty

    def test_missing_file_keeps_earlier_data(self, loaded: NetworkService, tmp_path: Path) -> None:
        assert not loaded.load(tmp_path / "nope.dot").ok
        assert loaded.stats().data["node_count"] == 21

    def test_empty_file_warns(self, network: SocialNetwork, tmp_path: Path) -> None:
        path = tmp_path / "empty.dot"
        path.write_text("graph g {\n}\n", encoding="utf-8")
        result = NetworkService(network).load(path)
        assert result.ok
        assert result.data["edges_read"] == 0
        assert len(result.warnings) == 1

    def test_unusable_default_weight(self, dot_file: Path) -> None:
        network = SocialNetwork(default_weight=float("inf"))
        result = NetworkService(network).load(dot_file)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"
        assert result.error.detail["weight"] == "inf"
        assert network.is_empty


class TestStats:
    def test_average_to_two_decimals(self, loaded: NetworkService) -> None:
        result = loaded.stats()
        assert result.ok
        assert result.data["node_count"] == 21
        assert result.data["edge_count"] == 22
        assert result.data["average_friends"] == 1.05
        assert result.data["summary"] == (
            "Number of Nodes: 21\nNumber of Edges: 22\nAverage Number of Friends: 1.05"
        )

    def test_decimals(self, loaded: NetworkService) -> None:
        result = loaded.stats(decimals=3)
        assert result.data["average_friends"] == 1.048
        assert result.data["summary"].endswith("1.048")

    def test_empty_graph(self, network: SocialNetwork) -> None:
        result = NetworkService(network).stats()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "EMPTY_GRAPH"

    def test_duplicate_nodes_counted_once(self) -> None:
        result = _service_over(build_store()).stats()
        assert result.data["node_count"] == 10
        assert result.data["edge_count"] == 15

    def test_format_summary(self) -> None:
        assert format_summary(4, 2, 0.5) == (
            "Number of Nodes: 4\nNumber of Edges: 2\nAverage Number of Friends: 0.50"
        )


class TestConnection:
    def test_path_and_intermediaries(self) -> None:
        result = _service_over(build_store()).connection("D", "E")
        assert result.ok
        assert result.op == "connection"
        assert result.data["path"] == ["D", "A", "B", "M", "E"]
        assert result.data["cost"] == 14
        assert result.data["length"] == 4
        assert result.data["intermediary_count"] == 3

    def test_adjacent(self, loaded: NetworkService) -> None:
        result = loaded.connection("user0", "user1")
        assert result.data["path"] == ["user0", "user1"]
        assert result.data["intermediary_count"] == 0

    def test_uses_chords(self, loaded: NetworkService) -> None:
        result = loaded.connection("user0", "user15")
        # user0 .. user5 -- user15 and user0 -- user10 .. user15 both cost 6.
        assert result.data["cost"] == 6
        assert result.data["path"][0] == "user0"
        assert result.data["path"][-1] == "user15"

    def test_same_person(self, loaded: NetworkService) -> None:
        result = loaded.connection("user3", "user3")
        assert result.ok
        assert result.data["path"] == ["user3"]
        assert result.data["intermediary_count"] == 0

    def test_names_are_stripped(self, loaded: NetworkService) -> None:
        assert loaded.connection("  user0 ", "user1\n").ok

    def test_unknown_person(self, loaded: NetworkService) -> None:
        result = loaded.connection("user0", "nobody")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail["label"] == "nobody"

    def test_no_path(self) -> None:
        store = build_store(people=["a", "b", "z"], friendships=[("a", "b", 1)])
        result = _service_over(store).connection("a", "z")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_PATH"

    def test_blank_name(self, loaded: NetworkService) -> None:
        result = loaded.connection("user0", "   ")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"
