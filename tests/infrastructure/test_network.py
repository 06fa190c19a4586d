"""Tests for SocialNetwork — store, engine, and loaded sources."""

from __future__ import annotations

from pathlib import Path

import pytest

from socialtrack.domain.errors import SourceUnavailableError
from socialtrack.infrastructure.network import SocialNetwork


class TestSocialNetwork:
    def test_starts_empty(self, network: SocialNetwork) -> None:
        assert network.is_empty
        assert network.sources == []

    def test_load_records_source(self, network: SocialNetwork, dot_file: Path) -> None:
        report = network.load(dot_file)
        assert report.nodes_added == 21
        assert not network.is_empty
        assert network.sources == [dot_file]

    def test_engine_is_shared(self, network: SocialNetwork) -> None:
        assert network.engine is network.engine

    def test_engine_searches_loaded_data(self, network: SocialNetwork, dot_file: Path) -> None:
        network.load(dot_file)
        # user0 -- user10 is a chord.
        assert network.engine.shortest_path_labels("user0", "user10") == ["user0", "user10"]

    def test_default_weight_applies(self, dot_file: Path) -> None:
        network = SocialNetwork(default_weight=3)
        network.load(dot_file)
        assert network.engine.shortest_path_cost("user0", "user1") == 3

    def test_failed_load_not_recorded(self, network: SocialNetwork, tmp_path: Path) -> None:
        with pytest.raises(SourceUnavailableError):
            network.load(tmp_path / "missing.dot")
        assert network.sources == []
