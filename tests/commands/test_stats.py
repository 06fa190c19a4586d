"""Tests for the stats command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from socialtrack.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestStatsCommand:
    def test_human_output(self, cli_runner: CliRunner, dot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["stats", "-d", str(dot_file)])
        assert result.exit_code == 0, result.output
        assert "Number of Nodes: 21" in result.output
        assert "Number of Edges: 22" in result.output
        assert "Average Number of Friends: 1.05" in result.output

    def test_json_output(self, cli_runner: CliRunner, dot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "stats", "--data", str(dot_file)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["average_friends"] == 1.05

    def test_quiet_output(self, cli_runner: CliRunner, dot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "stats", "-d", str(dot_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "21 22 1.05"

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "stats", "-d", str(tmp_path / "nope.dot")])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["op"] == "load"
        assert data["error"]["code"] == "SOURCE_UNAVAILABLE"

    def test_no_data_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["stats"])
        assert result.exit_code == 2
        assert "No data file given" in result.output

    def test_data_file_from_config(
        self, cli_runner: CliRunner, tmp_path: Path, dot_file: Path
    ) -> None:
        (tmp_path / "socialtrack.toml").write_text(
            f'[graph]\ndata_file = "{dot_file.name}"\n[report]\ndecimals = 3\n'
        )
        result = cli_runner.invoke(cli, ["stats"])
        assert result.exit_code == 0, result.output
        assert "Average Number of Friends: 1.048" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["stats", "--examples"])
        assert result.exit_code == 0
        assert "socialtrack stats -d socialnetwork.dot" in result.output

    def test_non_finite_weight_in_config(
        self, cli_runner: CliRunner, tmp_path: Path, dot_file: Path
    ) -> None:
        (tmp_path / "socialtrack.toml").write_text(
            f'[graph]\ndata_file = "{dot_file.name}"\ndefault_weight = inf\n'
        )
        result = cli_runner.invoke(cli, ["stats"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert not isinstance(result.exception, ValueError)
