"""Tests for the demo command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from frozengraph.cli import cli
from frozengraph.domain.samples import REGION_BORDERS


@pytest.mark.usefixtures("isolated_cwd")
class TestDemoCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert "capital=Sydney" in result.stdout
        assert "8 vertices" in result.stdout

    @pytest.mark.parametrize("build", ["literal", "imperative"])
    def test_json_dump(self, cli_runner: CliRunner, build: str) -> None:
        result = cli_runner.invoke(cli, ["--json", "demo", "--build", build])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "show_graph"
        assert data["data"]["adjacency"] == REGION_BORDERS
        assert data["data"]["vertices"]["SA"]["capital"] == "Adelaide"

    def test_extra_edges(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "demo", "--edge", "TAS", "VIC", "--directed-edge", "ACT", "TAS"],
        )
        adjacency = json.loads(result.stdout)["data"]["adjacency"]
        assert adjacency["TAS"] == ["VIC"]
        assert adjacency["VIC"] == ["NSW", "SA", "TAS"]
        assert adjacency["ACT"] == ["NSW", "TAS"]

    def test_missing_vertex_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["demo", "--edge", "TAS", "NZ"])
        assert result.exit_code == 0
        assert "WARNING" in result.stderr
        assert "'NZ'" in result.stderr

    def test_missing_vertex_warning_in_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "demo", "--edge", "TAS", "NZ"])
        data = json.loads(result.stdout)
        assert len(data["warnings"]) == 1
        assert data["data"]["adjacency"]["TAS"] == []

    def test_missing_vertex_strict(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "--strict", "demo", "--edge", "TAS", "NZ"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "VERTEX_NOT_FOUND"
        assert result.stdout == ""

    def test_strict_from_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "frozengraph.toml").write_text("[graph]\nstrict = true\n")
        result = cli_runner.invoke(cli, ["demo", "--edge", "TAS", "NZ"])
        assert result.exit_code == 1
        assert "Vertex not found" in result.stderr

    def test_summary(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "demo", "--summary"])
        data = json.loads(result.stdout)
        assert data["op"] == "summary"
        assert data["data"]["edge_count"] == 20
        assert data["data"]["isolated"] == ["TAS"]

    def test_quiet_lists_ids(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "demo"])
        assert result.stdout.split() == list(REGION_BORDERS)

    def test_invalid_build(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["demo", "--build", "random"])
        assert result.exit_code == 2
