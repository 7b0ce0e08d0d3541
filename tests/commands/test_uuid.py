"""Tests for the uuid command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from frozengraph.cli import cli
from frozengraph.domain.ids import validate_uuid


@pytest.mark.usefixtures("isolated_cwd")
class TestUuidCommand:
    def test_single(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "uuid"])
        assert result.exit_code == 0
        assert validate_uuid(result.stdout.strip())

    def test_count(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "uuid", "--count", "3"])
        data = json.loads(result.stdout)
        assert data["data"]["count"] == 3
        assert all(validate_uuid(v) for v in data["data"]["ids"])

    def test_invalid_count(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["uuid", "-n", "0"])
        assert result.exit_code == 1
        assert "Count must be at least 1" in result.stderr
