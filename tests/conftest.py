"""Shared pytest fixtures and test helpers for frozengraph tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from frozengraph.domain.graph import Graph, add_vertex, create_graph


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by the CLI under test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("frozengraph")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp directory with no frozengraph env overrides.

    Use via ``@pytest.mark.usefixtures("isolated_cwd")`` so config discovery
    never picks up a frozengraph.toml outside the test.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("FROZENGRAPH_CONFIG", "FROZENGRAPH_STRICT", "FROZENGRAPH_GRAPH__STRICT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def ab_graph() -> Graph[dict[str, Any]]:
    """Two unconnected vertices, A and B."""
    g = add_vertex(create_graph(), "A", {"name": "Alpha"})
    return add_vertex(g, "B", {"name": "Beta"})
