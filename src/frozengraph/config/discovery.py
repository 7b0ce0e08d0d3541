"""Locating and reading ``frozengraph.toml``.

An explicit ``FROZENGRAPH_CONFIG`` path wins; otherwise the nearest
``frozengraph.toml`` in the start directory or one of its parents is used.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "frozengraph.toml"
CONFIG_ENV_VAR = "FROZENGRAPH_CONFIG"


def _parents_of(start: Path) -> list[Path]:
    resolved = start.resolve()
    return [resolved, *resolved.parents]


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    A ``FROZENGRAPH_CONFIG`` that names a missing file disables discovery.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        env_path = Path(override)
        return env_path if env_path.is_file() else None

    for directory in _parents_of(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML. A syntax error becomes a ClickException."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
