"""CLI flags, env vars, and ``frozengraph.toml`` merged into one settings object.

Sources, highest priority first:

1. keyword arguments (the CLI flags Click parsed)
2. ``FROZENGRAPH_*`` env vars, with ``__`` between nested section names
3. the discovered or explicit TOML file
4. the defaults in :mod:`frozengraph.config.models`
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from frozengraph.config.discovery import find_config, read_toml
from frozengraph.config.models import GraphConfig, OutputConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``frozengraph.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_toml(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class FrozenGraphSettings(BaseSettings):
    """Settings for the frozengraph CLI, frozen after construction.

    Attributes:
        config_path: The TOML file that was loaded, if any.
        strict: ``--strict`` flag; combined with ``[graph] strict`` in
            :attr:`strict_edges`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FROZENGRAPH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    strict: bool = False

    # --- TOML sections ---
    graph: GraphConfig = Field(default_factory=GraphConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def strict_edges(self) -> bool:
        """Whether edge insertion on a missing vertex is an error."""
        return self.strict or self.graph.strict

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> FrozenGraphSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when given, otherwise discovers
        ``frozengraph.toml`` by walking up from *start*. CLI flags are the
        highest-priority overrides.
        """
        toml_path: Path | None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
            toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
